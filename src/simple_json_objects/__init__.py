"""Simple JSON Objects.

Materializes streams of primitive parse tokens into trees of plain Python
containers and scalars, without declaring a target schema.

Progressive API Disclosure:
- Level 1: Simple functions - any_from(), map_from(), list_from(), array_from()
- Level 2: Configured facade - JSONObjects with features, hooks and builders
- Level 3: Blueprint reader - ValueReader.bind() over any TokenSource
"""

__version__ = "0.1.0"
__author__ = "Simple JSON Objects Team"

# Level 1 and 2
from .api import JSONObjects, any_from, array_from, list_from, map_from

# Configuration and errors
from .shared import (
    DuplicateKeyError,
    Feature,
    JSONObjectError,
    NestingDepthError,
    ReaderConfig,
    TypeMismatchError,
    UnexpectedTokenError,
)

# Level 3
from .tokenization import JsonTokenSource, TokenSource, TokenStream, TokenType
from .tree import KeyedBuilder, SequenceBuilder, ValueHooks, ValueReader

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple reading functions
    "any_from",
    "map_from",
    "list_from",
    "array_from",

    # Level 2: Configured facade
    "JSONObjects",
    "Feature",
    "ReaderConfig",

    # Level 3: Blueprint reader and collaborators
    "ValueReader",
    "KeyedBuilder",
    "SequenceBuilder",
    "ValueHooks",
    "TokenSource",
    "TokenStream",
    "JsonTokenSource",
    "TokenType",

    # Errors
    "JSONObjectError",
    "TypeMismatchError",
    "UnexpectedTokenError",
    "DuplicateKeyError",
    "NestingDepthError",
]
