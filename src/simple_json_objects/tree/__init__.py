"""Generic value tree construction from token streams.

Key Components:
    ValueReader: Immutable blueprint holding configuration, builders and hooks
    BoundReader: Per-operation reader that walks a token source
    KeyedBuilder: Builder strategy for keyed collections
    SequenceBuilder: Builder strategy for sequences and fixed arrays
    ValueHooks: Overridable scalar and key conversion hooks
"""

from .builders import (
    KeyedAccumulator,
    KeyedBuilder,
    SequenceAccumulator,
    SequenceBuilder,
)
from .hooks import InterningHooks, ValueHooks
from .reader import BoundReader, ValueReader

__all__ = [
    "BoundReader",
    "InterningHooks",
    "KeyedAccumulator",
    "KeyedBuilder",
    "SequenceAccumulator",
    "SequenceBuilder",
    "ValueHooks",
    "ValueReader",
]
