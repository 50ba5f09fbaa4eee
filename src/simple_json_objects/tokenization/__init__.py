"""Token model and token sources for generic value reading.

Key Components:
    TokenType: Primitive token kinds (structure markers, field names, scalars)
    NumberType: Magnitude classification for numeric tokens
    Token: A single token with value and optional position
    TokenSource: Forward-only cursor interface consumed by the value reader
    TokenStream: In-memory token source over a sequence of tokens
    JsonTokenSource: Token source reading JSON text through ijson
"""

from .json_source import JsonTokenSource, event_to_token
from .source import TokenSource, TokenStream
from .tokens import (
    NumberType,
    Token,
    TokenPosition,
    TokenType,
    classify_integer,
    classify_number,
)

__all__ = [
    "JsonTokenSource",
    "NumberType",
    "Token",
    "TokenPosition",
    "TokenSource",
    "TokenStream",
    "TokenType",
    "classify_integer",
    "classify_number",
    "event_to_token",
]
