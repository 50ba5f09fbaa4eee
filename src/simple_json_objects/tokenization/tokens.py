"""Token types and token values produced by streaming parsers.

This module defines the primitive parse events a token source exposes to the
value reader, together with the magnitude classification used for numbers.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto
from typing import Any, Optional, Union

# Bounds for magnitude classification of integral numbers
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1
LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1

Number = Union[int, float, Decimal]


class TokenType(Enum):
    """Primitive token kinds of a generic streaming parser."""

    START_OBJECT = auto()           # Start of an object: {
    END_OBJECT = auto()             # End of an object: }
    START_ARRAY = auto()            # Start of an array: [
    END_ARRAY = auto()              # End of an array: ]
    FIELD_NAME = auto()             # Object field name
    VALUE_STRING = auto()           # String scalar
    VALUE_NUMBER_INT = auto()       # Integral number
    VALUE_NUMBER_FLOAT = auto()     # Floating-point number
    VALUE_TRUE = auto()             # Boolean true
    VALUE_FALSE = auto()            # Boolean false
    VALUE_NULL = auto()             # Null
    VALUE_EMBEDDED_OBJECT = auto()  # Opaque value materialized by the source
    NOT_AVAILABLE = auto()          # Source cannot provide a token yet


class NumberType(Enum):
    """Magnitude/precision classes for numeric tokens."""

    INT = auto()          # Fits in 32 bits
    LONG = auto()         # Fits in 64 bits
    BIG_INTEGER = auto()  # Arbitrary precision integer
    FLOAT = auto()        # Single precision
    DOUBLE = auto()       # Double precision
    BIG_DECIMAL = auto()  # Arbitrary precision decimal


def classify_integer(value: int) -> NumberType:
    """Return the smallest integral number type that can hold *value*."""
    if INT_MIN <= value <= INT_MAX:
        return NumberType.INT
    if LONG_MIN <= value <= LONG_MAX:
        return NumberType.LONG
    return NumberType.BIG_INTEGER


def classify_number(value: Number) -> NumberType:
    """Return the native number type for a Python numeric value."""
    if isinstance(value, bool):
        raise TypeError("Boolean is not a numeric token value")
    if isinstance(value, int):
        return classify_integer(value)
    if isinstance(value, Decimal):
        return NumberType.BIG_DECIMAL
    if isinstance(value, float):
        return NumberType.DOUBLE
    raise TypeError(f"Unsupported numeric value: {type(value).__name__}")


@dataclass(frozen=True)
class TokenPosition:
    """Position information for tokens."""

    line: int
    column: int
    offset: int

    def __post_init__(self) -> None:
        """Validate position values."""
        if self.line < 1:
            raise ValueError("Line number must be >= 1")
        if self.column < 1:
            raise ValueError("Column number must be >= 1")
        if self.offset < 0:
            raise ValueError("Offset must be >= 0")


@dataclass(frozen=True)
class Token:
    """A single token with its value and optional source position.

    ``value`` holds the field name for FIELD_NAME, the text for VALUE_STRING,
    the number for numeric tokens and the embedded object for
    VALUE_EMBEDDED_OBJECT. ``number_type`` overrides the classification that
    would otherwise be derived from the numeric value.
    """

    type: TokenType
    value: Any = None
    number_type: Optional[NumberType] = None
    position: Optional[TokenPosition] = None

    def __post_init__(self) -> None:
        """Validate token values."""
        if self.type is TokenType.FIELD_NAME and not isinstance(self.value, str):
            raise ValueError("Field name token requires a string value")
        if self.type is TokenType.VALUE_STRING and not isinstance(self.value, str):
            raise ValueError("String token requires a string value")
        if self.type in (TokenType.VALUE_NUMBER_INT, TokenType.VALUE_NUMBER_FLOAT):
            if isinstance(self.value, bool) or not isinstance(
                self.value, (int, float, Decimal)
            ):
                raise ValueError("Number token requires a numeric value")
        if self.number_type is not None and self.type not in (
            TokenType.VALUE_NUMBER_INT, TokenType.VALUE_NUMBER_FLOAT
        ):
            raise ValueError("Only number tokens can carry a number type")

    @property
    def resolved_number_type(self) -> Optional[NumberType]:
        """Get the number type, classifying the value when not set explicitly."""
        if self.number_type is not None:
            return self.number_type
        if self.type is TokenType.VALUE_NUMBER_INT:
            return classify_number(int(self.value))
        if self.type is TokenType.VALUE_NUMBER_FLOAT:
            # An integral value in a floating token is still a double
            if isinstance(self.value, int):
                return NumberType.DOUBLE
            return classify_number(self.value)
        return None


# Factory helpers for building token sequences by hand

def start_object() -> Token:
    return Token(TokenType.START_OBJECT)


def end_object() -> Token:
    return Token(TokenType.END_OBJECT)


def start_array() -> Token:
    return Token(TokenType.START_ARRAY)


def end_array() -> Token:
    return Token(TokenType.END_ARRAY)


def field_name(name: str) -> Token:
    return Token(TokenType.FIELD_NAME, name)


def string(text: str) -> Token:
    return Token(TokenType.VALUE_STRING, text)


def number(value: Number, number_type: Optional[NumberType] = None) -> Token:
    """Build an integral or floating token depending on the value's Python type."""
    if isinstance(value, int) and not isinstance(value, bool):
        return Token(TokenType.VALUE_NUMBER_INT, value, number_type)
    return Token(TokenType.VALUE_NUMBER_FLOAT, value, number_type)


def boolean(flag: bool) -> Token:
    return Token(TokenType.VALUE_TRUE if flag else TokenType.VALUE_FALSE)


def null() -> Token:
    return Token(TokenType.VALUE_NULL)


def embedded(value: Any) -> Token:
    return Token(TokenType.VALUE_EMBEDDED_OBJECT, value)
