"""Token source interface and the in-memory token stream implementation.

A token source is positioned at one token at a time and only moves forward.
The value reader reads the current token kind, the associated field name,
scalar values and the magnitude classification of numbers through it.
"""

import struct
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Iterable, Iterator, Optional

from simple_json_objects.shared.errors import JSONObjectError

from .tokens import NumberType, Token, TokenPosition, TokenType

_NUMERIC_TOKENS = (TokenType.VALUE_NUMBER_INT, TokenType.VALUE_NUMBER_FLOAT)

_TOKEN_TEXT = {
    TokenType.START_OBJECT: "{",
    TokenType.END_OBJECT: "}",
    TokenType.START_ARRAY: "[",
    TokenType.END_ARRAY: "]",
    TokenType.VALUE_TRUE: "true",
    TokenType.VALUE_FALSE: "false",
    TokenType.VALUE_NULL: "null",
}


class TokenSource(ABC):
    """Forward-only cursor over a stream of tokens.

    Subclasses supply tokens through ``_advance``; this base class keeps the
    current token, tracks the field name associated with it and provides
    typed accessors for scalar values.
    """

    def __init__(self) -> None:
        self._current: Optional[Token] = None
        self._current_name: Optional[str] = None
        self._closed = False

    @abstractmethod
    def _advance(self) -> Optional[Token]:
        """Produce the next token, or None at end of input."""

    # -- Cursor movement ------------------------------------------------

    def next_token(self) -> Optional[TokenType]:
        """Advance to the next token and return its type (None at end of input)."""
        previous = self._current
        token = self._advance() if not self._closed else None
        self._current = token
        if token is None:
            self._current_name = None
        elif token.type is TokenType.FIELD_NAME:
            self._current_name = token.value
        elif previous is None or previous.type is not TokenType.FIELD_NAME:
            self._current_name = None
        return token.type if token is not None else None

    def next_value(self) -> Optional[TokenType]:
        """Advance to the next value token, stepping over a field name.

        After this call ``current_name`` holds the name of the field whose
        value is current, if the value belongs to an object.
        """
        token_type = self.next_token()
        if token_type is TokenType.FIELD_NAME:
            token_type = self.next_token()
        return token_type

    # -- Current token accessors ----------------------------------------

    @property
    def current_token(self) -> Optional[TokenType]:
        return self._current.type if self._current is not None else None

    @property
    def current_name(self) -> Optional[str]:
        return self._current_name

    def token_position(self) -> Optional[TokenPosition]:
        return self._current.position if self._current is not None else None

    def get_text(self) -> Optional[str]:
        """Get the textual representation of the current token."""
        token = self._current
        if token is None:
            return None
        if token.type in (TokenType.FIELD_NAME, TokenType.VALUE_STRING):
            return token.value
        if token.type in _NUMERIC_TOKENS:
            return str(token.value)
        return _TOKEN_TEXT.get(token.type)

    def get_number_type(self) -> NumberType:
        return self._require_number().resolved_number_type

    def get_int_value(self) -> int:
        """Get the current integral value at any magnitude."""
        token = self._require_number()
        if token.type is not TokenType.VALUE_NUMBER_INT:
            raise self._error("Current token is not an integral number")
        return int(token.value)

    def get_float_value(self) -> float:
        """Get the current number rounded to single precision."""
        value = float(self._require_number().value)
        return struct.unpack("f", struct.pack("f", value))[0]

    def get_double_value(self) -> float:
        return float(self._require_number().value)

    def get_decimal_value(self) -> Decimal:
        """Get the current number as an exact decimal."""
        value = self._require_number().value
        if isinstance(value, Decimal):
            return value
        if isinstance(value, float):
            # Shortest repr round-trips, so 3.14 becomes Decimal("3.14")
            return Decimal(repr(value))
        return Decimal(value)

    def get_embedded_object(self) -> Any:
        token = self._current
        if token is None or token.type is not TokenType.VALUE_EMBEDDED_OBJECT:
            raise self._error("Current token is not an embedded value")
        return token.value

    # -- Resource handling ----------------------------------------------

    def close(self) -> None:
        """Release the source; further advances report end of input."""
        self._closed = True

    def __enter__(self) -> "TokenSource":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -- Internal helpers -----------------------------------------------

    def _require_number(self) -> Token:
        token = self._current
        if token is None or token.type not in _NUMERIC_TOKENS:
            raise self._error("Current token is not a number")
        return token

    def _error(self, message: str) -> JSONObjectError:
        current = self.current_token
        name = current.name if current is not None else "end-of-input"
        return JSONObjectError(f"{message}: {name}", self.token_position())


class TokenStream(TokenSource):
    """Token source over an in-memory sequence of tokens."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        super().__init__()
        self._tokens: Iterator[Token] = iter(tokens)

    def _advance(self) -> Optional[Token]:
        return next(self._tokens, None)

    @classmethod
    def positioned(cls, tokens: Iterable[Token]) -> "TokenStream":
        """Create a stream already advanced to its first token."""
        stream = cls(tokens)
        stream.next_token()
        return stream
