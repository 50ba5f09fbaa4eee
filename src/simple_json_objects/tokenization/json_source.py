"""Token source adapter over the ijson event stream.

ijson parses JSON text incrementally and reports ``(prefix, event, value)``
triples; this adapter maps those events onto the primitive token kinds the
value reader consumes. Parse errors raised by ijson propagate unchanged.
"""

import io
from decimal import Decimal
from pathlib import Path
from typing import IO, Any, Iterator, Optional, Tuple, Union

import ijson

from .source import TokenSource
from .tokens import NumberType, Token, TokenType, classify_number

JSONInput = Union[str, bytes, bytearray, IO[bytes], IO[str]]

_STRUCTURE_EVENTS = {
    "start_map": TokenType.START_OBJECT,
    "end_map": TokenType.END_OBJECT,
    "start_array": TokenType.START_ARRAY,
    "end_array": TokenType.END_ARRAY,
}

_NUMBER_EVENTS = frozenset({"number", "integer", "double"})


def _as_binary_stream(data: JSONInput) -> IO[bytes]:
    if isinstance(data, str):
        return io.BytesIO(data.encode("utf-8"))
    if isinstance(data, (bytes, bytearray)):
        return io.BytesIO(bytes(data))
    if isinstance(data, io.TextIOBase):
        return io.BytesIO(data.read().encode("utf-8"))
    if hasattr(data, "read"):
        return data
    raise TypeError(f"Unsupported JSON input type: {type(data).__name__}")


def event_to_token(event: str, value: Any) -> Token:
    """Convert one ijson event into a token."""
    if event in _STRUCTURE_EVENTS:
        return Token(_STRUCTURE_EVENTS[event])
    if event == "map_key":
        return Token(TokenType.FIELD_NAME, value)
    if event == "string":
        return Token(TokenType.VALUE_STRING, value)
    if event == "null":
        return Token(TokenType.VALUE_NULL)
    if event == "boolean":
        return Token(TokenType.VALUE_TRUE if value else TokenType.VALUE_FALSE)
    if event in _NUMBER_EVENTS:
        if isinstance(value, int):
            return Token(TokenType.VALUE_NUMBER_INT, value, classify_number(value))
        # JSON text carries no single-precision marker
        if isinstance(value, (float, Decimal)):
            return Token(TokenType.VALUE_NUMBER_FLOAT, value, NumberType.DOUBLE)
    raise ValueError(f"Unsupported ijson event: {event}")


class JsonTokenSource(TokenSource):
    """Token source reading JSON text through ijson.

    The source starts unpositioned; call ``next_token()`` once before handing
    it to a bound reader.
    """

    def __init__(self, data: JSONInput) -> None:
        super().__init__()
        self._stream = _as_binary_stream(data)
        self._events: Iterator[Tuple[str, str, Any]] = ijson.parse(self._stream)
        self._owns_stream = self._stream is not data

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "JsonTokenSource":
        """Open a JSON file; the source closes it on close()."""
        source = cls(Path(path).open("rb"))
        source._owns_stream = True
        return source

    def _advance(self) -> Optional[Token]:
        event = next(self._events, None)
        if event is None:
            return None
        _, name, value = event
        return event_to_token(name, value)

    def close(self) -> None:
        super().close()
        if self._owns_stream:
            self._stream.close()
