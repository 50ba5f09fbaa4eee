"""Tests for the ijson-backed token source."""

import io
from decimal import Decimal
from pathlib import Path

import ijson
import pytest

from simple_json_objects.tokenization import (
    JsonTokenSource,
    NumberType,
    TokenType,
    event_to_token,
)


def token_types(text: str):
    source = JsonTokenSource(text)
    types = []
    while source.next_token() is not None:
        types.append(source.current_token)
    return types


class TestEventMapping:
    """Test ijson event to token conversion."""

    def test_structure_and_scalars(self) -> None:
        """Test token kinds for a mixed document."""
        assert token_types('{"a": [1, 2.5, true, false, null, "x"]}') == [
            TokenType.START_OBJECT,
            TokenType.FIELD_NAME,
            TokenType.START_ARRAY,
            TokenType.VALUE_NUMBER_INT,
            TokenType.VALUE_NUMBER_FLOAT,
            TokenType.VALUE_TRUE,
            TokenType.VALUE_FALSE,
            TokenType.VALUE_NULL,
            TokenType.VALUE_STRING,
            TokenType.END_ARRAY,
            TokenType.END_OBJECT,
        ]

    def test_integer_magnitudes(self) -> None:
        """Test integers are classified by magnitude."""
        source = JsonTokenSource(f"[1, {2 ** 40}, {2 ** 70}]")
        source.next_token()
        kinds = []
        while source.next_token() is TokenType.VALUE_NUMBER_INT:
            kinds.append(source.get_number_type())

        assert kinds == [NumberType.INT, NumberType.LONG, NumberType.BIG_INTEGER]

    def test_floats_are_double_with_exact_decimal(self) -> None:
        """Test JSON floats report DOUBLE and keep the exact decimal text."""
        source = JsonTokenSource("3.14")
        source.next_token()

        assert source.get_number_type() is NumberType.DOUBLE
        assert source.get_double_value() == 3.14
        assert source.get_decimal_value() == Decimal("3.14")

    def test_unknown_event_raises(self) -> None:
        """Test unsupported events are rejected."""
        with pytest.raises(ValueError, match="Unsupported ijson event"):
            event_to_token("mystery", None)


class TestInputs:
    """Test accepted input kinds."""

    def test_bytes_input(self) -> None:
        """Test bytes input."""
        assert token_types(b'"x"') == [TokenType.VALUE_STRING]

    def test_text_stream_input(self) -> None:
        """Test text file-like input is encoded for ijson."""
        source = JsonTokenSource(io.StringIO('{"k": "v"}'))
        source.next_value()

        assert source.next_value() is TokenType.VALUE_STRING
        assert source.current_name == "k"
        assert source.get_text() == "v"

    def test_binary_stream_input_left_open(self) -> None:
        """Test caller-owned streams are not closed."""
        stream = io.BytesIO(b"[]")
        source = JsonTokenSource(stream)
        source.close()

        assert not stream.closed

    def test_from_path(self, tmp_path: Path) -> None:
        """Test reading from a file path closes the file on close()."""
        path = tmp_path / "doc.json"
        path.write_text('{"ok": true}', encoding="utf-8")

        with JsonTokenSource.from_path(path) as source:
            assert source.next_token() is TokenType.START_OBJECT

        assert source._stream.closed

    def test_unsupported_input_type(self) -> None:
        """Test non-JSON inputs are rejected."""
        with pytest.raises(TypeError, match="Unsupported JSON input type"):
            JsonTokenSource(42)  # type: ignore[arg-type]

    def test_malformed_input_propagates_ijson_error(self) -> None:
        """Test parse errors surface unchanged."""
        source = JsonTokenSource('{"a": }')

        with pytest.raises(ijson.JSONError):
            while source.next_token() is not None:
                pass
