"""Tests for the token source base class and the in-memory token stream."""

from decimal import Decimal

import pytest

from simple_json_objects.shared import JSONObjectError
from simple_json_objects.tokenization import NumberType, TokenStream, TokenType
from simple_json_objects.tokenization import tokens as t


class TestTokenStreamCursor:
    """Test cursor movement and field name tracking."""

    def test_unpositioned_stream(self) -> None:
        """Test a new stream has no current token."""
        stream = TokenStream([t.null()])

        assert stream.current_token is None
        assert stream.next_token() is TokenType.VALUE_NULL
        assert stream.next_token() is None
        assert stream.current_token is None

    def test_next_value_skips_field_name(self) -> None:
        """Test next_value lands on the value and remembers its field name."""
        stream = TokenStream.positioned([
            t.start_object(), t.field_name("a"), t.number(1), t.end_object(),
        ])

        assert stream.next_value() is TokenType.VALUE_NUMBER_INT
        assert stream.current_name == "a"
        assert stream.next_value() is TokenType.END_OBJECT
        assert stream.current_name is None

    def test_current_name_cleared_for_array_elements(self) -> None:
        """Test elements of an array value have no field name."""
        stream = TokenStream.positioned([
            t.start_object(), t.field_name("list"), t.start_array(),
            t.number(1), t.end_array(), t.end_object(),
        ])

        assert stream.next_value() is TokenType.START_ARRAY
        assert stream.current_name == "list"
        assert stream.next_token() is TokenType.VALUE_NUMBER_INT
        assert stream.current_name is None

    def test_close_ends_stream(self) -> None:
        """Test a closed stream reports end of input."""
        with TokenStream([t.null(), t.null()]) as stream:
            stream.next_token()

        assert stream.next_token() is None


class TestTokenStreamAccessors:
    """Test scalar accessors."""

    def test_get_text(self) -> None:
        """Test text for each token kind."""
        stream = TokenStream([
            t.field_name("name"), t.string("value"), t.number(12),
            t.boolean(True), t.start_array(),
        ])
        texts = []
        while stream.next_token() is not None:
            texts.append(stream.get_text())

        assert texts == ["name", "value", "12", "true", "["]

    def test_integer_accessors(self) -> None:
        """Test integral value and number type."""
        stream = TokenStream.positioned([t.number(2 ** 70)])

        assert stream.get_number_type() is NumberType.BIG_INTEGER
        assert stream.get_int_value() == 2 ** 70

    def test_float_accessors(self) -> None:
        """Test single, double and decimal views of one float."""
        stream = TokenStream.positioned([t.number(0.1)])

        assert stream.get_double_value() == 0.1
        assert stream.get_float_value() == pytest.approx(0.1, rel=1e-7)
        assert stream.get_float_value() != 0.1
        assert stream.get_decimal_value() == Decimal("0.1")

    def test_decimal_from_integer_and_decimal(self) -> None:
        """Test decimal view of other numeric values."""
        assert TokenStream.positioned([t.number(5)]).get_decimal_value() == Decimal(5)
        exact = Decimal("1.000000000000000000001")
        assert TokenStream.positioned([t.number(exact)]).get_decimal_value() is exact

    def test_embedded_object(self) -> None:
        """Test embedded object access."""
        payload = {"opaque": True}

        assert TokenStream.positioned([t.embedded(payload)]).get_embedded_object() is payload

    def test_accessor_on_wrong_token_raises(self) -> None:
        """Test typed accessors reject other token kinds."""
        stream = TokenStream.positioned([t.string("x")])

        with pytest.raises(JSONObjectError, match="not a number: VALUE_STRING"):
            stream.get_int_value()
        with pytest.raises(JSONObjectError, match="not an embedded value"):
            stream.get_embedded_object()

    def test_int_value_on_float_raises(self) -> None:
        """Test get_int_value requires an integral token."""
        with pytest.raises(JSONObjectError, match="not an integral number"):
            TokenStream.positioned([t.number(1.5)]).get_int_value()
