"""Tests for reader exception types."""

from simple_json_objects.shared import (
    DuplicateKeyError,
    JSONObjectError,
    NestingDepthError,
    TypeMismatchError,
    UnexpectedTokenError,
)
from simple_json_objects.tokenization import TokenPosition, TokenType


def test_base_error_without_position() -> None:
    """Test message is left untouched without a position."""
    error = JSONObjectError("broken")

    assert str(error) == "broken"
    assert error.position is None


def test_base_error_with_position() -> None:
    """Test position is appended to the message."""
    error = JSONObjectError("broken", TokenPosition(3, 7, 40))

    assert str(error) == "broken (at line 3, column 7)"
    assert error.position.offset == 40


def test_type_mismatch() -> None:
    """Test type mismatch message and attributes."""
    error = TypeMismatchError(TokenType.START_OBJECT, TokenType.START_ARRAY, "Map")

    assert str(error) == "Can not read Map: expected START_OBJECT, instead got: START_ARRAY"
    assert error.expected is TokenType.START_OBJECT
    assert error.actual is TokenType.START_ARRAY
    assert error.target == "Map"
    assert isinstance(error, JSONObjectError)


def test_type_mismatch_at_end_of_input() -> None:
    """Test missing token is reported as end of input."""
    error = TypeMismatchError(TokenType.START_ARRAY, None, "List")

    assert "instead got: end-of-input" in str(error)


def test_unexpected_token() -> None:
    error = UnexpectedTokenError(TokenType.END_OBJECT)

    assert str(error) == "Unexpected value token: END_OBJECT"
    assert error.token is TokenType.END_OBJECT
    assert "end-of-input" in str(UnexpectedTokenError(None))


def test_duplicate_key() -> None:
    error = DuplicateKeyError("a", TokenPosition(1, 9, 8))

    assert str(error) == "Duplicate object key: 'a' (at line 1, column 9)"
    assert error.key == "a"


def test_nesting_depth() -> None:
    error = NestingDepthError(5, 4)

    assert str(error) == "Nesting depth 5 exceeds the maximum of 4"
    assert (error.depth, error.limit) == (5, 4)
