"""Exception types raised while materializing generic values.

All of these are fatal to the read operation that raised them; nothing built
before the failure is returned to the caller.
"""

from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from simple_json_objects.tokenization.tokens import TokenPosition, TokenType


class JSONObjectError(Exception):
    """Base exception for generic value reading failures."""

    def __init__(self, message: str, position: Optional["TokenPosition"] = None):
        if position is not None:
            message = f"{message} (at line {position.line}, column {position.column})"
        super().__init__(message)
        self.position = position


class TypeMismatchError(JSONObjectError):
    """A typed read was requested but the current token cannot start that type."""

    def __init__(
        self,
        expected: "TokenType",
        actual: Optional["TokenType"],
        target: str,
        position: Optional["TokenPosition"] = None,
    ):
        actual_name = actual.name if actual is not None else "end-of-input"
        super().__init__(
            f"Can not read {target}: expected {expected.name}, instead got: {actual_name}",
            position,
        )
        self.expected = expected
        self.actual = actual
        self.target = target


class UnexpectedTokenError(JSONObjectError):
    """The current token cannot start a value."""

    def __init__(
        self,
        token: Optional["TokenType"],
        position: Optional["TokenPosition"] = None,
    ):
        name = token.name if token is not None else "end-of-input"
        super().__init__(f"Unexpected value token: {name}", position)
        self.token = token


class DuplicateKeyError(JSONObjectError):
    """An object repeated a key while duplicate keys are disallowed."""

    def __init__(self, key: Any, position: Optional["TokenPosition"] = None):
        super().__init__(f"Duplicate object key: {key!r}", position)
        self.key = key


class NestingDepthError(JSONObjectError):
    """Input nesting exceeded the configured maximum depth."""

    def __init__(
        self, depth: int, limit: int, position: Optional["TokenPosition"] = None
    ):
        super().__init__(
            f"Nesting depth {depth} exceeds the maximum of {limit}", position
        )
        self.depth = depth
        self.limit = limit
