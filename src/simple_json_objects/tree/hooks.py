"""Scalar and key conversion hooks used by the value reader.

Subclass ``ValueHooks`` and override a single method to change how one kind of
scalar, or object keys, are materialized without touching traversal.
"""

import sys
from typing import Any, Optional


class ValueHooks:
    """Default conversion hooks: every value is returned as read."""

    def on_null(self) -> Any:
        """Value for a null nested inside an object or array."""
        return None

    def on_boolean(self, value: bool) -> Any:
        return value

    def on_key(self, key: str) -> Any:
        """Convert an object field name before it becomes a map key."""
        return key

    def on_string(self, text: str) -> Any:
        return text

    def on_opaque(self, value: Any) -> Any:
        """Convert a value the token source materialized out-of-band."""
        return value

    # Root-level nulls, one per entry operation

    def null_for_root_value(self) -> Any:
        return None

    def null_for_root_map(self) -> Optional[Any]:
        return None

    def null_for_root_sequence(self) -> Optional[Any]:
        return None

    def null_for_root_array(self) -> Optional[Any]:
        return None


class InterningHooks(ValueHooks):
    """Hooks that intern keys and string values so repeats share one object."""

    def on_key(self, key: str) -> Any:
        return sys.intern(key)

    def on_string(self, text: str) -> Any:
        return sys.intern(text)


DEFAULT_HOOKS = ValueHooks()
