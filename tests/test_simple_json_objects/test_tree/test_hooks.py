"""Tests for scalar and key conversion hooks."""

from typing import Any

from simple_json_objects.tokenization import TokenStream
from simple_json_objects.tokenization import tokens as t
from simple_json_objects.tree import InterningHooks, ValueHooks, ValueReader

MISSING = object()


def read(tokens, hooks: ValueHooks) -> Any:
    return ValueReader(hooks=hooks).bind(TokenStream.positioned(tokens)).read_value()


class TestValueHooks:
    """Test that overriding one hook changes exactly one kind of value."""

    def test_defaults_are_identity(self) -> None:
        """Test default hooks return values as read."""
        hooks = ValueHooks()
        payload = object()

        assert hooks.on_null() is None
        assert hooks.on_boolean(True) is True
        assert hooks.on_key("k") == "k"
        assert hooks.on_string("s") == "s"
        assert hooks.on_opaque(payload) is payload

    def test_on_key_transforms_keys_only(self) -> None:
        """Test key canonicalization leaves string values alone."""

        class UpperKeys(ValueHooks):
            def on_key(self, key: str) -> Any:
                return key.upper()

        tokens = [
            t.start_object(),
            t.field_name("a"), t.string("value"),
            t.field_name("b"), t.start_object(), t.field_name("c"), t.number(1),
            t.end_object(),
            t.end_object(),
        ]

        assert read(tokens, UpperKeys()) == {"A": "value", "B": {"C": 1}}

    def test_on_null_wraps_nested_nulls(self) -> None:
        """Test nested nulls become a sentinel."""

        class SentinelNulls(ValueHooks):
            def on_null(self) -> Any:
                return MISSING

        tokens = [t.start_array(), t.null(), t.number(1), t.null(), t.end_array()]

        assert read(tokens, SentinelNulls()) == [MISSING, 1, MISSING]

    def test_on_string_and_on_boolean(self) -> None:
        """Test string and boolean hooks."""

        class Rewriting(ValueHooks):
            def on_string(self, text: str) -> Any:
                return text[::-1]

            def on_boolean(self, value: bool) -> Any:
                return int(value)

        tokens = [t.start_array(), t.string("abc"), t.boolean(True),
                  t.boolean(False), t.end_array()]

        assert read(tokens, Rewriting()) == ["cba", 1, 0]

    def test_on_opaque(self) -> None:
        """Test embedded values pass through the opaque hook."""

        class Boxing(ValueHooks):
            def on_opaque(self, value: Any) -> Any:
                return ("boxed", value)

        assert read([t.embedded(42)], Boxing()) == ("boxed", 42)


class TestInterningHooks:
    """Test the interning hooks."""

    def test_equal_strings_share_identity(self) -> None:
        """Test repeated keys and values become the same object."""
        first = "".join(["na", "me"])
        second = "".join(["na", "me"])
        assert first is not second

        tokens = [
            t.start_array(),
            t.start_object(), t.field_name(first), t.string(first), t.end_object(),
            t.start_object(), t.field_name(second), t.string(second), t.end_object(),
            t.end_array(),
        ]

        result = read(tokens, InterningHooks())
        (key_a,), (key_b,) = result[0].keys(), result[1].keys()

        assert key_a is key_b
        assert result[0][key_a] is result[1][key_b]
