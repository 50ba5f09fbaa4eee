"""Facade for reading generic values from JSON input.

``JSONObjects`` wraps a blueprint ``ValueReader`` and turns JSON text, bytes,
files or existing token sources into generic value trees. Like the reader it
wraps, a facade instance is immutable and can be shared between threads.

Examples:
    >>> any_from('{"a": [1, 2.5, null]}')
    {'a': [1, 2.5, None]}
    >>> JSONObjects.std.with_features(Feature.USE_BIG_DECIMAL_FOR_FLOATS).any_from("3.14")
    Decimal('3.14')
"""

from contextlib import ExitStack
from pathlib import Path
from typing import IO, Any, Callable, Mapping, Optional, Sequence, Tuple, Union

from simple_json_objects.shared import (
    Feature,
    ReaderConfig,
    UnexpectedTokenError,
    get_logger,
)
from simple_json_objects.tokenization import JsonTokenSource, TokenSource
from simple_json_objects.tree import (
    BoundReader,
    KeyedBuilder,
    SequenceBuilder,
    ValueHooks,
    ValueReader,
)

InputType = Union[str, bytes, bytearray, Path, IO[bytes], IO[str], TokenSource]


class JSONObjects:
    """Entry point for materializing JSON input without a target schema."""

    std: "JSONObjects"

    def __init__(self, reader: Optional[ValueReader] = None) -> None:
        self.reader = reader or ValueReader()
        self.logger = get_logger(
            __name__, self.reader.config.correlation_id, "json_objects"
        )

    # -- Configuration --------------------------------------------------

    @property
    def features(self) -> Feature:
        return self.reader.features

    def with_features(self, *features: Feature) -> "JSONObjects":
        """Return a facade with the given features enabled in addition to current ones."""
        combined = self.features
        for feature in features:
            combined |= feature
        return self._with(self.reader.configure(combined))

    def without_features(self, *features: Feature) -> "JSONObjects":
        remaining = self.features
        for feature in features:
            remaining &= ~feature
        return self._with(self.reader.configure(remaining))

    def with_config(self, config: ReaderConfig) -> "JSONObjects":
        return self._with(self.reader.with_config(config))

    def with_hooks(self, hooks: ValueHooks) -> "JSONObjects":
        return self._with(self.reader.with_hooks(hooks))

    def with_sequence_builder(self, builder: SequenceBuilder) -> "JSONObjects":
        return self._with(self.reader.with_sequence_builder(builder))

    def with_keyed_builder(self, builder: KeyedBuilder) -> "JSONObjects":
        return self._with(self.reader.with_keyed_builder(builder))

    def _with(self, reader: ValueReader) -> "JSONObjects":
        if reader is self.reader:
            return self
        return type(self)(reader)

    # -- Reading --------------------------------------------------------

    def any_from(self, source: InputType) -> Any:
        """Read any JSON value."""
        return self._read(source, BoundReader.read_value)

    def map_from(self, source: InputType) -> Optional[Mapping[Any, Any]]:
        """Read a JSON object; fails with TypeMismatchError for other values."""
        return self._read(source, BoundReader.read_as_keyed_collection)

    def list_from(self, source: InputType) -> Optional[Sequence[Any]]:
        """Read a JSON array as a sequence."""
        return self._read(source, BoundReader.read_as_sequence)

    def array_from(self, source: InputType) -> Optional[Tuple[Any, ...]]:
        """Read a JSON array as a fixed-size tuple."""
        return self._read(source, BoundReader.read_as_fixed_array)

    def _read(self, source: InputType, operation: Callable[[BoundReader], Any]) -> Any:
        with ExitStack() as stack:
            tokens = self._open(source, stack)
            if tokens.current_token is None:
                tokens.next_token()
            self.logger.debug(
                "Materializing value",
                extra={
                    "input_type": type(source).__name__,
                    "operation": operation.__name__,
                },
            )
            result = operation(self.reader.bind(tokens))
            if tokens is not source:
                self._require_end(tokens)
            return result

    @staticmethod
    def _require_end(tokens: TokenSource) -> None:
        # Documents the facade opened must hold exactly one value
        trailing = tokens.next_token()
        if trailing is not None:
            raise UnexpectedTokenError(trailing, tokens.token_position())

    @staticmethod
    def _open(source: InputType, stack: ExitStack) -> TokenSource:
        if isinstance(source, TokenSource):
            # Caller keeps ownership of sources it built
            return source
        if isinstance(source, Path):
            return stack.enter_context(JsonTokenSource.from_path(source))
        return stack.enter_context(JsonTokenSource(source))


JSONObjects.std = JSONObjects()


def any_from(source: InputType) -> Any:
    """Read any JSON value using the default configuration."""
    return JSONObjects.std.any_from(source)


def map_from(source: InputType) -> Optional[Mapping[Any, Any]]:
    """Read a JSON object using the default configuration."""
    return JSONObjects.std.map_from(source)


def list_from(source: InputType) -> Optional[Sequence[Any]]:
    """Read a JSON array as a list using the default configuration."""
    return JSONObjects.std.list_from(source)


def array_from(source: InputType) -> Optional[Tuple[Any, ...]]:
    """Read a JSON array as a tuple using the default configuration."""
    return JSONObjects.std.array_from(source)
