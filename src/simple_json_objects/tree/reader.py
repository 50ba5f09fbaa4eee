"""Value reader that materializes token streams into generic value trees.

The reader follows a blueprint/per-operation split. A ``ValueReader`` is an
immutable blueprint holding configuration, builder strategies and conversion
hooks; it is safe to share between threads. ``bind`` derives a
``BoundReader`` that owns fresh builder instances and the token source for
exactly one read operation.
"""

from typing import Any, Mapping, Optional, Sequence, Tuple

from simple_json_objects.shared import (
    Feature,
    NestingDepthError,
    ReaderConfig,
    TypeMismatchError,
    UnexpectedTokenError,
    get_logger,
)
from simple_json_objects.tokenization import NumberType, TokenSource, TokenType

from .builders import KeyedBuilder, SequenceBuilder
from .hooks import DEFAULT_HOOKS, ValueHooks


class ValueReader:
    """Blueprint reader; never reads tokens itself.

    All ``configure``/``with_*`` methods return ``self`` when nothing changes
    and a new blueprint otherwise.
    """

    def __init__(
        self,
        config: Optional[ReaderConfig] = None,
        sequence_builder: Optional[SequenceBuilder] = None,
        keyed_builder: Optional[KeyedBuilder] = None,
        hooks: Optional[ValueHooks] = None,
    ) -> None:
        self.config = config or ReaderConfig()
        self.sequence_builder = sequence_builder or SequenceBuilder()
        self.keyed_builder = keyed_builder or KeyedBuilder()
        self.hooks = hooks or DEFAULT_HOOKS
        self.logger = get_logger(__name__, self.config.correlation_id, "value_reader")

    @property
    def features(self) -> Feature:
        return self.config.features

    # -- Mutant factories -----------------------------------------------

    def configure(self, features: Feature) -> "ValueReader":
        """Return a blueprint using the given feature flags."""
        return self.with_config(self.config.with_features(features))

    def with_config(self, config: ReaderConfig) -> "ValueReader":
        if config == self.config:
            return self
        return self._with(config, self.sequence_builder, self.keyed_builder, self.hooks)

    def with_sequence_builder(self, builder: SequenceBuilder) -> "ValueReader":
        if builder is self.sequence_builder:
            return self
        return self._with(self.config, builder, self.keyed_builder, self.hooks)

    def with_keyed_builder(self, builder: KeyedBuilder) -> "ValueReader":
        if builder is self.keyed_builder:
            return self
        return self._with(self.config, self.sequence_builder, builder, self.hooks)

    def with_hooks(self, hooks: ValueHooks) -> "ValueReader":
        if hooks is self.hooks:
            return self
        return self._with(self.config, self.sequence_builder, self.keyed_builder, hooks)

    def _with(
        self,
        config: ReaderConfig,
        sequence_builder: SequenceBuilder,
        keyed_builder: KeyedBuilder,
        hooks: ValueHooks,
    ) -> "ValueReader":
        return type(self)(config, sequence_builder, keyed_builder, hooks)

    # -- Per-operation instances ----------------------------------------

    def bind(self, source: TokenSource) -> "BoundReader":
        """Create a per-operation reader over a token source.

        The source must already be positioned at the token to read from.
        """
        return BoundReader(self, source)


class BoundReader:
    """Per-operation reader; serves exactly one entry operation."""

    def __init__(self, blueprint: ValueReader, source: TokenSource) -> None:
        features = blueprint.features
        self._source = source
        self._hooks = blueprint.hooks
        self._features = features
        self._max_depth = blueprint.config.max_nesting_depth
        self._sequences = blueprint.sequence_builder.new_builder(features)
        self._maps = blueprint.keyed_builder.new_builder(features)
        self._big_decimals = Feature.USE_BIG_DECIMAL_FOR_FLOATS.is_enabled(features)
        self._depth = 0
        self._used = False
        self.logger = blueprint.logger

    # -- Entry operations -----------------------------------------------

    def read_value(self) -> Any:
        """Read whatever value starts at the current token."""
        self._start("value")
        if self._source.current_token is TokenType.VALUE_NULL:
            return self._hooks.null_for_root_value()
        return self._finish("value", self._read_any())

    def read_as_keyed_collection(self) -> Optional[Mapping[Any, Any]]:
        self._start("map")
        current = self._source.current_token
        if current is TokenType.VALUE_NULL:
            return self._hooks.null_for_root_map()
        if current is not TokenType.START_OBJECT:
            raise TypeMismatchError(
                TokenType.START_OBJECT, current, "Map", self._source.token_position()
            )
        return self._finish("map", self._read_object())

    def read_as_sequence(self) -> Optional[Sequence[Any]]:
        self._start("sequence")
        current = self._source.current_token
        if current is TokenType.VALUE_NULL:
            return self._hooks.null_for_root_sequence()
        if current is not TokenType.START_ARRAY:
            raise TypeMismatchError(
                TokenType.START_ARRAY, current, "List", self._source.token_position()
            )
        return self._finish("sequence", self._read_array())

    def read_as_fixed_array(self) -> Optional[Tuple[Any, ...]]:
        self._start("array")
        current = self._source.current_token
        if current is TokenType.VALUE_NULL:
            return self._hooks.null_for_root_array()
        if current is not TokenType.START_ARRAY:
            raise TypeMismatchError(
                TokenType.START_ARRAY, current, "Array", self._source.token_position()
            )
        return self._finish("array", self._read_array(fixed=True))

    # -- Traversal ------------------------------------------------------

    def _read_any(self) -> Any:
        source = self._source
        token = source.current_token
        if token is TokenType.START_OBJECT:
            return self._read_object()
        if token is TokenType.START_ARRAY:
            return self._read_array()
        if token is TokenType.VALUE_STRING:
            return self._hooks.on_string(source.get_text())
        if token is TokenType.VALUE_NUMBER_INT:
            return self._read_integer()
        if token is TokenType.VALUE_NUMBER_FLOAT:
            return self._read_float()
        if token is TokenType.VALUE_TRUE:
            return self._hooks.on_boolean(True)
        if token is TokenType.VALUE_FALSE:
            return self._hooks.on_boolean(False)
        if token is TokenType.VALUE_NULL:
            return self._hooks.on_null()
        if token is TokenType.VALUE_EMBEDDED_OBJECT:
            return self._hooks.on_opaque(source.get_embedded_object())
        raise UnexpectedTokenError(token, source.token_position())

    def _read_object(self) -> Mapping[Any, Any]:
        source = self._source
        self._enter()
        try:
            if source.next_value() is TokenType.END_OBJECT:
                return self._maps.empty_container()
            key = self._read_key()
            value = self._read_any()
            if source.next_value() is TokenType.END_OBJECT:
                return self._maps.singleton_container(key, value)

            builder = self._maps.new_growable_builder().put(key, value)
            while True:
                key = self._read_key()
                builder = builder.put(key, self._read_any())
                if source.next_value() is TokenType.END_OBJECT:
                    return builder.build()
        finally:
            self._depth -= 1

    def _read_array(self, fixed: bool = False) -> Sequence[Any]:
        source = self._source
        sequences = self._sequences
        self._enter()
        try:
            if source.next_token() is TokenType.END_ARRAY:
                return sequences.empty_array() if fixed else sequences.empty_container()
            value = self._read_any()
            if source.next_token() is TokenType.END_ARRAY:
                if fixed:
                    return sequences.singleton_array(value)
                return sequences.singleton_container(value)

            builder = sequences.new_growable_builder().append(value)
            while True:
                builder = builder.append(self._read_any())
                if source.next_token() is TokenType.END_ARRAY:
                    return builder.build_array() if fixed else builder.build()
        finally:
            self._depth -= 1

    def _read_key(self) -> Any:
        name = self._source.current_name
        if name is None:
            # A value inside an object must follow a field name
            raise UnexpectedTokenError(
                self._source.current_token, self._source.token_position()
            )
        return self._hooks.on_key(name)

    def _read_integer(self) -> int:
        # INT, LONG and BIG_INTEGER all map onto Python's int
        return self._source.get_int_value()

    def _read_float(self) -> Any:
        source = self._source
        if not self._big_decimals:
            number_type = source.get_number_type()
            if number_type is NumberType.FLOAT:
                return source.get_float_value()
            if number_type is NumberType.DOUBLE:
                return source.get_double_value()
        return source.get_decimal_value()

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > self._max_depth:
            raise NestingDepthError(
                self._depth, self._max_depth, self._source.token_position()
            )

    # -- Operation bookkeeping ------------------------------------------

    def _start(self, operation: str) -> None:
        if self._used:
            raise RuntimeError("BoundReader instances serve a single read operation")
        self._used = True
        if self.logger.is_debug_enabled:
            self.logger.debug(
                "Starting read operation",
                extra={
                    "operation": operation,
                    "start_token": getattr(self._source.current_token, "name", None),
                },
            )

    def _finish(self, operation: str, result: Any) -> Any:
        if self.logger.is_debug_enabled:
            self.logger.debug(
                "Read operation completed",
                extra={"operation": operation, "result_type": type(result).__name__},
            )
        return result
