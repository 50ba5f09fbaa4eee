"""Container builder strategies for keyed collections and sequences.

A builder strategy is a blueprint holding only feature flags. The value reader
derives a per-operation instance with ``new_builder`` and asks it for
containers by size class: a shared empty container, a specialized singleton,
or a growable accumulator that is finalized with ``build``.

Accumulators are created per container, so nested containers never share
accumulation state and derived strategy instances never share it either.
"""

import copy
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from simple_json_objects.shared.config import Feature
from simple_json_objects.shared.errors import DuplicateKeyError

_EMPTY_MAPPING: Mapping[Any, Any] = MappingProxyType({})
_EMPTY_TUPLE: Tuple[Any, ...] = ()


class KeyedBuilder:
    """Builder strategy for keyed collections (JSON objects).

    Mutable mode produces plain dicts; with ``Feature.READ_ONLY`` enabled the
    produced mappings are read-only proxies.
    """

    def __init__(self, features: Feature = Feature.NONE) -> None:
        self.features = features

    @property
    def read_only(self) -> bool:
        return Feature.READ_ONLY.is_enabled(self.features)

    def new_builder(self, features: Feature) -> "KeyedBuilder":
        """Derive a per-operation instance using the given feature flags."""
        derived = copy.copy(self)
        derived.features = features
        return derived

    def empty_container(self) -> Mapping[Any, Any]:
        """Return the empty mapping.

        Only read-only mode returns one shared constant, identical across reads.
        Mutable mode returns a fresh dict per call because callers may add to it.
        """
        if self.read_only:
            return _EMPTY_MAPPING
        return {}

    def singleton_container(self, key: Any, value: Any) -> Mapping[Any, Any]:
        return self._finish({key: value})

    def new_growable_builder(self) -> "KeyedAccumulator":
        return KeyedAccumulator(
            self, Feature.FAIL_ON_DUPLICATE_MAP_KEYS.is_enabled(self.features)
        )

    def _finish(self, entries: Dict[Any, Any]) -> Mapping[Any, Any]:
        if self.read_only:
            return MappingProxyType(entries)
        return entries


class KeyedAccumulator:
    """Growable accumulator for one keyed collection."""

    __slots__ = ("_strategy", "_entries", "_reject_duplicates")

    def __init__(self, strategy: KeyedBuilder, reject_duplicates: bool) -> None:
        self._strategy = strategy
        self._entries: Dict[Any, Any] = {}
        self._reject_duplicates = reject_duplicates

    def put(self, key: Any, value: Any) -> "KeyedAccumulator":
        """Add an entry; a repeated key replaces the earlier value."""
        if self._reject_duplicates and key in self._entries:
            raise DuplicateKeyError(key)
        self._entries[key] = value
        return self

    def build(self) -> Mapping[Any, Any]:
        return self._strategy._finish(self._entries)


class SequenceBuilder:
    """Builder strategy for sequences and fixed arrays (JSON arrays).

    Sequences are lists in mutable mode and tuples with ``Feature.READ_ONLY``;
    fixed arrays are always tuples.
    """

    def __init__(self, features: Feature = Feature.NONE) -> None:
        self.features = features

    @property
    def read_only(self) -> bool:
        return Feature.READ_ONLY.is_enabled(self.features)

    def new_builder(self, features: Feature) -> "SequenceBuilder":
        """Derive a per-operation instance using the given feature flags."""
        derived = copy.copy(self)
        derived.features = features
        return derived

    def empty_container(self) -> Sequence[Any]:
        """Return the empty sequence.

        Only read-only mode returns the shared empty tuple; mutable mode
        returns a fresh list per call.
        """
        if self.read_only:
            return _EMPTY_TUPLE
        return []

    def singleton_container(self, item: Any) -> Sequence[Any]:
        return self._finish([item])

    def empty_array(self) -> Tuple[Any, ...]:
        return _EMPTY_TUPLE

    def singleton_array(self, item: Any) -> Tuple[Any, ...]:
        return (item,)

    def new_growable_builder(self) -> "SequenceAccumulator":
        return SequenceAccumulator(self)

    def _finish(self, items: List[Any]) -> Sequence[Any]:
        if self.read_only:
            return tuple(items)
        return items

    def _finish_array(self, items: List[Any]) -> Tuple[Any, ...]:
        return tuple(items)


class SequenceAccumulator:
    """Growable accumulator for one sequence."""

    __slots__ = ("_strategy", "_items")

    def __init__(self, strategy: SequenceBuilder) -> None:
        self._strategy = strategy
        self._items: List[Any] = []

    def append(self, item: Any) -> "SequenceAccumulator":
        self._items.append(item)
        return self

    def build(self) -> Sequence[Any]:
        return self._strategy._finish(self._items)

    def build_array(self) -> Tuple[Any, ...]:
        return self._strategy._finish_array(self._items)
