"""Configuration objects for generic value reading.

This module provides the feature flag set consulted by the value reader and
its container builders, plus the immutable reader configuration that carries
those flags together with traversal limits.
"""

import json
import sys
from dataclasses import dataclass, field, replace
from enum import Flag, auto
from typing import Any, Dict, List, Optional

# Recursion guard for nested containers; each level costs two Python frames
DEFAULT_MAX_NESTING_DEPTH = 256
FRAMES_PER_LEVEL = 2
CALLER_FRAME_RESERVE = 200


def max_supported_depth() -> int:
    """Return the deepest nesting the interpreter's recursion limit allows."""
    available = (sys.getrecursionlimit() - CALLER_FRAME_RESERVE) // FRAMES_PER_LEVEL
    return max(DEFAULT_MAX_NESTING_DEPTH, available)


class Feature(Flag):
    """Feature flags that select reader and builder behavior variants."""

    NONE = 0
    USE_BIG_DECIMAL_FOR_FLOATS = auto()  # Floating tokens always become Decimal
    READ_ONLY = auto()                   # Built maps/sequences are frozen
    FAIL_ON_DUPLICATE_MAP_KEYS = auto()  # Reject repeated keys in one object

    @classmethod
    def defaults(cls) -> "Feature":
        """Return the default feature set (nothing enabled)."""
        return cls.NONE

    def is_enabled(self, features: "Feature") -> bool:
        """Check whether this feature is set in the given flag set."""
        return (features & self) == self

    @classmethod
    def from_names(cls, names: List[str]) -> "Feature":
        """Build a flag set from feature names (case-insensitive)."""
        features = cls.NONE
        for name in names:
            try:
                features |= cls[name.upper()]
            except KeyError as e:
                raise ConfigValidationError(
                    f"Unknown feature: {name}",
                    field_name="features",
                    suggestions=[member.name for member in cls if member.name != "NONE"],
                ) from e
        return features

    def names(self) -> List[str]:
        """Return the names of the enabled features in declaration order."""
        return [
            member.name for member in type(self)
            if member.value and member in self
        ]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ReaderConfig:
    """Immutable configuration shared by a blueprint reader and its bound instances.

    Thread-safe due to frozen dataclass implementation; deriving a modified
    configuration always produces a new instance.
    """

    features: Feature = field(default_factory=Feature.defaults)
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate reader configuration."""
        if not isinstance(self.features, Feature):
            raise ConfigValidationError(
                "features must be a Feature flag set",
                field_name="features",
            )
        if self.max_nesting_depth <= 0:
            raise ConfigValidationError(
                "max_nesting_depth must be > 0",
                field_name="max_nesting_depth",
                suggestions=[f"Use the default of {DEFAULT_MAX_NESTING_DEPTH}"],
            )
        limit = max_supported_depth()
        if self.max_nesting_depth > limit:
            raise ConfigValidationError(
                f"max_nesting_depth must be <= {limit} for the current recursion limit",
                field_name="max_nesting_depth",
                suggestions=["Raise sys.setrecursionlimit() before configuring deeper reads"],
            )

    @classmethod
    def strict(cls) -> "ReaderConfig":
        """Create configuration that rejects duplicate object keys."""
        return cls(features=Feature.FAIL_ON_DUPLICATE_MAP_KEYS)

    @classmethod
    def read_only(cls) -> "ReaderConfig":
        """Create configuration that produces frozen containers."""
        return cls(features=Feature.READ_ONLY)

    @classmethod
    def precise(cls) -> "ReaderConfig":
        """Create configuration that keeps floating values as exact decimals."""
        return cls(features=Feature.USE_BIG_DECIMAL_FOR_FLOATS)

    def is_enabled(self, feature: Feature) -> bool:
        """Check whether a feature is enabled in this configuration."""
        return feature.is_enabled(self.features)

    def with_features(self, features: Feature) -> "ReaderConfig":
        """Return a configuration with the given flags; self if unchanged."""
        if features == self.features:
            return self
        return replace(self, features=features)

    def override(self, **kwargs: Any) -> "ReaderConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ReaderConfig().override(max_nesting_depth=64)
            >>> config.max_nesting_depth
            64
        """
        if not kwargs:
            return self
        try:
            return replace(self, **kwargs)
        except TypeError as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a JSON-compatible dictionary."""
        return {
            "features": self.features.names(),
            "max_nesting_depth": self.max_nesting_depth,
            "correlation_id": self.correlation_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReaderConfig":
        """Create configuration from a dictionary produced by to_dict()."""
        unknown = set(data) - {"features", "max_nesting_depth", "correlation_id"}
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}",
                suggestions=["Check field names against ReaderConfig"],
            )
        kwargs: Dict[str, Any] = {}
        if "features" in data:
            kwargs["features"] = Feature.from_names(list(data["features"]))
        if "max_nesting_depth" in data:
            kwargs["max_nesting_depth"] = int(data["max_nesting_depth"])
        if "correlation_id" in data:
            kwargs["correlation_id"] = data["correlation_id"]
        return cls(**kwargs)

    @classmethod
    def from_json(cls, text: str) -> "ReaderConfig":
        """Create configuration from a JSON document."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)
