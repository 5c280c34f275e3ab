"""Configuration for the inflection caches."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

__all__ = ["DEFAULT_CACHE_LIMIT", "InflectorConfig", "TRANSFORM_KINDS"]


DEFAULT_CACHE_LIMIT = 1000

TRANSFORM_KINDS = (
    "decamelize",
    "dasherize",
    "camelize",
    "classify",
    "underscore",
    "capitalize",
)


def _validate_limit(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


@dataclass(slots=True)
class InflectorConfig:
    """Cache sizing for an :class:`~inflector.inflection.Inflector`.

    Attributes
    ----------
    cache_limit:
        Entry limit applied to every transform cache that has no override.
    limits:
        Per-transform overrides keyed by transform kind, e.g.
        ``{"classify": 5000}``.
    """

    cache_limit: int = DEFAULT_CACHE_LIMIT
    limits: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _validate_limit("cache_limit", self.cache_limit)
        if not isinstance(self.limits, Mapping):
            raise ValueError("limits must be a mapping of transform kind to limit")
        self.limits = dict(self.limits)
        for kind, limit in self.limits.items():
            if kind not in TRANSFORM_KINDS:
                raise ValueError(f"unknown transform kind '{kind}'")
            _validate_limit(f"limits[{kind!r}]", limit)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "InflectorConfig":
        """Build a config from plain data such as a parsed settings file.

        Only the ``cache_limit`` and ``limits`` keys are recognised; anything
        else raises :class:`ValueError`.
        """

        unknown = set(data) - {"cache_limit", "limits"}
        if unknown:
            raise ValueError(f"unknown configuration keys: {', '.join(sorted(unknown))}")

        return cls(
            cache_limit=data.get("cache_limit", DEFAULT_CACHE_LIMIT),
            limits=data.get("limits", {}),
        )

    def limit_for(self, kind: str) -> int:
        """Return the effective cache limit for ``kind``."""

        if kind not in TRANSFORM_KINDS:
            raise KeyError(kind)
        return self.limits.get(kind, self.cache_limit)
