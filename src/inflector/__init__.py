"""String inflection helpers backed by bounded memoizing caches.

The package converts identifiers between camelCase, UpperCamelCase,
dasherized and underscored forms, caching each transform per input string.
It also ships the small positional formatter and localization lookup used
alongside the inflections.
"""

from __future__ import annotations

from .cache import Cache
from .config import DEFAULT_CACHE_LIMIT, TRANSFORM_KINDS, InflectorConfig
from .inflection import (
    Inflector,
    camelize,
    capitalize,
    classify,
    dasherize,
    decamelize,
    get_inflector,
    set_inflector,
    underscore,
)
from .interfaces import StringSource
from .schema import CacheStats
from .strings import StringRegistry, default_strings, fmt, loc, w

__all__ = [
    "Cache",
    "CacheStats",
    "DEFAULT_CACHE_LIMIT",
    "Inflector",
    "InflectorConfig",
    "StringRegistry",
    "StringSource",
    "TRANSFORM_KINDS",
    "camelize",
    "capitalize",
    "classify",
    "dasherize",
    "decamelize",
    "default_strings",
    "fmt",
    "get_inflector",
    "loc",
    "set_inflector",
    "underscore",
    "w",
]

__version__ = "0.1.0"
