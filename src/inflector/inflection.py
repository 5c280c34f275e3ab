"""Cached string inflections for identifiers, property keys and path segments.

Each transform is a pure function of its input. Because the same handful of
identifiers tends to be converted over and over, every transform is wrapped
in its own bounded :class:`~inflector.cache.Cache`. The caches belong to an
:class:`Inflector`; the module-level helpers delegate to a process-wide
default instance that is created on first use and can be replaced with
:func:`set_inflector`.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Callable

from .cache import Cache
from .config import TRANSFORM_KINDS, InflectorConfig
from .schema import CacheStats

__all__ = [
    "Inflector",
    "camelize",
    "capitalize",
    "classify",
    "dasherize",
    "decamelize",
    "get_inflector",
    "set_inflector",
    "underscore",
]


LOGGER = logging.getLogger(__name__)

_DECAMELIZE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_DASHERIZE_SEPARATORS = re.compile(r"[ _]+")
_CAMELIZE_SEPARATORS = re.compile(r"(-|_|\.|\s)+(.)?")
_CAMELIZE_SEGMENT_START = re.compile(r"(^|/)([A-Z])")
_CLASSIFY_LEADING = re.compile(r"^(-|_)+(.)?")
_CLASSIFY_SEPARATORS = re.compile(r"(.)(-|_|\.|\s)+(.)?")
_CLASSIFY_WORD_START = re.compile(r"(^|/|\.)([a-z])")
_UNDERSCORE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z]+)")
_UNDERSCORE_SEPARATORS = re.compile(r"-|\s+")
# ASCII plus Latin-1 Supplement through Latin Extended-B.
_CAPITALIZE_WORD_START = re.compile(r"(^|/)([a-zÀ-ɏ])")


def _upper_match(match: re.Match[str]) -> str:
    return match.group(0).upper()


def _lower_match(match: re.Match[str]) -> str:
    return match.group(0).lower()


def _decamelize(value: str) -> str:
    return _DECAMELIZE_BOUNDARY.sub(r"\1_\2", value).lower()


def _camelize(value: str) -> str:
    def join_word(match: re.Match[str]) -> str:
        char = match.group(2)
        return char.upper() if char else ""

    joined = _CAMELIZE_SEPARATORS.sub(join_word, value)
    return _CAMELIZE_SEGMENT_START.sub(_lower_match, joined)


def _classify(value: str) -> str:
    def leading(match: re.Match[str]) -> str:
        char = match.group(2)
        return f"_{char.upper()}" if char else ""

    def inner(match: re.Match[str]) -> str:
        char = match.group(3)
        return match.group(1) + (char.upper() if char else "")

    parts = [
        _CLASSIFY_SEPARATORS.sub(inner, _CLASSIFY_LEADING.sub(leading, part))
        for part in value.split("/")
    ]
    return _CLASSIFY_WORD_START.sub(_upper_match, "/".join(parts))


def _underscore(value: str) -> str:
    split = _UNDERSCORE_BOUNDARY.sub(r"\1_\2", value)
    return _UNDERSCORE_SEPARATORS.sub("_", split).lower()


def _capitalize(value: str) -> str:
    return _CAPITALIZE_WORD_START.sub(_upper_match, value)


class Inflector:
    """Own one cache per transform kind and expose the cached transforms.

    >>> inflector = Inflector()
    >>> inflector.classify("private-docs/owner-invoice")
    'PrivateDocs/OwnerInvoice'
    """

    def __init__(self, config: InflectorConfig | None = None) -> None:
        self.config = config or InflectorConfig()
        computes: dict[str, Callable[[str], str]] = {
            "decamelize": _decamelize,
            "dasherize": self._dasherize,
            "camelize": _camelize,
            "classify": _classify,
            "underscore": _underscore,
            "capitalize": _capitalize,
        }
        self._caches: dict[str, Cache[str, str]] = {
            kind: Cache(self.config.limit_for(kind), computes[kind], name=kind)
            for kind in TRANSFORM_KINDS
        }
        LOGGER.debug(
            "created inflector caches: %s",
            ", ".join(f"{kind}={cache.limit}" for kind, cache in self._caches.items()),
        )

    def _dasherize(self, value: str) -> str:
        return _DASHERIZE_SEPARATORS.sub("-", self.decamelize(value))

    def cache(self, kind: str) -> Cache[str, str]:
        """Return the cache backing ``kind``; unknown kinds raise :class:`KeyError`."""

        return self._caches[kind]

    def stats(self) -> dict[str, CacheStats]:
        return {kind: cache.stats() for kind, cache in self._caches.items()}

    def purge(self) -> None:
        """Empty every cache owned by this inflector."""

        for cache in self._caches.values():
            cache.purge()

    def decamelize(self, value: str) -> str:
        """Lower-case ``value`` with an underscore at each lower-to-upper boundary.

        ``"innerHTML"`` becomes ``"inner_html"``; acronym runs stay together.
        """

        return self._caches["decamelize"].get(value)

    def dasherize(self, value: str) -> str:
        """Decamelize, then turn runs of spaces and underscores into dashes."""

        return self._caches["dasherize"].get(value)

    def camelize(self, value: str) -> str:
        """Return the lowerCamelCase form, segment by segment across ``/``."""

        return self._caches["camelize"].get(value)

    def classify(self, value: str) -> str:
        """Return the UpperCamelCase form, segment by segment across ``/``."""

        return self._caches["classify"].get(value)

    def underscore(self, value: str) -> str:
        """Return the lower_case_and_underscored form of ``value``."""

        return self._caches["underscore"].get(value)

    def capitalize(self, value: str) -> str:
        """Upper-case the first letter of the string and of each ``/`` segment."""

        return self._caches["capitalize"].get(value)


_default_inflector: Inflector | None = None
_default_lock = threading.Lock()


def get_inflector() -> Inflector:
    """Return the process-wide :class:`Inflector`, creating it on first use."""

    global _default_inflector
    if _default_inflector is None:
        with _default_lock:
            if _default_inflector is None:
                _default_inflector = Inflector()
    return _default_inflector


def set_inflector(inflector: Inflector | None) -> Inflector | None:
    """Replace the process-wide inflector and return the previous one.

    Passing ``None`` discards the current instance; the next call to
    :func:`get_inflector` builds a fresh one.
    """

    global _default_inflector
    with _default_lock:
        previous = _default_inflector
        _default_inflector = inflector
    return previous


def decamelize(value: str) -> str:
    return get_inflector().decamelize(value)


def dasherize(value: str) -> str:
    return get_inflector().dasherize(value)


def camelize(value: str) -> str:
    return get_inflector().camelize(value)


def classify(value: str) -> str:
    return get_inflector().classify(value)


def underscore(value: str) -> str:
    return get_inflector().underscore(value)


def capitalize(value: str) -> str:
    return get_inflector().capitalize(value)
