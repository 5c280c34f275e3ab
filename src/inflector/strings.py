"""Positional formatting, localization lookup and word splitting.

None of these helpers are cached: formatting arguments vary too much for
memoization to pay off.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Sequence

from .interfaces import StringSource

__all__ = [
    "StringRegistry",
    "default_strings",
    "fmt",
    "loc",
    "w",
]


_FORMAT_TOKEN = re.compile(r"%@([0-9]+)?")


class StringRegistry(StringSource):
    """In-memory table of localized strings.

    >>> strings = StringRegistry({"_Hello World": "Bonjour le monde"})
    >>> loc("_Hello World", strings=strings)
    'Bonjour le monde'
    """

    def __init__(self, strings: Mapping[str, str] | None = None) -> None:
        self._strings: dict[str, str] = dict(strings or {})

    def __contains__(self, key: object) -> bool:
        return key in self._strings

    def __len__(self) -> int:
        return len(self._strings)

    def set_strings(self, strings: Mapping[str, str]) -> None:
        """Replace every registered string with ``strings``."""

        self._strings = dict(strings)

    def update(self, strings: Mapping[str, str]) -> None:
        self._strings.update(strings)

    def get_strings(self) -> dict[str, str]:
        return dict(self._strings)

    def get_string(self, key: str) -> Optional[str]:
        return self._strings.get(key)

    def lookup(self, key: str) -> Optional[str]:
        return self.get_string(key)


default_strings = StringRegistry()


def _display(value: Any) -> str:
    if value is None:
        return "(null)"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _collect_formats(formats: tuple[Any, ...]) -> Sequence[Any]:
    if len(formats) == 1 and isinstance(formats[0], (list, tuple)):
        return formats[0]
    return formats


def fmt(template: str, *formats: Any) -> str:
    """Substitute ``%@`` and ``%@N`` tokens in ``template``.

    ``%@`` consumes the next positional argument while ``%@N`` selects the
    N-th argument (1-based). Arguments may be passed individually or as a
    single list or tuple. ``None`` renders as ``(null)`` and a missing
    argument renders as an empty string, so formatting never fails.

    >>> fmt("Hello %@2 %@1", ["John", "Smith"])
    'Hello Smith John'
    """

    arguments = _collect_formats(formats)
    position = 0

    def substitute(match: re.Match[str]) -> str:
        nonlocal position
        explicit = match.group(1)
        if explicit:
            index = int(explicit) - 1
        else:
            index = position
            position += 1

        if index < 0 or index >= len(arguments):
            return ""
        return _display(arguments[index])

    return _FORMAT_TOKEN.sub(substitute, template)


def loc(key: str, *formats: Any, strings: StringSource | None = None) -> str:
    """Look ``key`` up in ``strings`` and format the result with ``formats``.

    When no translation is registered, or the translation is empty, ``key``
    itself is used as the template.
    """

    source = default_strings if strings is None else strings
    template = source.lookup(key) or key
    return fmt(template, *formats)


def w(value: str) -> list[str]:
    """Split ``value`` on runs of whitespace, dropping empty fragments."""

    return value.split()
