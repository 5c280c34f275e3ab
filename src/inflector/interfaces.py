"""Abstract interfaces for collaborators consumed by the string helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class StringSource(ABC):
    """Source of localized strings keyed by their lookup key."""

    @abstractmethod
    def lookup(self, key: str) -> Optional[str]:
        """Return the translation registered for ``key``, or ``None``."""


__all__ = ["StringSource"]
