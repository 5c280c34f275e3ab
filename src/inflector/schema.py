"""Schemas describing cache state for diagnostics."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CacheStats(BaseModel):
    """Point-in-time counters for a single :class:`~inflector.cache.Cache`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Label of the cache, usually the transform kind.")
    limit: int = Field(..., gt=0, description="Maximum number of resident entries.")
    size: int = Field(0, ge=0, description="Number of entries currently resident.")
    hits: int = Field(0, ge=0, description="Lookups answered from the cache.")
    misses: int = Field(0, ge=0, description="Lookups that invoked the compute function.")

    @property
    def hit_rate(self) -> float:
        """Fraction of lookups served without recomputation."""

        total = self.hits + self.misses
        if not total:
            return 0.0
        return self.hits / total


__all__ = ["CacheStats"]
