"""Seed sources for lazyproduct."""

from lazyproduct.sources.seed import Seed, SeedDimension, SeedProduct, SeedSource, SeedZip

__all__ = ["Seed", "SeedDimension", "SeedSource", "SeedProduct", "SeedZip"]
