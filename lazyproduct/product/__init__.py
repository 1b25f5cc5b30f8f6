"""Dimensions, cursors, size estimation, combinations and the product generator."""

from lazyproduct.product.dimension import Dimension
from lazyproduct.product.cursor import Cursor
from lazyproduct.product.size import estimate_size, saturating_multiply
from lazyproduct.product.combination import Combination
from lazyproduct.product.generator import (
    EXHAUSTED,
    Active,
    Exhausted,
    ProductGenerator,
    Pull,
    transition,
)
from lazyproduct.product.builder import ProductBuilder, product

__all__ = [
    "Dimension",
    "Cursor",
    "estimate_size",
    "saturating_multiply",
    "Combination",
    "EXHAUSTED",
    "Active",
    "Exhausted",
    "ProductGenerator",
    "Pull",
    "transition",
    "ProductBuilder",
    "product",
]
