"""lazyproduct - lazy, thread-safe Cartesian products for test-data generation."""

from lazyproduct.core.types import Record, Value
from lazyproduct.core.errors import ExhaustedError, ProductError, TypeMismatchError
from lazyproduct.core.config import MAX_ESTIMATE, ProductConfig, configure_logging
from lazyproduct.product.dimension import Dimension
from lazyproduct.product.cursor import Cursor
from lazyproduct.product.size import estimate_size, saturating_multiply
from lazyproduct.product.combination import Combination
from lazyproduct.product.generator import ProductGenerator, Pull
from lazyproduct.product.builder import ProductBuilder, product
from lazyproduct.sources.seed import Seed, SeedDimension, SeedSource
from lazyproduct.sinks.writers import write_csv, write_jsonl

__all__ = [
    "Record",
    "Value",
    "ProductError",
    "TypeMismatchError",
    "ExhaustedError",
    "MAX_ESTIMATE",
    "ProductConfig",
    "configure_logging",
    "Dimension",
    "Cursor",
    "estimate_size",
    "saturating_multiply",
    "Combination",
    "ProductGenerator",
    "Pull",
    "ProductBuilder",
    "product",
    "Seed",
    "SeedDimension",
    "SeedSource",
    "write_jsonl",
    "write_csv",
]
