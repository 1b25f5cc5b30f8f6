"""Seed builders for generating named-column records from dimensions."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from lazyproduct.core.config import ProductConfig
from lazyproduct.core.types import Record
from lazyproduct.product.dimension import Dimension
from lazyproduct.product.generator import ProductGenerator
from lazyproduct.product.size import estimate_size
from lazyproduct.sinks.writers import write_csv, write_jsonl


@dataclass(frozen=True)
class SeedDimension:
    """A single dimension of variation for seed generation."""

    columns: tuple[str, ...]
    values: tuple[dict[str, Any], ...]

    def __len__(self) -> int:
        return len(self.values)

    def as_dimension(self) -> Dimension:
        """Return the partial records as a product dimension."""
        return Dimension(self.values)


def _merge(parts: Iterable[dict[str, Any]]) -> Record:
    record: Record = {}
    for part in parts:
        record.update(part)
    return record


def _check_limit(limit: int | None) -> None:
    if limit is not None and limit < 0:
        raise ValueError("limit must be non-negative")


class SeedSource(ABC):
    """Base class for re-iterable sources of seed records."""

    @abstractmethod
    def records(self, limit: int | None = None) -> Iterator[Record]:
        """Yield fresh records, at most `limit` of them."""
        ...

    def __iter__(self) -> Iterator[Record]:
        return self.records()

    def take(self, limit: int) -> list[Record]:
        """Return the first `limit` records. Nothing past them is generated."""
        return list(self.records(limit))

    def to_jsonl(self, path: str | Path, limit: int | None = None) -> int:
        """Write records to a JSONL file and return how many were written."""
        return write_jsonl(self.records(limit), path)

    def to_csv(self, path: str | Path, limit: int | None = None) -> int:
        """Write records to a CSV file and return how many were written."""
        return write_csv(self.records(limit), path)


class SeedProduct(SeedSource):
    """Records for every combination of seed dimensions, last dimension fastest."""

    def __init__(
        self,
        dimensions: tuple[SeedDimension, ...],
        config: ProductConfig | None = None,
    ) -> None:
        self._dimensions = dimensions
        self._config = config or ProductConfig()

    def estimate_size(self) -> int:
        """Saturating estimate of the number of records."""
        if not self._dimensions:
            return 0
        return estimate_size(
            (len(d) for d in self._dimensions), self._config.max_estimate
        )

    def generator(self) -> ProductGenerator:
        """Build a fresh generator over the partial-record dimensions."""
        return ProductGenerator(
            (d.as_dimension() for d in self._dimensions), self._config
        )

    def records(self, limit: int | None = None) -> Iterator[Record]:
        """
        Pull combinations from a fresh generator and merge each into a record.

        Args:
            limit: Stop after this many records. The generator is never
                pulled past the limit, so huge products are cheap to sample.
        """
        _check_limit(limit)
        if not self._dimensions or limit == 0:
            return

        logger.info(
            f"Generating up to {limit if limit is not None else self.estimate_size()} "
            f"seed records from {len(self._dimensions)} dimensions"
        )
        generator = self.generator()
        count = 0
        while True:
            combination, has_more = generator.pull()
            if combination is None:
                break
            yield _merge(combination.all_remaining(dict))
            count += 1
            if not has_more or count == limit:
                break
        logger.debug(f"SeedProduct yielded {count} records")


class SeedZip(SeedSource):
    """Records pairing same-length seed dimensions element-wise."""

    def __init__(self, dimensions: tuple[SeedDimension, ...]) -> None:
        self._dimensions = dimensions

    def __len__(self) -> int:
        return len(self._dimensions[0]) if self._dimensions else 0

    def records(self, limit: int | None = None) -> Iterator[Record]:
        """Yield the zipped records, at most `limit` of them."""
        _check_limit(limit)
        logger.info(f"Generating {len(self)} zipped seed records")
        for count, parts in enumerate(zip(*(d.values for d in self._dimensions))):
            if count == limit:
                return
            yield _merge(parts)


class Seed:
    """Factory class for building seed records from configuration."""

    @staticmethod
    def values(column: str, values: Iterable) -> SeedDimension:
        """
        Create a dimension with explicit values.

        Args:
            column: The column name for this dimension.
            values: Values for this dimension.

        Returns:
            A SeedDimension representing this axis of variation.

        Example:
            >>> Seed.values("language", ["en", "fr", "de"])
            # 3 partial records: {"language": "en"}, {"language": "fr"}, {"language": "de"}
        """
        return SeedDimension(
            columns=(column,),
            values=tuple({column: v} for v in values),
        )

    @staticmethod
    def expand(parent: str, child: str, mapping: dict[str, list]) -> SeedDimension:
        """
        Create a dimension from nested structure.

        Example:
            >>> Seed.expand("topic", "subtopic", {
            ...     "Physics": ["Quantum", "Relativity"],
            ...     "Biology": ["Genetics"],
            ... })
            # {"topic": "Physics", "subtopic": "Quantum"}
            # {"topic": "Physics", "subtopic": "Relativity"}
            # {"topic": "Biology", "subtopic": "Genetics"}
        """
        values = []
        for parent_value, child_values in mapping.items():
            for child_value in child_values:
                values.append({parent: parent_value, child: child_value})
        return SeedDimension(columns=(parent, child), values=tuple(values))

    @staticmethod
    def range(column: str, start: int, end: int, step: int = 1) -> SeedDimension:
        """
        Create a dimension from an inclusive numeric range.

        Example:
            >>> Seed.range("grade_level", 1, 12)
            # 12 partial records with grade_level 1 through 12
        """
        return Seed.values(column, Dimension.range(start, end, step))

    @staticmethod
    def product(
        *dimensions: SeedDimension,
        config: ProductConfig | None = None,
    ) -> SeedProduct:
        """
        Lazily combine dimensions into their Cartesian product.

        Records come out with the last dimension varying fastest. Nothing is
        materialized up front, so very large products are fine as long as
        the consumer stops early.

        Example:
            >>> Seed.product(
            ...     Seed.values("persona", ["student", "teacher"]),
            ...     Seed.values("language", ["en", "fr"]),
            ... )
            # {"persona": "student", "language": "en"}
            # {"persona": "student", "language": "fr"}
            # {"persona": "teacher", "language": "en"}
            # {"persona": "teacher", "language": "fr"}
        """
        source = SeedProduct(dimensions, config)
        logger.debug(
            f"Seed.product over {len(dimensions)} dimensions, "
            f"estimated {source.estimate_size()} records"
        )
        return source

    @staticmethod
    def zip(*dimensions: SeedDimension) -> SeedZip:
        """
        Zip dimensions together (must be same length).

        Raises:
            ValueError: If dimensions have different lengths.
        """
        lengths = [len(dim) for dim in dimensions]
        if len(set(lengths)) > 1:
            raise ValueError(
                f"All dimensions must have the same length for zip. "
                f"Got lengths: {lengths}"
            )
        logger.debug(f"Seed.zip over {len(dimensions)} dimensions")
        return SeedZip(dimensions)
