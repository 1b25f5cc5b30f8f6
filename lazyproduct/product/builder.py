"""Immutable builder for Cartesian products."""

from collections.abc import Iterable

from loguru import logger

from lazyproduct.core.config import ProductConfig
from lazyproduct.core.types import Value
from lazyproduct.product.dimension import Dimension
from lazyproduct.product.generator import ProductGenerator
from lazyproduct.product.size import estimate_size


class ProductBuilder:
    """
    Accumulates dimensions and builds product generators.

    Builders are persistent: every `and_*` call returns a new builder and
    leaves the receiver untouched, so a builder can be kept and built any
    number of times.

    Example:
        >>> builder = ProductBuilder.of("a", "b").and_(1, 2).and_(True, False)
        >>> for combination in builder.build():
        ...     letter, number, flag = combination.all_remaining()
    """

    __slots__ = ("_dimensions",)

    def __init__(self, dimensions: Iterable[Dimension] = ()) -> None:
        self._dimensions: tuple[Dimension, ...] = tuple(dimensions)

    @classmethod
    def of(cls, *values: Value) -> "ProductBuilder":
        """Start a builder whose first dimension holds the given values."""
        return cls((Dimension(values),))

    @classmethod
    def of_iterable(cls, values: Iterable[Value]) -> "ProductBuilder":
        """Start a builder from a collection, or an iterator drained now."""
        return cls((Dimension.from_iterable(values),))

    @classmethod
    def of_dimension(cls, dimension: Dimension) -> "ProductBuilder":
        """Start a builder from an existing dimension."""
        return cls((dimension,))

    def and_(self, *values: Value) -> "ProductBuilder":
        """Return a new builder with one more dimension holding the given values."""
        return self.and_dimension(Dimension(values))

    def and_iterable(self, values: Iterable[Value]) -> "ProductBuilder":
        """Return a new builder with one more dimension from an iterable."""
        return self.and_dimension(Dimension.from_iterable(values))

    def and_dimension(self, dimension: Dimension) -> "ProductBuilder":
        """Return a new builder with `dimension` appended."""
        return ProductBuilder(self._dimensions + (dimension,))

    @property
    def dimensions(self) -> tuple[Dimension, ...]:
        return self._dimensions

    def __len__(self) -> int:
        return len(self._dimensions)

    def estimate_size(self, config: ProductConfig | None = None) -> int:
        """Saturating estimate of the number of combinations."""
        config = config or ProductConfig()
        return estimate_size((len(d) for d in self._dimensions), config.max_estimate)

    def build(self, config: ProductConfig | None = None) -> ProductGenerator:
        """
        Build a fresh, single-pass generator over the configured dimensions.

        Args:
            config: Settings for the generator. Uses defaults if None.

        Returns:
            A ProductGenerator yielding Combinations.

        Raises:
            ValueError: If fewer than `config.min_dimensions` dimensions
                have been added.
        """
        config = config or ProductConfig()
        if len(self._dimensions) < config.min_dimensions:
            raise ValueError(
                f"At least {config.min_dimensions} dimension(s) required, "
                f"got {len(self._dimensions)}"
            )
        logger.debug(f"Building product of {len(self._dimensions)} dimensions")
        return ProductGenerator(self._dimensions, config)

    def __repr__(self) -> str:
        lengths = [len(d) for d in self._dimensions]
        return f"{self.__class__.__name__}(lengths={lengths})"


def product(
    *iterables: Dimension | Iterable[Value],
    config: ProductConfig | None = None,
) -> ProductGenerator:
    """
    Build a generator over the Cartesian product of the given iterables.

    Strings are not split into characters; wrap them in a list.

    At least `config.min_dimensions` iterables (one by default) are
    required, as for `ProductBuilder.build`. The empty product is only
    available by constructing `ProductGenerator([])` directly.

    Raises:
        ValueError: If too few iterables are given.

    Example:
        >>> [c.all_remaining() for c in product(["a", "b"], [1, 2])]
        [['a', 1], ['a', 2], ['b', 1], ['b', 2]]
    """
    builder = ProductBuilder()
    for values in iterables:
        if isinstance(values, Dimension):
            builder = builder.and_dimension(values)
        else:
            builder = builder.and_iterable(values)
    return builder.build(config)
