"""Immutable, ordered dimensions of heterogeneous values."""

from collections.abc import Iterable, Iterator

from lazyproduct.core.types import Value


class Dimension:
    """
    An ordered, fixed-size, immutable sequence of values.

    A dimension contributes one "digit" to every combination of a product.
    Its values are fully materialized at construction so the generator can
    revisit them any number of times, even when the input was a one-shot
    iterator.

    Examples:
        >>> Dimension.of("a", "b")
        Dimension('a', 'b')
        >>> Dimension.from_iterable(x * 2 for x in range(3))
        Dimension(0, 2, 4)
        >>> Dimension.range(1, 3)
        Dimension(1, 2, 3)
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Value] = ()) -> None:
        self._values: tuple[Value, ...] = tuple(values)

    @classmethod
    def of(cls, *values: Value) -> "Dimension":
        """Create a dimension from individual values."""
        return cls(values)

    @classmethod
    def from_iterable(cls, values: Iterable[Value]) -> "Dimension":
        """
        Create a dimension from a collection or a lazy iterable.

        Iterators and generators are drained exactly once, here.
        """
        if isinstance(values, (str, bytes)):
            raise TypeError(
                "Refusing to split a string into characters; "
                "use Dimension.of(value) for a single string value"
            )
        return cls(values)

    @classmethod
    def range(cls, start: int, end: int, step: int = 1) -> "Dimension":
        """Create a dimension from an inclusive numeric range."""
        if step == 0:
            raise ValueError("step must not be zero")
        stop = end + 1 if step > 0 else end - 1
        return cls(range(start, stop, step))

    @property
    def values(self) -> tuple[Value, ...]:
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> Value:
        return self._values[index]

    def __iter__(self) -> Iterator[Value]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(repr(v) for v in self._values)})"


def as_dimension(values: "Dimension | Iterable[Value]") -> Dimension:
    """Normalize a dimension or an iterable of values into a Dimension."""
    if isinstance(values, Dimension):
        return values
    return Dimension.from_iterable(values)
