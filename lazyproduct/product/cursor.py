"""Per-dimension read positions used by the odometer."""

from dataclasses import dataclass

from lazyproduct.core.errors import ExhaustedError
from lazyproduct.core.types import Value
from lazyproduct.product.dimension import Dimension


@dataclass(frozen=True)
class Cursor:
    """
    A read position within one dimension.

    `index` ranges over [0, len(dimension)]; `index == len(dimension)` means
    the cursor has run off the end for the current cycle and must be reset
    by a carry. Cursors are values: moving one produces a new cursor.
    """

    dimension: Dimension
    index: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.index <= len(self.dimension):
            raise ValueError(
                f"Cursor index {self.index} outside [0, {len(self.dimension)}]"
            )

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.dimension)

    def current(self) -> Value:
        """Return the value under the cursor."""
        if self.exhausted:
            raise ExhaustedError(
                f"Cursor at index {self.index} is past the end of a "
                f"dimension of length {len(self.dimension)}"
            )
        return self.dimension[self.index]

    def advanced(self) -> "Cursor":
        """Return the cursor moved one position forward."""
        if self.exhausted:
            raise ExhaustedError("Cannot advance an exhausted cursor")
        return Cursor(self.dimension, self.index + 1)

    def reset(self) -> "Cursor":
        """Return the cursor moved back to the first position."""
        return Cursor(self.dimension, 0)
