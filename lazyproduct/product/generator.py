"""Lazy odometer traversal of a Cartesian product."""

import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import NamedTuple

from loguru import logger

from lazyproduct.core.config import ProductConfig
from lazyproduct.core.types import Value
from lazyproduct.product.combination import Combination
from lazyproduct.product.cursor import Cursor
from lazyproduct.product.dimension import Dimension, as_dimension
from lazyproduct.product.size import estimate_size


@dataclass(frozen=True)
class Active:
    """Traversal in progress: one cursor per dimension, in dimension order."""

    cursors: tuple[Cursor, ...]


@dataclass(frozen=True)
class Exhausted:
    """Terminal state: every combination has been produced."""

    pass


EXHAUSTED = Exhausted()

State = Active | Exhausted


class Pull(NamedTuple):
    """Result of one pull from a generator."""

    combination: Combination | None
    """The combination produced, or None if the generator was already exhausted."""

    has_more: bool
    """Whether another pull will produce a combination."""


def initial_state(dimensions: tuple[Dimension, ...]) -> State:
    """Return the starting state for the given dimensions."""
    # Any empty dimension makes the whole product empty
    if any(len(d) == 0 for d in dimensions):
        return EXHAUSTED
    return Active(tuple(Cursor(d) for d in dimensions))


def transition(state: State) -> tuple[State, Combination | None]:
    """
    Produce the combination under the cursors and advance the odometer.

    The last cursor moves fastest. Scanning from the last cursor to the
    first, each cursor that runs off the end of its dimension is reset and
    the carry moves to the cursor before it; the first cursor that stays in
    bounds ends the scan. A carry out of the first cursor means every
    combination has been produced.

    Args:
        state: The current state. Never mutated.

    Returns:
        The next state and the combination produced (None from Exhausted).
    """
    if isinstance(state, Exhausted):
        return state, None

    combination = Combination(cursor.current() for cursor in state.cursors)

    cursors = list(state.cursors)
    for i in range(len(cursors) - 1, -1, -1):
        moved = cursors[i].advanced()
        if not moved.exhausted:
            cursors[i] = moved
            return Active(tuple(cursors)), combination
        cursors[i] = moved.reset()

    return EXHAUSTED, combination


class ProductGenerator:
    """
    A single-pass, thread-safe generator of Cartesian product combinations.

    Combinations come out in lexicographic order over dimension index, the
    same order as nested loops with the first dimension outermost:

        >>> gen = ProductGenerator([["a", "b"], [1, 2]])
        >>> [c.all_remaining() for c in gen]
        [['a', 1], ['a', 2], ['b', 1], ['b', 2]]

    Each pull reads the cursors and advances them as one critical section,
    so concurrent callers never see the same combination twice and never
    skip one. The generator is not restartable; build a new one to iterate
    again.
    """

    def __init__(
        self,
        dimensions: Iterable[Dimension | Iterable[Value]],
        config: ProductConfig | None = None,
    ) -> None:
        """
        Initialize the generator.

        Args:
            dimensions: The dimensions, in declaration order. Plain iterables
                are materialized into Dimensions.
            config: Estimation and logging settings. Uses defaults if None.
        """
        self._config = config or ProductConfig()
        self._dimensions: tuple[Dimension, ...] = tuple(
            as_dimension(d) for d in dimensions
        )
        self._estimate = estimate_size(
            (len(d) for d in self._dimensions), self._config.max_estimate
        )
        self._lock = threading.Lock()
        self._state: State = initial_state(self._dimensions)
        self._produced = 0

        logger.debug(
            f"ProductGenerator over {len(self._dimensions)} dimensions "
            f"with lengths {[len(d) for d in self._dimensions]} "
            f"(estimated size {self._estimate})"
        )
        if isinstance(self._state, Exhausted):
            logger.debug("ProductGenerator has an empty dimension, nothing to produce")

    @property
    def dimensions(self) -> tuple[Dimension, ...]:
        return self._dimensions

    @property
    def dimension_count(self) -> int:
        return len(self._dimensions)

    @property
    def exhausted(self) -> bool:
        """Whether every combination has been produced."""
        with self._lock:
            return isinstance(self._state, Exhausted)

    @property
    def produced(self) -> int:
        """Number of combinations produced so far."""
        return self._produced

    def estimate_size(self) -> int:
        """
        Estimate the total number of combinations.

        The saturating product of the dimension lengths while traversal is
        in progress, 0 once exhausted. Advisory only.
        """
        if self.exhausted:
            return 0
        return self._estimate

    def pull(self) -> Pull:
        """
        Produce the next combination and advance.

        Returns:
            A Pull holding the combination (None once exhausted) and whether
            another pull will succeed.
        """
        with self._lock:
            if isinstance(self._state, Exhausted):
                return Pull(None, False)
            self._state, combination = transition(self._state)
            self._produced += 1
            produced = self._produced
            has_more = isinstance(self._state, Active)

        log_every = self._config.log_every
        if log_every and produced % log_every == 0:
            logger.debug(f"Produced {produced}/{self._estimate} combinations")
        if not has_more:
            logger.debug(f"ProductGenerator exhausted after {produced} combinations")
        return Pull(combination, has_more)

    def try_advance(self, action: Callable[[Combination], object]) -> bool:
        """
        Pull one combination and pass it to `action`.

        Returns:
            True if a combination was produced, False if already exhausted.
        """
        combination, _ = self.pull()
        if combination is None:
            return False
        action(combination)
        return True

    def for_each_remaining(self, action: Callable[[Combination], object]) -> None:
        """Pass every remaining combination to `action`."""
        while self.try_advance(action):
            pass

    def __iter__(self) -> "ProductGenerator":
        return self

    def __next__(self) -> Combination:
        combination, _ = self.pull()
        if combination is None:
            raise StopIteration
        return combination

    def __repr__(self) -> str:
        lengths = [len(d) for d in self._dimensions]
        return (
            f"{self.__class__.__name__}(lengths={lengths}, "
            f"produced={self._produced}, exhausted={self.exhausted})"
        )
