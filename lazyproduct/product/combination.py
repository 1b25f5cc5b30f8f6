"""Single-pass, typed access to one point of a Cartesian product."""

import threading
from collections.abc import Iterable
from typing import Any, TypeVar

from lazyproduct.core.errors import ExhaustedError, TypeMismatchError
from lazyproduct.core.types import Value

T = TypeVar("T")

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


class Combination:
    """
    One value from each dimension, in dimension order.

    A combination is a snapshot: it holds copies of the values drawn at the
    moment of a pull and no reference back to the generator. Values are read
    in order, each exactly once, optionally checked against a type:

        >>> c = Combination(["a", 1, 2.5, True])
        >>> c.next_str(), c.next_int(), c.next_float(), c.next_bool()
        ('a', 1, 2.5, True)
        >>> c.has_next()
        False

    A read whose type check fails still consumes the slot. None passes a
    typed `next` but fails the scalar reads (`next_int`, `next_float`, ...).
    """

    __slots__ = ("_values", "_position", "_lock")

    def __init__(self, values: Iterable[Value]) -> None:
        self._values: tuple[Value, ...] = tuple(values)
        self._position = 0
        self._lock = threading.Lock()

    def has_next(self) -> bool:
        """Return whether an unread value remains."""
        return self._position < len(self._values)

    @property
    def remaining(self) -> int:
        """Number of unread values."""
        return len(self._values) - self._position

    def _take(self) -> tuple[int, Value]:
        with self._lock:
            position = self._position
            if position >= len(self._values):
                raise ExhaustedError(
                    f"Combination of {len(self._values)} values has no value "
                    f"at position {position}"
                )
            self._position = position + 1
        return position, self._values[position]

    def next(self, type: type[T] | tuple[type, ...] | None = None) -> T | Any:
        """
        Return the next unread value.

        Args:
            type: If given, the value must be None or an instance of this
                type (or of one of the types in a tuple).

        Returns:
            The value.

        Raises:
            ExhaustedError: If every value has already been read.
            TypeMismatchError: If the value is not an instance of `type`.
        """
        position, value = self._take()
        if type is not None and value is not None and not _is_instance(value, type):
            raise TypeMismatchError(type, value, position)
        return value

    def _next_required(self, type: type[T]) -> T:
        # Scalar reads have no "missing" value, so None is a mismatch
        position, value = self._take()
        if value is None or not _is_instance(value, type):
            raise TypeMismatchError(type, value, position)
        return value

    def next_int(self) -> int:
        """Return the next value, which must be an int (not a bool or None)."""
        return self._next_required(int)

    def next_long(self) -> int:
        """Return the next value, which must be an int in the signed 64-bit range."""
        position, value = self._take()
        if value is None or not _is_instance(value, int) or not _LONG_MIN <= value <= _LONG_MAX:
            raise TypeMismatchError(int, value, position)
        return value

    def next_float(self) -> float:
        """Return the next value, which must be a float (not None)."""
        return self._next_required(float)

    next_double = next_float

    def next_bool(self) -> bool:
        """Return the next value, which must be a bool (not None)."""
        return self._next_required(bool)

    next_boolean = next_bool

    def next_str(self) -> str | None:
        """Return the next value, which must be a str or None."""
        return self.next(str)

    def all_remaining(self, type: type[T] | tuple[type, ...] | None = None) -> list[T]:
        """
        Drain every unread value, in order.

        Fails on the first value that does not match `type`; values before it
        have been consumed.
        """
        answer = []
        while self.has_next():
            answer.append(self.next(type))
        return answer

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self._values)
        return f"{self.__class__.__name__}({values}; read={self._position})"


def _is_instance(value: Value, expected: type | tuple[type, ...]) -> bool:
    # bool is a subclass of int in Python; a checked downcast keeps them apart
    types = expected if isinstance(expected, tuple) else (expected,)
    if isinstance(value, bool):
        return any(t is bool or (t is not int and isinstance(value, t)) for t in types)
    return isinstance(value, types)
