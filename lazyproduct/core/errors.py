"""Error types raised by lazyproduct."""


class ProductError(Exception):
    """Base exception for lazyproduct."""

    pass


class TypeMismatchError(ProductError, TypeError):
    """A combination value is not an instance of the requested type."""

    def __init__(self, expected: type | tuple[type, ...], actual: object, position: int) -> None:
        self.expected = expected
        self.actual = actual
        self.position = position
        super().__init__(
            f"Value at position {position} is {type(actual).__name__} "
            f"({actual!r}), expected {_type_name(expected)}"
        )


class ExhaustedError(ProductError, LookupError):
    """A read was attempted past the last available value."""

    pass


def _type_name(expected: type | tuple[type, ...]) -> str:
    if isinstance(expected, tuple):
        return " | ".join(t.__name__ for t in expected)
    return expected.__name__
