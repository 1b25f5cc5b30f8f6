"""Overflow-safe size estimation for Cartesian products."""

from collections.abc import Iterable

from lazyproduct.core.config import MAX_ESTIMATE


def saturating_multiply(a: int, b: int, maximum: int = MAX_ESTIMATE) -> int:
    """
    Multiply two non-negative counts, clamping the result at `maximum`.

    Examples:
        >>> saturating_multiply(3, 4)
        12
        >>> saturating_multiply(2**40, 2**40) == MAX_ESTIMATE
        True
    """
    if a == 0:
        return 0
    if maximum // a < b:
        return maximum
    return a * b


def estimate_size(lengths: Iterable[int], maximum: int = MAX_ESTIMATE) -> int:
    """
    Estimate the number of combinations of dimensions with the given lengths.

    The product of all lengths, folded left to right with a saturating
    multiply. Once saturated the value is an upper bound, not an exact
    count. An empty list of lengths gives 1, the size of the empty product.

    Args:
        lengths: Dimension lengths, in dimension order.
        maximum: Saturation ceiling.

    Returns:
        The estimated product size, at most `maximum`.

    Raises:
        ValueError: If a length is negative.
    """
    result = 1
    for length in lengths:
        if length < 0:
            raise ValueError(f"Dimension length must be non-negative, got {length}")
        result = saturating_multiply(result, length, maximum)
    return min(result, maximum)
