"""Shared type aliases for lazyproduct."""

from typing import Any

Value = Any
"""A single dimension element. Dimensions are heterogeneous."""

Record = dict[str, Any]
"""A named-column record produced by seed sources."""
