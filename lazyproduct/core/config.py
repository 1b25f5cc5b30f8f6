"""Configuration for product generation."""

import sys

from loguru import logger
from pydantic import BaseModel, Field, field_validator

MAX_ESTIMATE = 2**63 - 1
"""Default saturation ceiling for size estimates (signed 64-bit count)."""


class ProductConfig(BaseModel):
    """
    Configuration for building and traversing a Cartesian product.
    """

    max_estimate: int = Field(
        default=MAX_ESTIMATE,
        description="Ceiling at which size estimates saturate instead of growing",
    )

    # 1 allows a single-dimension (trivial) product
    min_dimensions: int = Field(
        default=1,
        description="Minimum number of dimensions a builder needs before build()",
    )

    log_every: int | None = Field(
        default=None,
        description="Emit a progress debug line every N pulls. None disables it.",
    )

    log_level: str = "INFO"

    @field_validator("max_estimate")
    def validate_max_estimate(cls, v):
        if v < 1:
            raise ValueError("max_estimate must be a positive integer")
        return v

    @field_validator("min_dimensions")
    def validate_min_dimensions(cls, v):
        if v < 1:
            raise ValueError("min_dimensions must be at least 1")
        return v

    @field_validator("log_every")
    def validate_log_every(cls, v):
        if v is not None and v < 1:
            raise ValueError("log_every must be at least 1 when set")
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        v = v.upper()
        if v not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v


def configure_logging(config: ProductConfig | None = None, sink=None) -> int:
    """
    Replace every loguru handler with one sink at the configured level.

    Args:
        config: Supplies `log_level`. Uses defaults if None.
        sink: Any loguru sink. Defaults to stderr.

    Returns:
        The loguru handler id of the new sink.
    """
    config = config or ProductConfig()
    logger.remove()
    return logger.add(sink if sink is not None else sys.stderr, level=config.log_level)
