"""Retry configuration models."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class RetryConfig(BaseModel):
    """Retry configuration for fallible operations.

    Delays are in milliseconds; ``attempt_timeout`` is in seconds.
    """

    max_attempts: int = Field(default=3, ge=1, le=100, description="Maximum attempts")
    base_delay: float = Field(
        default=1000.0, ge=0.0, description="Base delay in milliseconds"
    )
    max_delay: float | None = Field(
        default=None, ge=0.0, description="Cap on a single delay in milliseconds"
    )
    exponential_backoff: bool = Field(
        default=True, description="Double the delay after every failed attempt"
    )
    jitter: bool = Field(
        default=False, description="Randomize each delay to 50-100% of its value"
    )
    attempt_timeout: float | None = Field(
        default=None, gt=0.0, description="Deadline for a single attempt in seconds"
    )

    @field_validator("max_delay")
    @classmethod
    def validate_max_delay(cls, v: float | None, info: Any) -> float | None:
        """Ensure max_delay is not below base_delay."""
        base_delay = info.data.get("base_delay")
        if v is not None and base_delay is not None and v < base_delay:
            raise ValueError("max_delay must not be less than base_delay")
        return v
