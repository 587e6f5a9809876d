"""Cache configuration models."""

from typing import Literal

from pydantic import BaseModel, Field


class CacheConfig(BaseModel):
    """Configuration for a bounded in-memory cache."""

    max_size: int = Field(
        default=100, ge=1, description="Maximum number of live entries"
    )
    ttl: float = Field(default=3600.0, gt=0, description="Entry lifetime in seconds")
    strategy: Literal["lru"] = Field(default="lru", description="Eviction policy")
