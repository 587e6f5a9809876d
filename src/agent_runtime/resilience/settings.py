"""Environment-driven settings for the resilience toolkit."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from agent_runtime.observability.logging import LogFormat, LogLevel, setup_logging

from .cache.config import CacheConfig
from .retry.config import RetryConfig


class ResilienceSettings(BaseSettings):
    """Resilience configuration read from ``RESILIENCE_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="RESILIENCE_", env_file=".env", extra="ignore"
    )

    # Cache settings
    cache_max_size: int = Field(default=100, ge=1)
    cache_ttl: float = Field(default=3600.0, gt=0)

    # Retry settings (milliseconds)
    retry_max_attempts: int = Field(default=3, ge=1)
    retry_base_delay: float = Field(default=1000.0, ge=0)
    retry_max_delay: float | None = None
    retry_exponential_backoff: bool = True
    retry_jitter: bool = False

    # Per-attempt deadline in seconds, shared by retry and fallback
    attempt_timeout: float | None = None

    # Performance monitor
    monitor_max_samples: int = Field(default=100, ge=1)

    # Recovery
    network_recovery_wait: float = Field(default=5.0, ge=0)

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: LogFormat = LogFormat.JSON
    log_file: str | None = None

    def get_cache_config(self) -> CacheConfig:
        """Get cache configuration."""
        return CacheConfig(max_size=self.cache_max_size, ttl=self.cache_ttl)

    def get_retry_config(self) -> RetryConfig:
        """Get retry configuration."""
        return RetryConfig(
            max_attempts=self.retry_max_attempts,
            base_delay=self.retry_base_delay,
            max_delay=self.retry_max_delay,
            exponential_backoff=self.retry_exponential_backoff,
            jitter=self.retry_jitter,
            attempt_timeout=self.attempt_timeout,
        )

    def configure_logging(self) -> None:
        """Apply the logging settings to structlog."""
        setup_logging(
            level=self.log_level, format_type=self.log_format, log_file=self.log_file
        )
