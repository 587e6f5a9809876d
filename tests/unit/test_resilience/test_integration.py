"""Tests for settings and composed resilience facades."""

import json
import logging

import pytest
import structlog

from agent_runtime.resilience import (
    CacheConfig,
    CacheManager,
    ErrorContext,
    ErrorHandler,
    ErrorRecoveryManager,
    FallbackChain,
    FallbackExecutor,
    GracefulDegradation,
    Memoizer,
    PerformanceMonitor,
    PerformanceOptimizer,
    ResilienceSettings,
    RetryConfig,
    RetryExhaustedException,
    RetryHandler,
    create_error_handler,
    create_performance_optimizer,
)


class TestResilienceSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        """Test settings defaults map onto component configs."""
        settings = ResilienceSettings()

        cache_config = settings.get_cache_config()
        assert cache_config.max_size == 100
        assert cache_config.ttl == 3600.0

        retry_config = settings.get_retry_config()
        assert retry_config.max_attempts == 3
        assert retry_config.base_delay == 1000.0
        assert retry_config.max_delay is None

    def test_environment_overrides(self, monkeypatch):
        """Test RESILIENCE_ variables override defaults."""
        monkeypatch.setenv("RESILIENCE_CACHE_MAX_SIZE", "7")
        monkeypatch.setenv("RESILIENCE_RETRY_MAX_ATTEMPTS", "5")
        monkeypatch.setenv("RESILIENCE_ATTEMPT_TIMEOUT", "2.5")

        settings = ResilienceSettings()

        assert settings.get_cache_config().max_size == 7
        assert settings.get_retry_config().max_attempts == 5
        assert settings.get_retry_config().attempt_timeout == 2.5

    def test_large_base_delay_without_cap(self, monkeypatch):
        """Test a large base delay builds an uncapped retry config."""
        monkeypatch.setenv("RESILIENCE_RETRY_BASE_DELAY", "60000")

        retry_config = ResilienceSettings().get_retry_config()

        assert retry_config.base_delay == 60000.0
        assert retry_config.max_delay is None

    def test_configure_logging(self, monkeypatch, capsys):
        """Test logging settings are applied to structlog."""
        monkeypatch.setenv("RESILIENCE_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("RESILIENCE_LOG_FORMAT", "json")
        settings = ResilienceSettings()

        try:
            settings.configure_logging()
            logger = structlog.get_logger("agent_runtime.test")
            logger.info("hidden")
            logger.warning("Fallback failed", fallback=1)
        finally:
            structlog.reset_defaults()
            logging.getLogger().handlers.clear()

        lines = capsys.readouterr().out.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["Fallback failed"]


class TestErrorHandler:
    """Test the error handler facade."""

    @pytest.fixture
    def settings(self):
        """Create fast settings for testing."""
        return ResilienceSettings(
            retry_max_attempts=2,
            retry_base_delay=1,
            retry_max_delay=5,
            network_recovery_wait=0,
        )

    def test_default_strategies_registered(self, settings):
        """Test the handler is pre-loaded with built-in strategies."""
        handler = create_error_handler(settings)
        assert len(handler.recovery.strategies) == 3
        assert handler.retry.config.max_attempts == 2

    def test_cleanup(self, settings):
        """Test cleanup clears strategies and feature overrides."""
        handler = create_error_handler(settings)
        handler.degradation.disable_feature("webBrowsing")

        handler.cleanup()

        assert handler.recovery.strategies == ()
        assert handler.degradation.is_feature_enabled("webBrowsing") is True

    @pytest.mark.asyncio
    async def test_retry_inside_fallback_then_recovery(self, settings):
        """Test composing retry, fallback and recovery around one call."""
        handler = create_error_handler(settings)
        attempts = 0

        async def web_search():
            nonlocal attempts
            attempts += 1
            raise ConnectionError("network unreachable")

        async def cached_search():
            return ["cached result"]

        result = await handler.fallback.execute_with_fallback(
            FallbackChain(
                primary=lambda: handler.retry.retry(web_search, "web_search"),
                fallbacks=[cached_search],
            )
        )
        assert result == ["cached result"]
        assert attempts == 2

        recovered = await handler.recovery.recover(
            ErrorContext(
                operation="web_search",
                error=RetryExhaustedException("web_search", 2, "network unreachable"),
                attempt=2,
            )
        )
        assert recovered is True

    @pytest.mark.asyncio
    async def test_retry_inside_degradation(self, recording_sleep):
        """Test an exhausted retry trips the feature breaker."""
        handler = create_error_handler(ResilienceSettings(network_recovery_wait=0))
        handler.retry = RetryHandler(
            RetryConfig(max_attempts=2, base_delay=1), sleep=recording_sleep
        )

        async def execute_code():
            raise RuntimeError("sandbox crashed")

        result = await handler.degradation.execute_feature(
            "codeExecution",
            lambda: handler.retry.retry(execute_code, "execute_code"),
            lambda: "Code execution is unavailable.",
        )

        assert result == "Code execution is unavailable."
        assert handler.degradation.is_feature_enabled("codeExecution") is False


class TestPerformanceOptimizerFactory:
    """Test the performance optimizer factory."""

    def test_uses_settings(self):
        """Test settings flow into the cache and monitor."""
        optimizer = create_performance_optimizer(
            ResilienceSettings(cache_max_size=2, monitor_max_samples=5)
        )
        assert optimizer.cache.config.max_size == 2
        assert optimizer.monitor.max_samples == 5

    def test_instances_are_independent(self):
        """Test each factory call builds fresh state."""
        first = create_performance_optimizer()
        second = create_performance_optimizer()

        first.cache.set("a", 1)
        assert second.cache.get("a") is None

    def test_settings_flow_into_empty_cache(self):
        """Test the configured cache is kept even though it starts empty."""
        optimizer = create_performance_optimizer(
            ResilienceSettings(cache_max_size=2, cache_ttl=10)
        )
        assert len(optimizer.cache) == 0
        assert optimizer.cache.config.ttl == 10

        for key in ("a", "b", "c"):
            optimizer.cache.set(key, key)
        assert optimizer.cache.get_stats()["size"] == 2


class TestInjectedComponents:
    """Test facades keep the components they are given."""

    def test_optimizer_keeps_injected_components(self):
        """Test empty injected components are not replaced."""
        cache = CacheManager(CacheConfig(max_size=2))
        memoizer = Memoizer()
        monitor = PerformanceMonitor(max_samples=3)

        optimizer = PerformanceOptimizer(
            cache=cache, memoizer=memoizer, monitor=monitor
        )

        assert optimizer.cache is cache
        assert optimizer.memoizer is memoizer
        assert optimizer.monitor is monitor

    def test_error_handler_keeps_injected_components(self):
        """Test the error handler uses the components it is given."""
        retry = RetryHandler(RetryConfig(max_attempts=1))
        fallback = FallbackExecutor(attempt_timeout=1.0)
        recovery = ErrorRecoveryManager()
        degradation = GracefulDegradation()

        handler = ErrorHandler(retry, fallback, recovery, degradation)

        assert handler.retry is retry
        assert handler.fallback is fallback
        assert handler.recovery is recovery
        assert handler.degradation is degradation
