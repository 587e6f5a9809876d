"""Tests for resilience exceptions."""

from agent_runtime.domain import AgentRuntimeException, ErrorCode
from agent_runtime.observability.logging import correlation_scope
from agent_runtime.resilience.exceptions import (
    AttemptTimeoutException,
    ResilienceException,
    RetryExhaustedException,
)


class TestResilienceExceptions:
    """Test exception hierarchy and payloads."""

    def test_retry_exhausted(self):
        """Test retry exhaustion message and details."""
        error = RetryExhaustedException("web_search", 3, "connection reset")

        assert str(error) == "web_search failed after 3 attempts: connection reset"
        assert error.error_code == ErrorCode.RETRY_EXHAUSTED
        assert error.details == {
            "label": "web_search",
            "max_attempts": 3,
            "last_error": "connection reset",
        }
        assert isinstance(error, ResilienceException)
        assert isinstance(error, AgentRuntimeException)

    def test_attempt_timeout(self):
        """Test attempt timeout payload."""
        error = AttemptTimeoutException("inference", 2.0, correlation_id="abc")

        assert "inference timed out after 2.0s" in str(error)
        assert error.error_code == ErrorCode.TIMEOUT_ERROR
        assert error.correlation_id == "abc"
        assert error.timeout == 2.0

    def test_records_active_correlation_id(self):
        """Test errors raised inside a scope carry its ID."""
        with correlation_scope("task-9"):
            error = RetryExhaustedException("web_search", 3, "connection reset")
        assert error.correlation_id == "task-9"

    def test_explicit_correlation_id_wins(self):
        """Test a given ID is kept over the active one."""
        with correlation_scope("task-9"):
            error = AttemptTimeoutException("inference", 1.0, correlation_id="abc")
        assert error.correlation_id == "abc"

    def test_no_correlation_id_outside_scope(self):
        """Test errors raised outside any scope have no ID."""
        assert ResilienceException("boom").correlation_id is None
