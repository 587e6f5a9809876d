"""Per-feature graceful degradation."""

from collections.abc import Callable
from typing import Any, TypeVar

import structlog

from ..utils import invoke

logger = structlog.get_logger()

T = TypeVar("T")


class GracefulDegradation:
    """Feature flags that switch themselves off when a feature fails.

    Every feature is enabled until explicitly disabled. A failing
    ``execute_feature`` call disables its feature for good: unlike a circuit
    breaker there is no half-open probe, so the feature stays on its fallback
    path until ``enable_feature`` or ``reset`` is called.
    """

    def __init__(self) -> None:
        self._overrides: dict[str, bool] = {}

    def enable_feature(self, name: str) -> None:
        """Enable a feature."""
        self._overrides[name] = True
        logger.info("Feature enabled", feature=name)

    def disable_feature(self, name: str) -> None:
        """Disable a feature (graceful degradation)."""
        self._overrides[name] = False
        logger.info("Feature disabled", feature=name)

    def is_feature_enabled(self, name: str) -> bool:
        """Check if feature is enabled; unknown features are enabled."""
        return self._overrides.get(name, True)

    async def execute_feature(
        self,
        name: str,
        primary_fn: Callable[[], Any],
        fallback_fn: Callable[[], Any],
    ) -> Any:
        """Run ``primary_fn`` while ``name`` is enabled, else ``fallback_fn``.

        A failure of ``primary_fn`` disables the feature and returns the
        fallback result instead of raising.
        """
        if not self.is_feature_enabled(name):
            return await invoke(fallback_fn, operation=name)

        try:
            return await invoke(primary_fn, operation=name)
        except Exception as e:
            logger.warning(
                "Feature failed, disabling",
                feature=name,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            self.disable_feature(name)
            return await invoke(fallback_fn, operation=name)

    def feature_states(self) -> dict[str, bool]:
        """Snapshot of explicit overrides."""
        return dict(self._overrides)

    def disabled_features(self) -> list[str]:
        """Names of features currently disabled."""
        return [name for name, enabled in self._overrides.items() if not enabled]

    def reset(self) -> None:
        """Reset all features to the default enabled state."""
        self._overrides.clear()
        logger.info("Feature flags reset")
