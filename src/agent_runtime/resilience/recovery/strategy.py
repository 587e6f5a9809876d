"""Recovery strategy and error context types."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from agent_runtime.observability.logging import get_correlation_id


@dataclass
class ErrorContext:
    """Describes one failure handed to the recovery manager."""

    operation: str
    error: BaseException
    attempt: int = 1
    timestamp: float = field(default_factory=time.time)
    metadata: dict[str, Any] = field(default_factory=dict)
    correlation_id: str | None = field(default_factory=get_correlation_id)


@dataclass
class RecoveryStrategy:
    """Remedial action applied to errors matching ``condition``.

    ``action`` receives the ``ErrorContext`` and may be sync or async.
    """

    name: str
    condition: Callable[[BaseException], bool]
    action: Callable[[ErrorContext], Any]
