from __future__ import annotations

"""
Traversal Error Sinks.

Provides the default logging sink and a collecting sink for callers that
need to inspect failures after a walk (CLI summaries, tests).
"""

import logging
from typing import List, Optional

from fswalker.domain.traversal_models import ErrorReporter, FailureKind, TraversalFailure

logger = logging.getLogger(__name__)


def log_failure(failure: TraversalFailure) -> None:
    """
    Default error channel: route the failure to the logging subsystem.

    Root failures end the invocation and are logged at ERROR; localized
    failures are logged at WARNING.
    """
    if failure.is_terminal:
        logger.error(failure.message)
    else:
        logger.warning(failure.message)


class FailureCollector:
    """
    Error channel that records every failure it receives.

    Args:
        forward: Optional sink that also receives each failure. Defaults to
                 the logging sink; pass None to collect silently.
    """

    def __init__(self, forward: Optional[ErrorReporter] = log_failure):
        self._forward = forward
        self.failures: List[TraversalFailure] = []

    def __call__(self, failure: TraversalFailure) -> None:
        self.failures.append(failure)
        if self._forward is not None:
            self._forward(failure)

    def __len__(self) -> int:
        return len(self.failures)

    @property
    def root_failed(self) -> bool:
        return any(f.kind is FailureKind.ROOT_INACCESSIBLE for f in self.failures)

    def of_kind(self, kind: FailureKind) -> List[TraversalFailure]:
        return [f for f in self.failures if f.kind is kind]

    @property
    def messages(self) -> List[str]:
        return [f.message for f in self.failures]
