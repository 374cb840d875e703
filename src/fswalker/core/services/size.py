from __future__ import annotations

"""
Directory Size Aggregation Service.
"""

import logging
from typing import Optional

from fswalker.core.traversal.engine import traverse
from fswalker.core.traversal.reporters import log_failure
from fswalker.domain.constants import HIDDEN_MARKER
from fswalker.domain.traversal_models import ErrorReporter, FailureKind, TraversalFailure
from fswalker.infra.fs import stat_entry

logger = logging.getLogger(__name__)


def get_directory_size(
        root: str,
        *,
        on_error: Optional[ErrorReporter] = None,
        hidden_marker: str = HIDDEN_MARKER,
) -> int:
    """
    Sum the byte size of every visible file below a directory.

    Files whose metadata cannot be read are reported and contribute 0.
    An inaccessible root is reported and yields 0.

    Args:
        root: Directory to measure.
        on_error: Error channel. Defaults to the logging sink.
        hidden_marker: Prefix of entries excluded from the walk.

    Returns:
        int: Total size in bytes.
    """
    report = on_error if on_error is not None else log_failure
    total = 0

    def _size_visitor(full_path: str, name: str, is_directory: bool) -> None:
        nonlocal total
        if is_directory:
            return
        try:
            total += stat_entry(full_path).size
        except OSError as e:
            report(TraversalFailure(FailureKind.ENTRY_METADATA, full_path, str(e)))

    traverse(root, _size_visitor, on_error=report, hidden_marker=hidden_marker)
    logger.debug(f"Directory size for {root}: {total} bytes")
    return total
