from __future__ import annotations

"""
Flat Path Listing Service.

Collects the full paths of a walk into a single ordered list.
"""

from typing import List, Optional

from fswalker.core.traversal.engine import traverse
from fswalker.domain.constants import HIDDEN_MARKER
from fswalker.domain.traversal_models import ErrorReporter


def list_paths(
        root: str,
        *,
        include_files: bool = True,
        include_dirs: bool = True,
        on_error: Optional[ErrorReporter] = None,
        hidden_marker: str = HIDDEN_MARKER,
) -> List[str]:
    """
    Return the full path of every visible entry below root, in visit order.

    Args:
        root: Directory to walk.
        include_files: Keep non-directory entries.
        include_dirs: Keep directory entries.
        on_error: Error channel. Defaults to the logging sink.
        hidden_marker: Prefix of entries excluded from the walk.

    Returns:
        List[str]: Paths in depth-first, listing order.
    """
    paths: List[str] = []

    def _collect(full_path: str, name: str, is_directory: bool) -> None:
        if (is_directory and include_dirs) or (not is_directory and include_files):
            paths.append(full_path)

    traverse(root, _collect, on_error=on_error, hidden_marker=hidden_marker)
    return paths
