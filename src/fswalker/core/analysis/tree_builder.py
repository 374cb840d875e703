from __future__ import annotations

"""
Directory Tree Builder.

Materializes a live directory hierarchy into immutable TreeNode objects in a
single traversal pass, and converts the result into the nested mapping
consumed by the structure flattener.
"""

import logging
import os
from typing import Dict, List, Optional, Tuple

from fswalker.core.traversal.engine import traverse
from fswalker.core.traversal.reporters import FailureCollector, log_failure
from fswalker.domain.constants import FILE_SENTINEL, HIDDEN_MARKER
from fswalker.domain.traversal_models import Entry, ErrorReporter
from fswalker.domain.tree_models import Structure, TreeNode
from fswalker.infra.fs import resolve_absolute

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_nested_structure(
        root: str,
        *,
        on_error: Optional[ErrorReporter] = None,
        hidden_marker: str = HIDDEN_MARKER,
) -> Optional[List[TreeNode]]:
    """
    Build the tree of everything below root.

    The root itself is not part of the result; only its descendants are.
    Directories carry their children in listing order, files carry None.
    A nested directory that cannot be listed keeps an empty children tuple
    and the build continues.

    Args:
        root: Directory to materialize.
        on_error: Error channel. Defaults to the logging sink.
        hidden_marker: Prefix of entries excluded from the walk.

    Returns:
        Optional[List[TreeNode]]: The root's children, or None if the root
                                  is missing, not a directory or unreadable.
    """
    collector = FailureCollector(forward=on_error if on_error is not None else log_failure)
    root_abs = resolve_absolute(root)

    # Entries grouped by parent directory, and directories in visit order
    listing: Dict[str, List[Entry]] = {root_abs: []}
    dir_order: List[str] = []

    def _record(full_path: str, name: str, is_directory: bool) -> None:
        parent = os.path.dirname(full_path)
        listing.setdefault(parent, []).append(Entry(name, full_path, is_directory))
        if is_directory:
            listing.setdefault(full_path, [])
            dir_order.append(full_path)

    traverse(root_abs, _record, on_error=collector, hidden_marker=hidden_marker)

    if collector.root_failed:
        return None

    # Children are visited after their parent, so reverse order is bottom-up
    frozen: Dict[str, Tuple[TreeNode, ...]] = {}
    for dir_path in reversed(dir_order):
        frozen[dir_path] = _freeze_level(listing[dir_path], frozen)

    nodes = list(_freeze_level(listing[root_abs], frozen))
    logger.debug(f"Built tree for {root_abs}: {len(nodes)} top-level entries")
    return nodes


def build_structure(
        root: str,
        *,
        on_error: Optional[ErrorReporter] = None,
        hidden_marker: str = HIDDEN_MARKER,
) -> Optional[Structure]:
    """
    Build the nested-mapping form of a live directory.

    Directories become dicts and files the empty-string sentinel, which is
    the input format of flatten_structure_to_paths.

    Returns:
        Optional[Structure]: The mapping, or None on root failure.
    """
    nodes = get_nested_structure(root, on_error=on_error, hidden_marker=hidden_marker)
    if nodes is None:
        return None
    return structure_from_nodes(nodes)


def structure_from_nodes(nodes: List[TreeNode]) -> Structure:
    """Convert TreeNode sequences into the nested mapping representation."""
    structure: Structure = {}
    for node in nodes:
        if node.is_directory:
            structure[node.name] = structure_from_nodes(list(node.children or ()))
        else:
            structure[node.name] = FILE_SENTINEL
    return structure

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _freeze_level(entries: List[Entry], frozen: Dict[str, Tuple[TreeNode, ...]]) -> Tuple[TreeNode, ...]:
    return tuple(
        TreeNode(
            name=e.name,
            full_path=e.full_path,
            is_directory=e.is_directory,
            children=frozen.get(e.full_path, ()) if e.is_directory else None,
        )
        for e in entries
    )
