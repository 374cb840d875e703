from __future__ import annotations

"""
fswalker: depth-first filesystem traversal with visitor callbacks, the
utilities built on it, and structural path validation.
"""

from fswalker.core.analysis.flattener import flatten_structure_to_paths
from fswalker.core.analysis.tree_builder import build_structure, get_nested_structure
from fswalker.core.analysis.tree_renderer import render_tree
from fswalker.core.services.listing import list_paths
from fswalker.core.services.reducer import process_paths_with_reducer
from fswalker.core.services.search import traverse_fs
from fswalker.core.services.size import get_directory_size
from fswalker.core.traversal.engine import traverse
from fswalker.core.traversal.reporters import FailureCollector
from fswalker.core.validation.path_structure import (
    PathKind,
    classify_path,
    is_valid_structure,
    normalize_path,
    paths_equal,
)
from fswalker.domain.constants import APP_VERSION
from fswalker.domain.search_models import SearchConfig, SearchResult
from fswalker.domain.traversal_models import FailureKind, TraversalFailure, VisitAction
from fswalker.domain.tree_models import FileLeaf, TreeNode

__version__ = APP_VERSION

__all__ = [
    "traverse",
    "get_directory_size",
    "traverse_fs",
    "get_nested_structure",
    "build_structure",
    "flatten_structure_to_paths",
    "process_paths_with_reducer",
    "list_paths",
    "render_tree",
    "is_valid_structure",
    "normalize_path",
    "paths_equal",
    "classify_path",
    "PathKind",
    "VisitAction",
    "FailureKind",
    "TraversalFailure",
    "FailureCollector",
    "SearchConfig",
    "SearchResult",
    "TreeNode",
    "FileLeaf",
]
