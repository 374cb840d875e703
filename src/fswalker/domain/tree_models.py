from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the node type produced by the nested-tree builder and the
recursive mapping type consumed by the structure flattener.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# LIVE FILESYSTEM TREE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeNode:
    """
    One entry of a materialized directory tree.

    Attributes:
        name: Base name of the entry.
        full_path: Absolute filesystem path.
        is_directory: Whether the entry is a directory.
        children: Child nodes in listing order for directories, None for files.
    """
    name: str
    full_path: str
    is_directory: bool
    children: Optional[Tuple["TreeNode", ...]] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "fullPath": self.full_path,
            "isDirectory": self.is_directory,
            "children": (
                [child.to_dict() for child in self.children]
                if self.children is not None else None
            ),
        }

# -----------------------------------------------------------------------------
# IN-MEMORY STRUCTURE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileLeaf:
    """Tagged file marker inside an in-memory structure."""

# Nested mapping: dict values are directories, FileLeaf or "" are files.
Structure = Dict[str, Union["Structure", FileLeaf, str]]
