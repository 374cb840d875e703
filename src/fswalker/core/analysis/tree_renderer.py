from __future__ import annotations

"""
Tree Renderer.

Converts TreeNode sequences into visual ASCII representations.
"""

from typing import List, Optional, Sequence

from fswalker.domain.tree_models import TreeNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(nodes: Sequence[TreeNode], root_label: Optional[str] = None) -> List[str]:
    """
    Render a tree as connector-indented lines, in the given order.

    Args:
        nodes: Top-level nodes (the root's children).
        root_label: Optional first line naming the root.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines: List[str] = [root_label] if root_label else []
    render_tree_structure(nodes, lines, prefix="")
    return lines


def render_tree_structure(nodes: Sequence[TreeNode], lines: List[str], prefix: str = "") -> None:
    """
    Recursively append the lines of one tree level to an accumulator.

    Uses standard ASCII connectors (├──, └──) and manages indentation
    levels for nested directories.

    Args:
        nodes: Nodes of the current level.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    total = len(nodes)

    for i, node in enumerate(nodes):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if node.is_directory:
            lines.append(f"{prefix}{connector}{node.name}/")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(node.children or (), lines, prefix=new_prefix)
            continue

        lines.append(f"{prefix}{connector}{node.name}")
