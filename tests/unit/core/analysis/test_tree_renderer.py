from __future__ import annotations

"""
Unit tests for the ASCII tree renderer.
"""

from fswalker.core.analysis.tree_renderer import render_tree
from fswalker.domain.tree_models import TreeNode


def _sample_nodes():
    components = TreeNode(
        "components", "/p/src/components", True,
        (TreeNode("button.jsx", "/p/src/components/button.jsx", False),),
    )
    src = TreeNode("src", "/p/src", True, (TreeNode("app.js", "/p/src/app.js", False), components))
    return [src, TreeNode("empty", "/p/empty", True, ()), TreeNode("main.py", "/p/main.py", False)]


def test_connectors_and_indentation() -> None:
    assert render_tree(_sample_nodes()) == [
        "├── src/",
        "│   ├── app.js",
        "│   └── components/",
        "│       └── button.jsx",
        "├── empty/",
        "└── main.py",
    ]


def test_root_label_is_first_line() -> None:
    lines = render_tree(_sample_nodes(), root_label="/p")
    assert lines[0] == "/p"
    assert len(lines) == 7


def test_empty_tree() -> None:
    assert render_tree([]) == []
