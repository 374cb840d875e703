from __future__ import annotations

"""
Unit tests for the flat path listing service.
"""

from pathlib import Path

from fswalker.core.services.listing import list_paths
from fswalker.core.traversal.reporters import FailureCollector


def test_lists_files_and_directories(sample_tree: Path) -> None:
    paths = list_paths(str(sample_tree / "src"))
    assert sorted(paths) == sorted([
        str(sample_tree / "src" / "app.js"),
        str(sample_tree / "src" / "components"),
        str(sample_tree / "src" / "components" / "button.jsx"),
        str(sample_tree / "src" / "components" / "readme.md"),
    ])


def test_files_only(sample_tree: Path) -> None:
    paths = list_paths(str(sample_tree), include_dirs=False)
    assert len(paths) == 7
    assert str(sample_tree / "empty_dir") not in paths


def test_dirs_only(sample_tree: Path) -> None:
    paths = list_paths(str(sample_tree), include_files=False)
    assert sorted(Path(p).name for p in paths) == sorted(
        ["src", "components", "CaseSensitive", "empty_dir", "shallow"]
    )


def test_parent_listed_before_children(sample_tree: Path) -> None:
    paths = list_paths(str(sample_tree))
    assert paths.index(str(sample_tree / "src")) < paths.index(str(sample_tree / "src" / "app.js"))


def test_missing_root_yields_empty_list(tmp_path: Path) -> None:
    collector = FailureCollector(forward=None)
    assert list_paths(str(tmp_path / "missing"), on_error=collector) == []
    assert collector.root_failed
