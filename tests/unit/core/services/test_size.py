from __future__ import annotations

"""
Unit tests for the Directory Size Aggregator.
"""

from pathlib import Path
from unittest.mock import patch

from fswalker.core.services.size import get_directory_size
from fswalker.core.traversal.reporters import FailureCollector
from fswalker.domain.traversal_models import FailureKind
from fswalker.infra.fs import stat_entry as real_stat_entry


def test_sums_visible_files(sample_tree: Path, sample_size: int) -> None:
    assert get_directory_size(str(sample_tree)) == sample_size


def test_hidden_files_are_excluded(sample_tree: Path, sample_size: int) -> None:
    hidden_bytes = len("ref: refs/heads/main") + len("SECRET=1")
    total = get_directory_size(str(sample_tree), hidden_marker="~")
    assert total == sample_size + hidden_bytes


def test_empty_directory_is_zero(sample_tree: Path) -> None:
    assert get_directory_size(str(sample_tree / "empty_dir")) == 0


def test_missing_root_is_zero_and_reported(tmp_path: Path) -> None:
    collector = FailureCollector(forward=None)
    assert get_directory_size(str(tmp_path / "missing"), on_error=collector) == 0
    assert collector.root_failed


def test_unreadable_file_contributes_zero(sample_tree: Path) -> None:
    broken = str(sample_tree / "shallow" / "file2.txt")

    def flaky_stat(path: str):
        if path == broken:
            raise PermissionError("denied")
        return real_stat_entry(path)

    collector = FailureCollector(forward=None)
    with patch("fswalker.core.services.size.stat_entry", side_effect=flaky_stat):
        total = get_directory_size(str(sample_tree / "shallow"), on_error=collector)

    assert total == 0
    failures = collector.of_kind(FailureKind.ENTRY_METADATA)
    assert [f.path for f in failures] == [broken]
