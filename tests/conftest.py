from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A realistic on-disk directory tree shared by traversal tests.
3. Isolation of the user data directory from the real home folder.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small project tree on disk.

    Structure:
    /sample
      .git/HEAD               (hidden)
      root_config.json        (17 bytes)
      src/app.js              (14 bytes)
      src/components/button.jsx (10 bytes)
      src/components/readme.md  (5 bytes)
      src/.env                (hidden)
      CaseSensitive/TEST.txt  (4 bytes)
      empty_dir/
      shallow/file1.txt       (0 bytes)
      shallow/file2.txt       (3 bytes)
    """
    root = tmp_path / "sample"
    root.mkdir()

    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main", encoding="utf-8")
    (root / "root_config.json").write_bytes(b'{"debug": false}\n')

    (root / "src" / "components").mkdir(parents=True)
    (root / "src" / "app.js").write_text("console.log();", encoding="utf-8")
    (root / "src" / ".env").write_text("SECRET=1", encoding="utf-8")
    (root / "src" / "components" / "button.jsx").write_bytes(b"<button/>\n")
    (root / "src" / "components" / "readme.md").write_text("# btn", encoding="utf-8")

    (root / "CaseSensitive").mkdir()
    (root / "CaseSensitive" / "TEST.txt").write_text("test", encoding="utf-8")

    (root / "empty_dir").mkdir()

    (root / "shallow").mkdir()
    (root / "shallow" / "file1.txt").write_text("", encoding="utf-8")
    (root / "shallow" / "file2.txt").write_text("abc", encoding="utf-8")

    return root


@pytest.fixture
def sample_size() -> int:
    """Total byte size of the visible files in sample_tree."""
    return 17 + 14 + 10 + 5 + 4 + 0 + 3


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the user data directory into a temporary home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home / "AppData"))
    return home


@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary for testing."""
    return {
        "root_paths": [str(tmp_path)],
        "hidden_marker": ".",
        "target_file": "app.js",
        "target_dir": "",
        "output_format": "text",
        "log_level": "WARNING",
        "save_error_log": False,
    }
