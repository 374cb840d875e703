from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess: argument parsing, exit codes, stdout/stderr and
output files. HOME is redirected so no real user configuration is read.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "fswalker" / "main.py"


def run_cli(args: List[str], home: Path, cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
    """
    Execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH so the package resolves
    without being installed.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)
    env["LOCALAPPDATA"] = str(home / "AppData")

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def home(tmp_path: Path) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    return h

# -----------------------------------------------------------------------------
# dir
# -----------------------------------------------------------------------------

def test_dir_lists_visible_entries(sample_tree: Path, home: Path) -> None:
    result = run_cli(["dir", str(sample_tree)], home)

    assert result.returncode == 0, result.stderr
    lines = result.stdout.splitlines()
    assert str(sample_tree / "src" / "components" / "button.jsx") in lines
    assert str(sample_tree / "empty_dir") in lines
    assert not any(".git" in line for line in lines)


def test_dir_files_only_json(sample_tree: Path, home: Path) -> None:
    result = run_cli(["dir", str(sample_tree), "--files-only", "--json"], home)

    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    entry = data["results"][0]
    assert entry["root"] == str(sample_tree)
    assert len(entry["paths"]) == 7
    assert entry["errors"] == []


def test_dir_size(sample_tree: Path, sample_size: int, home: Path) -> None:
    result = run_cli(["--json", "dir", str(sample_tree), "--size"], home)

    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout)["results"][0]["size"] == sample_size


def test_dir_tree_text(sample_tree: Path, home: Path) -> None:
    result = run_cli(["dir", str(sample_tree / "src"), "--tree"], home)

    assert result.returncode == 0, result.stderr
    lines = result.stdout.splitlines()
    assert lines[0] == str(sample_tree / "src")
    assert any(line.endswith("components/") for line in lines)
    assert any(line.endswith("└── button.jsx") or line.endswith("└── readme.md") for line in lines)


def test_dir_missing_root_exit_code(tmp_path: Path, home: Path) -> None:
    result = run_cli(["dir", str(tmp_path / "missing")], home)

    assert result.returncode == 2
    assert "Error accessing path" in result.stderr


def test_dir_output_file(sample_tree: Path, home: Path, tmp_path: Path) -> None:
    out = tmp_path / "out" / "listing.txt"
    result = run_cli(["dir", str(sample_tree / "shallow"), "--output", str(out)], home)

    assert result.returncode == 0, result.stderr
    assert result.stdout == ""
    assert sorted(out.read_text(encoding="utf-8").splitlines()) == [
        str(sample_tree / "shallow" / "file1.txt"),
        str(sample_tree / "shallow" / "file2.txt"),
    ]

# -----------------------------------------------------------------------------
# search
# -----------------------------------------------------------------------------

def test_search_file_and_dir(sample_tree: Path, home: Path) -> None:
    result = run_cli(
        ["search", str(sample_tree), "--file", "readme.md", "--dir", "shallow", "--json"], home
    )

    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert data["filesFound"] == [str(sample_tree / "src" / "components" / "readme.md")]
    assert data["dirsFound"] == [str(sample_tree / "shallow")]


def test_search_multiple_roots_text(sample_tree: Path, home: Path) -> None:
    result = run_cli(
        ["search", str(sample_tree / "src"), str(sample_tree), "--file", "app.js"], home
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == [f"file\t{sample_tree / 'src' / 'app.js'}"]


def test_search_without_target_is_usage_error(sample_tree: Path, home: Path) -> None:
    result = run_cli(["search", str(sample_tree)], home)
    assert result.returncode == 2
    assert result.stdout == ""

# -----------------------------------------------------------------------------
# check / compare
# -----------------------------------------------------------------------------

def test_check_valid_paths(home: Path) -> None:
    result = run_cli(["check", "C:\\Users\\Doc.txt", "/usr/local", "\\\\Server\\Share\\Data"], home)

    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == [
        "windows_absolute\tC:\\Users\\Doc.txt",
        "posix_absolute\t/usr/local",
        "unc\t\\\\Server\\Share\\Data",
    ]


def test_check_invalid_path_json(home: Path) -> None:
    result = run_cli(["check", "/usr//local/file", "--json"], home)

    assert result.returncode == 1
    assert json.loads(result.stdout) == [
        {"path": "/usr//local/file", "valid": False, "kind": "invalid"}
    ]


def test_compare_equal_windows_paths(home: Path) -> None:
    result = run_cli(["compare", "C:\\File.TXT", "c:/file.txt"], home)
    assert result.returncode == 0
    assert result.stdout.strip() == "same"


def test_compare_case_sensitive_posix(home: Path) -> None:
    result = run_cli(["compare", "/usr/bin/File", "/usr/bin/file", "--json"], home)

    assert result.returncode == 1
    data = json.loads(result.stdout)
    assert data["equal"] is False
    assert data["normalizedA"] == "/usr/bin/File"

# -----------------------------------------------------------------------------
# configuration & diagnostics
# -----------------------------------------------------------------------------

def test_dump_config_uses_defaults(home: Path, tmp_path: Path) -> None:
    result = run_cli(["--dump-config", "--use-defaults"], home, cwd=tmp_path)

    assert result.returncode == 0, result.stderr
    conf = json.loads(result.stdout)
    assert [os.path.realpath(p) for p in conf["root_paths"]] == [os.path.realpath(tmp_path)]
    assert conf["output_format"] == "text"


def test_saved_config_is_reused(sample_tree: Path, home: Path) -> None:
    saved = run_cli(
        ["search", str(sample_tree), "--file", "TEST.txt", "--save-config", "--json"], home
    )
    assert saved.returncode == 0, saved.stderr

    # Roots, target and output format come from the persisted session
    reused = run_cli(["search"], home)
    assert reused.returncode == 0, reused.stderr
    assert json.loads(reused.stdout)["filesFound"] == [str(sample_tree / "CaseSensitive" / "TEST.txt")]


def test_log_file_receives_debug_records(sample_tree: Path, home: Path, tmp_path: Path) -> None:
    log_file = tmp_path / "diag" / "fswalker.log"
    result = run_cli(["--debug", "--log-file", str(log_file), "dir", str(sample_tree)], home)

    assert result.returncode == 0, result.stderr
    assert "Traversing" in log_file.read_text(encoding="utf-8")


def test_missing_command_is_usage_error(home: Path) -> None:
    result = run_cli([], home)
    assert result.returncode == 2
    assert "command is required" in result.stderr
