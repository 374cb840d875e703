from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin adapter over the 'os' module used by the traversal engine. Provides
path resolution, directory listing and entry metadata lookup, plus the
user data directory and output persistence helpers used by the CLI.

Every operation that touches the disk raises OSError subclasses
(FileNotFoundError, NotADirectoryError, PermissionError) on failure.
"""

import os
import stat
from typing import List, Optional, Tuple

from fswalker.domain.traversal_models import EntryStat

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "fswalker"
UNIX_APP_DIR_NAME = ".fswalker"

# -----------------------------------------------------------------------------
# TRAVERSAL ADAPTER API
# -----------------------------------------------------------------------------

def resolve_absolute(path: str) -> str:
    """
    Resolve a path string into its absolute, normalized form.

    Symlinks are not resolved; only the lexical form is normalized.

    Args:
        path: Relative or absolute path.

    Returns:
        str: Absolute path.
    """
    return os.path.abspath(os.fspath(path))


def list_directory(path: str) -> List[str]:
    """
    List the names of the direct children of a directory.

    The order reported by the operating system is returned unchanged.

    Args:
        path: Directory to list.

    Returns:
        List[str]: Child base names.

    Raises:
        OSError: If the path is missing, not a directory or not readable.
    """
    return os.listdir(path)


def stat_entry(path: str) -> EntryStat:
    """
    Look up the type and size of a filesystem entry.

    Follows symlinks, so a dangling link fails instead of being reported
    as a file.

    Args:
        path: Entry to inspect.

    Returns:
        EntryStat: Directory flag and size in bytes.

    Raises:
        OSError: If the metadata cannot be read.
    """
    st = os.stat(path)
    return EntryStat(is_directory=stat.S_ISDIR(st.st_mode), size=st.st_size)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/fswalker
    - Linux/Mac: ~/.fswalker

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    # Idempotent directory creation
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_input_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a user-supplied path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))

# -----------------------------------------------------------------------------
# OUTPUT PERSISTENCE API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def write_lines(save_path: str, lines: List[str]) -> Tuple[bool, Optional[str]]:
    """
    Persist text lines to disk, creating the parent directory if needed.

    Args:
        save_path: Destination file.
        lines: Lines to write, joined with newlines.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    ok, err = safe_mkdir(os.path.dirname(os.path.abspath(save_path)))
    if not ok:
        return False, err
    try:
        with open(save_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        return True, None
    except OSError as e:
        return False, str(e)
