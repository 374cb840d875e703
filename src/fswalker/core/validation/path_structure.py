from __future__ import annotations

"""
Structural Path Validation and Comparison.

Pure string logic for classifying, normalizing and comparing paths across
Windows, UNC, POSIX and relative conventions. Nothing here touches the
filesystem.

Note: the validator rejects doubled separators while normalize_path
collapses them. Both behaviors are kept as-is; a normalized form is not
guaranteed to come from a structurally valid input.
"""

import enum
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Patterns
# -----------------------------------------------------------------------------
_ILLEGAL_CHARS = re.compile(r'[<>"|?*]')
_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")

_SEGMENT = r'[^\r\n<>:"|?*/\\]+'
_SEP = r"[/\\]"
_SEGMENTS = rf"{_SEGMENT}(?:{_SEP}{_SEGMENT})*"

_WINDOWS_ABSOLUTE = re.compile(rf"[A-Za-z]:{_SEP}(?:{_SEGMENTS})?")
_UNC = re.compile(rf"\\\\{_SEGMENT}\\{_SEGMENT}(?:{_SEP}{_SEGMENT})*")
_POSIX_ABSOLUTE = re.compile(rf"/(?:{_SEGMENTS})?")
_RELATIVE = re.compile(rf"(?:\.{{1,2}}{_SEP})?{_SEGMENTS}")

_NORMALIZED_DRIVE = re.compile(r"^[A-Za-z]:/")
_NORMALIZED_DRIVE_ROOT = re.compile(r"^[A-Za-z]:/$")
_REPEATED_SLASH = re.compile(r"/{2,}")
_UNC_PREFIX = "//"


class PathKind(enum.Enum):
    """Structural family a path string belongs to."""
    WINDOWS_ABSOLUTE = "windows_absolute"
    UNC = "unc"
    POSIX_ABSOLUTE = "posix_absolute"
    RELATIVE = "relative"
    INVALID = "invalid"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify_path(path: Any) -> PathKind:
    """
    Determine the structural kind of a path string.

    Shapes are tried in priority order: Windows absolute, UNC, POSIX
    absolute, then relative. Leading and trailing whitespace is ignored.

    Args:
        path: Candidate path. Non-string input is classified as INVALID.

    Returns:
        PathKind: The first shape the path matches, or INVALID.
    """
    if not isinstance(path, str):
        return PathKind.INVALID

    candidate = path.strip()
    if not candidate:
        return PathKind.INVALID

    if _ILLEGAL_CHARS.search(candidate):
        return PathKind.INVALID

    # ':' is only legal as a drive designator right after a single letter
    colon_at = candidate.find(":")
    if colon_at != -1:
        if colon_at != 1 or not _DRIVE_PREFIX.match(candidate):
            return PathKind.INVALID
        if ":" in candidate[2:]:
            return PathKind.INVALID

    if _WINDOWS_ABSOLUTE.fullmatch(candidate):
        return PathKind.WINDOWS_ABSOLUTE
    if _UNC.fullmatch(candidate):
        return PathKind.UNC
    if _POSIX_ABSOLUTE.fullmatch(candidate):
        return PathKind.POSIX_ABSOLUTE
    if _RELATIVE.fullmatch(candidate):
        return PathKind.RELATIVE

    return PathKind.INVALID


def is_valid_structure(path: Any) -> bool:
    """
    Check whether a string is a structurally well-formed path.

    Examples:
        'C:\\Users\\Doc.txt'   -> True
        'C:users\\doc.txt'     -> False (missing root separator)
        '/usr//local/file'     -> False (doubled separator)
        '\\\\Server\\Share\\Data' -> True
    """
    kind = classify_path(path)
    if kind is PathKind.INVALID:
        logger.debug(f"Rejected path structure: {path!r}")
        return False
    return True


def normalize_path(path: Any) -> str:
    """
    Canonicalize separators of a path string.

    Backslashes become forward slashes and runs of slashes collapse to one,
    including a run right after a drive colon ('C://x' -> 'C:/x'). A leading
    pair of slashes followed by a name is kept as the UNC prefix. A trailing
    slash is removed unless the path is '/' or a drive root such as 'C:/'.

    Args:
        path: Path string. Non-string input normalizes to ''.

    Returns:
        str: The normalized form.
    """
    if not isinstance(path, str):
        return ""

    converted = path.replace("\\", "/")
    prefix = ""
    if converted.startswith(_UNC_PREFIX) and converted[2:3] not in ("", "/"):
        prefix, converted = _UNC_PREFIX, converted[2:]

    normalized = prefix + _REPEATED_SLASH.sub("/", converted)

    if (
            len(normalized) > 1
            and normalized.endswith("/")
            and not _NORMALIZED_DRIVE_ROOT.match(normalized)
    ):
        normalized = normalized[:-1]

    return normalized


def paths_equal(path_a: Any, path_b: Any) -> bool:
    """
    Compare two path strings for equivalence.

    Identical strings are equal. Otherwise both sides are normalized; when
    both are Windows absolute ('X:/...') the comparison ignores case,
    otherwise it is case-sensitive.

    Args:
        path_a: First path.
        path_b: Second path.

    Returns:
        bool: True if the paths denote the same location.
    """
    if isinstance(path_a, str) and isinstance(path_b, str) and path_a == path_b:
        return True

    norm_a = normalize_path(path_a)
    norm_b = normalize_path(path_b)

    if _NORMALIZED_DRIVE.match(norm_a) and _NORMALIZED_DRIVE.match(norm_b):
        return norm_a.lower() == norm_b.lower()

    return norm_a == norm_b
