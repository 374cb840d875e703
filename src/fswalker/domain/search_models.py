from __future__ import annotations

"""
Search Domain Data Models.

Defines the immutable search criteria and the accumulating result object
used by multi-root targeted search.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Set

# -----------------------------------------------------------------------------
# SEARCH CRITERIA
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SearchConfig:
    """
    Exact, case-sensitive names to look for during a search.

    Attributes:
        target_file: Base name matched against non-directory entries.
        target_dir: Base name matched against directory entries.
    """
    target_file: Optional[str] = None
    target_dir: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SearchConfig":
        """Build criteria from either snake_case or camelCase keys."""
        target_file = data.get("target_file", data.get("targetFile"))
        target_dir = data.get("target_dir", data.get("targetDir"))
        return cls(target_file=target_file or None, target_dir=target_dir or None)

    @property
    def is_empty(self) -> bool:
        return self.target_file is None and self.target_dir is None

    def matches(self, name: str, is_directory: bool) -> bool:
        if is_directory:
            return self.target_dir is not None and name == self.target_dir
        return self.target_file is not None and name == self.target_file

# -----------------------------------------------------------------------------
# SEARCH RESULTS
# -----------------------------------------------------------------------------

@dataclass
class SearchResult:
    """
    Deduplicated matches accumulated across one or more traversal passes.

    Attributes:
        files_found: Full paths of matching files.
        dirs_found: Full paths of matching directories.
    """
    files_found: Set[str] = field(default_factory=set)
    dirs_found: Set[str] = field(default_factory=set)

    def record(self, full_path: str, is_directory: bool) -> None:
        if is_directory:
            self.dirs_found.add(full_path)
        else:
            self.files_found.add(full_path)

    def merge(self, other: "SearchResult") -> None:
        self.files_found |= other.files_found
        self.dirs_found |= other.dirs_found

    @property
    def total(self) -> int:
        return len(self.files_found) + len(self.dirs_found)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "filesFound": sorted(self.files_found),
            "dirsFound": sorted(self.dirs_found),
        }
