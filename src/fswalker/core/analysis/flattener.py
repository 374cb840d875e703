from __future__ import annotations

"""
Structure Flattener.

Turns an in-memory nested mapping into the list of file paths it
describes. No filesystem access is involved.
"""

import os
from collections.abc import Mapping
from typing import List

from fswalker.domain.constants import FILE_SENTINEL
from fswalker.domain.tree_models import FileLeaf, Structure


def flatten_structure_to_paths(structure: Structure, prefix: str = "") -> List[str]:
    """
    Collect the path of every file described by a nested mapping.

    Mapping values are directories and are recursed into; the empty-string
    sentinel or a FileLeaf marks a file. Any other value is ignored.
    Empty directories contribute nothing.

    Example:
        {"dir": {"dir2": {}, "file1": "", "file2": ""}} -> ["dir/file1", "dir/file2"]

    Args:
        structure: Nested mapping of names to directories or file markers.
        prefix: Path prepended to every emitted entry.

    Returns:
        List[str]: File paths in mapping order.

    Raises:
        TypeError: If structure is not a mapping.
    """
    if not isinstance(structure, Mapping):
        raise TypeError(f"structure must be a mapping, received {type(structure).__name__}.")

    paths: List[str] = []
    for key, value in structure.items():
        current = os.path.join(prefix, key) if prefix else key

        if isinstance(value, Mapping):
            paths.extend(flatten_structure_to_paths(value, current))
        elif isinstance(value, FileLeaf) or (isinstance(value, str) and value == FILE_SENTINEL):
            paths.append(current)

    return paths
