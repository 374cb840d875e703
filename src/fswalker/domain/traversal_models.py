from __future__ import annotations

"""
Traversal Domain Data Models.

Defines the records exchanged between the traversal engine, its visitors
and the error-reporting channel.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

# -----------------------------------------------------------------------------
# VISITOR CONTRACT
# -----------------------------------------------------------------------------

class VisitAction(Enum):
    """
    Control signal returned by a visitor.

    SKIP_SUBTREE is only meaningful for directory entries; for files every
    signal behaves like CONTINUE.
    """
    CONTINUE = "continue"
    SKIP_SUBTREE = "skip_subtree"


# A visitor may also return None (no signal) or the literal False,
# which is treated as SKIP_SUBTREE.
VisitSignal = Optional[Union[VisitAction, bool]]
Visitor = Callable[[str, str, bool], VisitSignal]
MatchHandler = Callable[[str, str, bool], object]


def wants_skip(signal: VisitSignal) -> bool:
    """Return True when the visitor asked to prune the current subtree."""
    return signal is VisitAction.SKIP_SUBTREE or signal is False

# -----------------------------------------------------------------------------
# FILESYSTEM RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Entry:
    """
    One filesystem object reported by a single directory listing.

    Attributes:
        name: Base name, without separators.
        full_path: Resolved parent path joined with the name.
        is_directory: Result of the metadata lookup for this entry.
    """
    name: str
    full_path: str
    is_directory: bool


@dataclass(frozen=True)
class EntryStat:
    """Metadata returned by the filesystem adapter."""
    is_directory: bool
    size: int

# -----------------------------------------------------------------------------
# FAILURE REPORTING
# -----------------------------------------------------------------------------

class FailureKind(Enum):
    """Classification of the recoverable and terminal traversal failures."""
    ROOT_INACCESSIBLE = "root_inaccessible"
    ENTRY_METADATA = "entry_metadata"
    SUBTREE_LISTING = "subtree_listing"
    VISITOR_FAULT = "visitor_fault"
    MATCH_HANDLER_FAULT = "match_handler_fault"


_MESSAGE_TEMPLATES = {
    FailureKind.ROOT_INACCESSIBLE: "Error accessing path {path}: {error}",
    FailureKind.SUBTREE_LISTING: "Error accessing path {path}: {error}",
    FailureKind.ENTRY_METADATA: "Error accessing entry {path}: {error}",
    FailureKind.VISITOR_FAULT: "Error in user callback for path {path}: {error}",
    FailureKind.MATCH_HANDLER_FAULT: (
        "Error in user callback within traverse_fs for path {path}: {error}"
    ),
}


@dataclass(frozen=True)
class TraversalFailure:
    """
    Structured failure record delivered to the error channel.

    Attributes:
        kind: Failure classification.
        path: Absolute path of the root, directory or entry involved.
        error: Description of the underlying exception.
    """
    kind: FailureKind
    path: str
    error: str

    @property
    def message(self) -> str:
        return _MESSAGE_TEMPLATES[self.kind].format(path=self.path, error=self.error)

    @property
    def is_terminal(self) -> bool:
        return self.kind is FailureKind.ROOT_INACCESSIBLE

    def __str__(self) -> str:
        return self.message


ErrorReporter = Callable[[TraversalFailure], None]
