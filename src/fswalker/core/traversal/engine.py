from __future__ import annotations

"""
Recursive Traversal Engine.

Walks a directory hierarchy depth-first and hands every visible entry to a
caller-supplied visitor. Each directory's own visit happens before any of
its children, and all of its descendants are exhausted before its next
sibling is considered.

Failures below the root never abort the walk: they are turned into
TraversalFailure records and delivered to the injected error channel.
"""

import inspect
import logging
import os
from typing import Iterator, List, Optional, Tuple

from fswalker.core.traversal.reporters import log_failure
from fswalker.domain.constants import HIDDEN_MARKER
from fswalker.domain.traversal_models import (
    Entry,
    ErrorReporter,
    FailureKind,
    TraversalFailure,
    Visitor,
    wants_skip,
)
from fswalker.infra.fs import list_directory, resolve_absolute, stat_entry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def traverse(
        path: str,
        visitor: Visitor,
        *,
        on_error: Optional[ErrorReporter] = None,
        hidden_marker: str = HIDDEN_MARKER,
) -> None:
    """
    Walk every visible entry below a directory and invoke the visitor.

    For each child, in the order reported by the directory listing:
    1. Its type is read with a dedicated metadata lookup. A failed lookup
       is reported and the entry is skipped entirely.
    2. visitor(full_path, name, is_directory) is called. Exceptions raised
       by the visitor are reported and treated as "no signal".
    3. Directories are descended into unless the visitor returned
       VisitAction.SKIP_SUBTREE (or False). The signal is ignored for files.

    If the starting path cannot be listed the failure is reported once and
    the function returns without any visitor call.

    Args:
        path: Directory to walk. Resolved to an absolute path first.
        visitor: Synchronous callable receiving (full_path, name, is_directory).
        on_error: Error channel receiving TraversalFailure records.
                  Defaults to the logging sink.
        hidden_marker: Entries whose name starts with this prefix are
                       excluded before any visitor sees them.

    Raises:
        TypeError: If the visitor is a coroutine function, or a callable whose
                   call returns an awaitable (checked at the first visit).
    """
    if inspect.iscoroutinefunction(visitor):
        raise TypeError("visitor must be a synchronous callable, got a coroutine function.")

    report = on_error if on_error is not None else log_failure
    root = resolve_absolute(path)

    try:
        names = list_directory(root)
    except OSError as e:
        report(TraversalFailure(FailureKind.ROOT_INACCESSIBLE, root, str(e)))
        return

    logger.debug(f"Traversing: {root}")

    # One frame per open directory; depth of the stack equals directory depth
    stack: List[Tuple[str, Iterator[str]]] = [(root, _visible(names, hidden_marker))]

    while stack:
        parent, children = stack[-1]
        name = next(children, None)
        if name is None:
            stack.pop()
            continue

        entry = _inspect_entry(parent, name, report)
        if entry is None:
            continue

        descend = _visit_entry(entry, visitor, report)
        if not (entry.is_directory and descend):
            continue

        try:
            sub_names = list_directory(entry.full_path)
        except OSError as e:
            report(TraversalFailure(FailureKind.SUBTREE_LISTING, entry.full_path, str(e)))
            continue

        stack.append((entry.full_path, _visible(sub_names, hidden_marker)))


def is_hidden(name: str, hidden_marker: str = HIDDEN_MARKER) -> bool:
    """Check whether an entry name carries the hidden marker."""
    return bool(hidden_marker) and name.startswith(hidden_marker)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _visible(names: List[str], hidden_marker: str) -> Iterator[str]:
    return iter([n for n in names if not is_hidden(n, hidden_marker)])


def _inspect_entry(parent: str, name: str, report: ErrorReporter) -> Optional[Entry]:
    """Resolve the entry type through the metadata adapter."""
    full_path = os.path.join(parent, name)
    try:
        meta = stat_entry(full_path)
    except OSError as e:
        report(TraversalFailure(FailureKind.ENTRY_METADATA, full_path, str(e)))
        return None
    return Entry(name=name, full_path=full_path, is_directory=meta.is_directory)


def _visit_entry(entry: Entry, visitor: Visitor, report: ErrorReporter) -> bool:
    """
    Invoke the visitor with fault isolation.

    Returns:
        bool: False only when the visitor explicitly asked to skip.

    Raises:
        TypeError: If the visitor returned an awaitable.
    """
    try:
        signal = visitor(entry.full_path, entry.name, entry.is_directory)
    except Exception as e:
        report(TraversalFailure(FailureKind.VISITOR_FAULT, entry.full_path, str(e)))
        return True

    if inspect.isawaitable(signal):
        if inspect.iscoroutine(signal):
            signal.close()
        raise TypeError("visitor must be synchronous, its call returned an awaitable.")
    return not wants_skip(signal)
