from __future__ import annotations

"""
Multi-Root Targeted Search Service.

Runs one traversal pass per root, flags entries whose base name equals the
configured file or directory target, and merges every match into a single
deduplicated result. Matches never prune the walk.
"""

import logging
import os
from collections.abc import Sequence
from typing import Mapping, Optional, Union

from fswalker.core.traversal.engine import traverse
from fswalker.core.traversal.reporters import log_failure
from fswalker.domain.constants import HIDDEN_MARKER
from fswalker.domain.search_models import SearchConfig, SearchResult
from fswalker.domain.traversal_models import (
    ErrorReporter,
    FailureKind,
    MatchHandler,
    TraversalFailure,
    Visitor,
)

logger = logging.getLogger(__name__)

Roots = Union[str, os.PathLike, Sequence]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def traverse_fs(
        roots: Roots,
        search_config: Union[SearchConfig, Mapping[str, str]],
        on_match: Optional[MatchHandler] = None,
        *,
        on_error: Optional[ErrorReporter] = None,
        hidden_marker: str = HIDDEN_MARKER,
) -> SearchResult:
    """
    Search one or more roots for entries with an exact target name.

    Roots are processed one at a time, in the given order. Name comparison
    is exact and case-sensitive. When on_match raises, the fault is
    reported and the search continues.

    Args:
        roots: A single root path or an ordered sequence of root paths.
        search_config: Target names, as SearchConfig or a mapping with
                       'target_file'/'target_dir' (or camelCase) keys.
        on_match: Optional callable receiving (full_path, name, is_directory)
                  for every match.
        on_error: Error channel. Defaults to the logging sink.
        hidden_marker: Prefix of entries excluded from the walk.

    Returns:
        SearchResult: Deduplicated union of the matches of every root.

    Raises:
        TypeError: If roots is neither a path nor a sequence of paths.
    """
    root_list = _as_root_list(roots)
    config = (
        search_config if isinstance(search_config, SearchConfig)
        else SearchConfig.from_mapping(search_config)
    )
    report = on_error if on_error is not None else log_failure
    result = SearchResult()

    def _match_visitor(found: SearchResult) -> Visitor:
        def _visit(full_path: str, name: str, is_directory: bool) -> None:
            if not config.matches(name, is_directory):
                return
            found.record(full_path, is_directory)
            if on_match is None:
                return
            try:
                on_match(full_path, name, is_directory)
            except Exception as e:
                report(TraversalFailure(FailureKind.MATCH_HANDLER_FAULT, full_path, str(e)))
        return _visit

    for root in root_list:
        logger.debug(f"Searching {root} for file={config.target_file!r} dir={config.target_dir!r}")
        root_result = SearchResult()
        traverse(root, _match_visitor(root_result), on_error=report, hidden_marker=hidden_marker)
        logger.debug(f"{root}: {root_result.total} match(es)")
        result.merge(root_result)

    logger.info(
        f"Search finished: {len(result.files_found)} file(s), "
        f"{len(result.dirs_found)} dir(s) across {len(root_list)} root(s)"
    )
    return result

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _as_root_list(roots: Roots) -> list:
    if isinstance(roots, (str, os.PathLike)):
        return [roots]
    if isinstance(roots, Sequence) and not isinstance(roots, bytes):
        return list(roots)
    raise TypeError(
        f"roots must be a path or a sequence of paths, received {type(roots).__name__}."
    )
