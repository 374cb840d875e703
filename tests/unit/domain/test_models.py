from __future__ import annotations

"""
Unit tests for the domain data models.

Verifies immutability, failure message wording, search criteria matching
and result serialization.
"""

import dataclasses

import pytest

from fswalker.domain.search_models import SearchConfig, SearchResult
from fswalker.domain.traversal_models import (
    Entry,
    FailureKind,
    TraversalFailure,
    VisitAction,
    wants_skip,
)
from fswalker.domain.tree_models import TreeNode


def test_entry_is_immutable():
    entry = Entry("a.txt", "/r/a.txt", False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.name = "b.txt"  # type: ignore[misc]


def test_tree_node_is_immutable():
    node = TreeNode("d", "/r/d", True, ())
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.children = None  # type: ignore[misc]


@pytest.mark.parametrize("signal, expected", [
    (VisitAction.SKIP_SUBTREE, True),
    (False, True),
    (VisitAction.CONTINUE, False),
    (None, False),
    (True, False),
    (0, False),
])
def test_wants_skip(signal, expected):
    assert wants_skip(signal) is expected


@pytest.mark.parametrize("kind, prefix", [
    (FailureKind.ROOT_INACCESSIBLE, "Error accessing path /x"),
    (FailureKind.SUBTREE_LISTING, "Error accessing path /x"),
    (FailureKind.ENTRY_METADATA, "Error accessing entry /x"),
    (FailureKind.VISITOR_FAULT, "Error in user callback for path /x"),
    (FailureKind.MATCH_HANDLER_FAULT, "Error in user callback within traverse_fs for path /x"),
])
def test_failure_messages(kind, prefix):
    failure = TraversalFailure(kind, "/x", "boom")
    assert failure.message == f"{prefix}: boom"
    assert str(failure) == failure.message


def test_only_root_failures_are_terminal():
    terminal = [k for k in FailureKind if TraversalFailure(k, "/", "e").is_terminal]
    assert terminal == [FailureKind.ROOT_INACCESSIBLE]


def test_search_config_from_mapping_blank_values():
    cfg = SearchConfig.from_mapping({"target_file": "", "targetDir": None})
    assert cfg.is_empty


def test_search_config_matches_by_kind():
    cfg = SearchConfig(target_file="x", target_dir="y")
    assert cfg.matches("x", False)
    assert not cfg.matches("x", True)
    assert cfg.matches("y", True)
    assert not cfg.matches("y", False)


def test_search_result_record_merge_and_serialize():
    a = SearchResult()
    a.record("/r/b.txt", False)
    a.record("/r/a.txt", False)
    a.record("/r/a.txt", False)

    b = SearchResult()
    b.record("/r/dir", True)
    b.record("/r/a.txt", False)

    a.merge(b)

    assert a.total == 3
    assert a.to_dict() == {
        "filesFound": ["/r/a.txt", "/r/b.txt"],
        "dirsFound": ["/r/dir"],
    }
