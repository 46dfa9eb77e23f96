"""Tests for grouping search hits by file."""

from codebase_context.domain.entities import FileGroup
from codebase_context.services.file_grouper import group_results_by_file
from tests.fixtures.fake_backends import hit


def test_groups_follow_first_appearance_order():
    results = [
        hit("B", 0, 1, "b1"),
        hit("A", 0, 1, "a1"),
        hit("B", 5, 6, "b2"),
        hit("C", 0, 1, "c1"),
        hit("A", 1, 2, "a2"),
    ]
    groups = group_results_by_file(results)
    assert [g.file_name for g in groups] == ["B", "A", "C"]


def test_each_group_is_merged_independently():
    results = [
        hit("B", 5, 6, "b2"),
        hit("A", 0, 1, "a1"),
        hit("B", 0, 5, "b1"),
        hit("A", 1, 2, "a2"),
    ]
    assert group_results_by_file(results) == [
        FileGroup(file_name="B", results=["b1b2"]),
        FileGroup(file_name="A", results=["a1a2"]),
    ]


def test_line_ranges_do_not_leak_across_files():
    # A [0, 5) and B [5, 10) are adjacent by numbers only
    results = [hit("A", 0, 5, "a"), hit("B", 5, 10, "b")]
    assert group_results_by_file(results) == [
        FileGroup(file_name="A", results=["a"]),
        FileGroup(file_name="B", results=["b"]),
    ]


def test_no_hit_is_dropped():
    results = [hit("A", i * 10, i * 10 + 1, f"a{i}") for i in range(4)]
    (group,) = group_results_by_file(results)
    assert group.results == ["a0", "a1", "a2", "a3"]


def test_empty_input_yields_no_groups():
    assert group_results_by_file([]) == []
