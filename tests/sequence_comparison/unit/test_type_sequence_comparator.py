"""Type sequence comparator tests."""

from __future__ import annotations

from action_sequence_checker.sequence_comparison import (
    LengthMismatchKind,
    compare_contains_types,
    compare_exact_types,
    project_types,
)


def test_project_types_reads_discriminant_field() -> None:
    actions = [{"type": "A"}, {"kind": "B"}, {"type": "C", "kind": "D"}]

    assert project_types(actions) == ("A", None, "C")
    assert project_types(actions, "kind") == (None, "B", "D")


def test_exact_types_succeed_when_equal() -> None:
    assert compare_exact_types(["A", "B"], ["A", "B"]).verdict is True


def test_exact_types_report_truncated_sequences() -> None:
    result = compare_exact_types(["A", "C", "D"], ["A", "B"])

    assert result.matched is False
    assert result.expected == ["A", "C"]
    assert result.actual == ["A", "B"]
    assert result.diffable is True
    assert result.length_mismatch is not None
    assert result.length_mismatch.kind == LengthMismatchKind.SURPLUS_EXPECTED


def test_exact_types_fail_for_subsequence() -> None:
    result = compare_exact_types(["A", "C"], ["A", "B", "C"])

    assert result.verdict is False
    assert result.matched is False


def test_exact_types_fail_with_surplus_actual() -> None:
    result = compare_exact_types(["A", "B"], ["A", "B", "C"])

    assert result.matched is True
    assert result.verdict is False
    assert result.length_mismatch is not None
    assert result.length_mismatch.kind == LengthMismatchKind.SURPLUS_ACTUAL
    assert result.length_mismatch.actual == ["C"]
    assert result.length_mismatch.message == "more types were dispatched than expected"


def test_contains_types_succeed_for_subsequence() -> None:
    assert compare_contains_types(["A", "C"], ["A", "B", "C"]).verdict is True
    assert compare_contains_types(["B"], ["A", "B"]).verdict is True
    assert compare_contains_types([], ["A"]).verdict is True


def test_contains_types_failure_reports_missing_type() -> None:
    result = compare_contains_types(["A", "B", "Z"], ["A", "B"])

    assert result.verdict is False
    assert result.message == "unable to find expected type at position 2"
    assert result.expected == "Z"
    assert result.actual == []
    assert result.diffable is True


def test_contains_types_use_value_equality() -> None:
    assert compare_contains_types([1, 2], [1, 3, 2]).verdict is True
    assert compare_contains_types(["1"], [1]).verdict is False
