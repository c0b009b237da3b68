# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Unit tests for RunResult and AggregateStats."""

from suitecase.core.models import (
    ErrorDetail,
    InvalidSuite,
    TestDetail,
    TestStatus,
    Termination,
)
from suitecase.core.types import AggregateStats, RunResult


def detail(label: str, suite: str = "s", error: str | None = None) -> TestDetail:
    status = TestStatus.FAILED if error else TestStatus.PASSED
    return TestDetail(label=label, suite_label=suite, status=status, error=error)


class TestRunResult:
    """Tests for the per-suite result accumulator."""

    def test_merge_sums_counters_and_keeps_detail_order(self) -> None:
        result = RunResult()
        result.merge(RunResult(ok=1, details=[detail("a")]))
        result.merge(RunResult(errors=1, details=[detail("b", error="x")]))
        result.merge(RunResult(skip=1, details=[detail("c")]))

        assert (result.ok, result.errors, result.skip, result.todo) == (1, 1, 1, 0)
        assert [d.label for d in result.details] == ["a", "b", "c"]
        assert result.total == 3
        assert result.has_failures

    def test_exit_code_follows_termination(self) -> None:
        assert RunResult().exit_code == 0
        assert RunResult(termination=Termination(1, "failed")).exit_code == 1

    def test_str(self) -> None:
        assert str(RunResult(ok=3, errors=1, skip=2, todo=0)) == "3/1/2/0"


class TestAggregateStats:
    """Tests for run-all aggregation."""

    def test_add_sums_suites_and_collects_error_details(self) -> None:
        stats = AggregateStats()
        stats.add(
            RunResult(
                ok=1,
                errors=1,
                duration_ms=10,
                details=[detail("a", "one"), detail("b", "one", error="boom")],
            )
        )
        stats.add(
            RunResult(
                errors=1,
                todo=2,
                duration_ms=5,
                details=[detail("c", "two", error="bad")],
            )
        )

        assert (stats.ok, stats.errors, stats.skip, stats.todo) == (1, 2, 0, 2)
        assert stats.duration_ms == 15
        assert stats.suites == 2
        assert stats.total == 5
        assert stats.error_details == {
            "one": [ErrorDetail(label="b", error="boom")],
            "two": [ErrorDetail(label="c", error="bad")],
        }

    def test_runtime_skips_are_not_error_details(self) -> None:
        skipped = TestDetail(
            label="maybe",
            suite_label="s",
            status=TestStatus.SKIPPED,
            message="not today",
        )
        stats = AggregateStats()
        stats.add(RunResult(skip=1, details=[skipped]))

        assert stats.error_details == {}

    def test_str_mentions_invalid_files(self) -> None:
        stats = AggregateStats(ok=2)
        assert str(stats) == "2/0/0/0"

        stats.invalid.append(InvalidSuite(label="broken.test.py", error="boom"))
        assert str(stats) == "2/0/0/0 (invalid: 1)"
