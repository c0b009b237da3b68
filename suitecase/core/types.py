# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Result types for suite and run-all execution."""

from dataclasses import dataclass, field

from suitecase.core.models import ErrorDetail, InvalidSuite, TestDetail, Termination


@dataclass
class RunResult:
    """Results of a single suite invocation (or a partial one for one case).

    Attributes:
        ok: Number of passed cases
        errors: Number of failed cases (includes timeouts and hook failures)
        skip: Number of skipped cases (registered or runtime skips)
        todo: Number of todo cases
        duration_ms: Wall time of the whole suite run
        details: One TestDetail per executed case, in execution order
        error_exit_on_first_fail: Effective policy flag used for the run
        termination: Set when the run requested the process to stop

    Properties:
        total: ok + errors + skip + todo
    """

    ok: int = 0
    errors: int = 0
    skip: int = 0
    todo: int = 0
    duration_ms: int = 0
    details: list[TestDetail] = field(default_factory=list)
    error_exit_on_first_fail: bool = False
    termination: Termination | None = None

    @property
    def total(self) -> int:
        """Total number of accounted cases."""
        return self.ok + self.errors + self.skip + self.todo

    @property
    def has_failures(self) -> bool:
        """Check if any case failed."""
        return self.errors > 0

    @property
    def exit_code(self) -> int:
        """Exit code requested by a termination signal, 0 otherwise."""
        return self.termination.code if self.termination else 0

    def merge(self, partial: "RunResult") -> None:
        """Fold a partial (per-case) result into this accumulator."""
        self.ok += partial.ok
        self.errors += partial.errors
        self.skip += partial.skip
        self.todo += partial.todo
        self.details.extend(partial.details)

    def __str__(self) -> str:
        """Concise string representation: ok/errors/skip/todo."""
        return f"{self.ok}/{self.errors}/{self.skip}/{self.todo}"


@dataclass
class AggregateStats:
    """Results summed across every suite of a run-all invocation.

    Attributes:
        ok, errors, skip, todo, duration_ms: Sums of the per-suite values
        suites: Number of suites that ran to completion
        invalid: Files that failed to load or whose run raised
        error_details: Failing cases grouped by suite label
        termination: Set when a suite requested the process to stop
    """

    ok: int = 0
    errors: int = 0
    skip: int = 0
    todo: int = 0
    duration_ms: int = 0
    suites: int = 0
    invalid: list[InvalidSuite] = field(default_factory=list)
    error_details: dict[str, list[ErrorDetail]] = field(default_factory=dict)
    termination: Termination | None = None

    @property
    def total(self) -> int:
        """Total number of accounted cases across all suites."""
        return self.ok + self.errors + self.skip + self.todo

    @property
    def exit_code(self) -> int:
        """Exit code requested by a termination signal, 0 otherwise."""
        return self.termination.code if self.termination else 0

    def add(self, result: RunResult) -> None:
        """Add one suite's results to the totals.

        Every detail carrying an error is folded into `error_details` under
        its suite label.
        """
        self.ok += result.ok
        self.errors += result.errors
        self.skip += result.skip
        self.todo += result.todo
        self.duration_ms += result.duration_ms
        self.suites += 1

        for detail in result.details:
            if detail.error:
                self.error_details.setdefault(detail.suite_label, []).append(
                    ErrorDetail(label=detail.label, error=detail.error)
                )

    def __str__(self) -> str:
        """Concise string: ok/errors/skip/todo[ (invalid: n)]."""
        base = f"{self.ok}/{self.errors}/{self.skip}/{self.todo}"
        if self.invalid:
            return f"{base} (invalid: {len(self.invalid)})"
        return base
