# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Structured event rendering for suite and run-all execution.

The engine never prints. It emits structured events to a `Renderer`:

    suite_name -> result (one per case) -> stats           (per suite)
    run_all_title -> [run_all_suite_error]* -> run_all_stats
        -> [run_all_errors_summary]                         (per run-all)

`log` is a sideband for warnings outside the event stream.
"""

from datetime import datetime
from typing import Protocol

import typer

from suitecase.core.error_classification import sanitize_error, sanitize_stack
from suitecase.core.models import CaseType, ErrorDetail, InvalidSuite
from suitecase.core.types import AggregateStats, RunResult
from suitecase.utils.terminal import TerminalColors


class Renderer(Protocol):
    """Consumer of the engine's structured events."""

    verbose: bool

    def suite_name(self, suite_name: str) -> None: ...

    def result(
        self,
        type: CaseType,
        label: str,
        error: str | None = None,
        stack: str | None = None,
        duration_ms: int | None = None,
    ) -> None: ...

    def stats(self, result: RunResult) -> None: ...

    def run_all_title(self, whitelist: list[str]) -> None: ...

    def run_all_suite_error(self, error: str, name: str) -> None: ...

    def run_all_stats(
        self, stats: AggregateStats, invalid: list[InvalidSuite]
    ) -> None: ...

    def run_all_errors_summary(
        self,
        error_details: dict[str, list[ErrorDetail]],
        invalid: list[InvalidSuite],
    ) -> None: ...

    def log(self, kind: str, message: str) -> None: ...


# "kind" to color
_COLORS = {
    "error": TerminalColors.error,
    "warn": TerminalColors.warning,
    CaseType.TEST: TerminalColors.success,
    CaseType.SKIP: TerminalColors.warning,
    CaseType.TODO: TerminalColors.highlight,
}

_INDENT = "    "
_STACK_INDENT = "        "


class TerminalRenderer:
    """Renders events as colored terminal text.

    Verbose mode prints one line per case plus headers and summaries;
    non-verbose mode prints one colored dot per case.
    """

    def __init__(self, verbose: bool = True, clear: bool = False) -> None:
        self.verbose = verbose
        if clear:
            typer.clear()

    @staticmethod
    def write(text: str = "", nl_count: int = 1) -> None:
        typer.echo(text + "\n" * nl_count, nl=False)

    def _dot(self, color_kind: str | CaseType) -> None:
        self.write(_COLORS[color_kind]("•") + " ", 0)

    def suite_name(self, suite_name: str) -> None:
        if self.verbose:
            self.write(TerminalColors.bold(f"\n--> {suite_name} "), 2)

    def result(
        self,
        type: CaseType,
        label: str,
        error: str | None = None,
        stack: str | None = None,
        duration_ms: int | None = None,
    ) -> None:
        # a failed test is colored as an error, skip/todo keep their own color
        color_kind: str | CaseType = "error" if error and type is CaseType.TEST else type

        if not self.verbose:
            self._dot(color_kind)
            return

        checkbox = "[x]" if color_kind is CaseType.TEST else "[ ]"
        prefix = "" if type is CaseType.TEST else f"({type.value}) "
        suffix = ""
        if error:
            message = sanitize_error(error)
            styled = TerminalColors.muted(message) if type is not CaseType.TEST else message
            suffix = TerminalColors.muted(" - ") + styled

        color = _COLORS[color_kind]
        self.write(color(f"{_INDENT}{checkbox} {prefix}{label}") + suffix)

        if stack:
            trimmed = sanitize_stack(stack).replace("\n", f"\n{_STACK_INDENT}")
            if trimmed:
                self.write(_STACK_INDENT + TerminalColors.muted(trimmed))

    def stats(self, result: RunResult) -> None:
        if self.verbose:
            self.write(f"\n{_INDENT}{TerminalColors.format_test_summary(result)}\n")

    def run_all_title(self, whitelist: list[str]) -> None:
        which = "..."
        if whitelist:
            joined = TerminalColors.muted(", ").join(whitelist)
            which = " for " + TerminalColors.muted("[ ") + TerminalColors.bold(joined) + TerminalColors.muted(" ]")

        if self.verbose:
            self.write(TerminalColors.muted(f"\n{_INDENT}Running tests") + which)
        else:
            self.write(
                f"\n--> Running tests{which}"
                + TerminalColors.muted(" (use -v param for details)")
            )
            self.write(f"\n{_INDENT}", 0)

    def run_all_suite_error(self, error: str, name: str) -> None:
        if self.verbose:
            self.write(
                f"\n--> {TerminalColors.error(name)} "
                + TerminalColors.muted(f"--> {sanitize_error(error)}")
                + "\n"
            )
        else:
            self._dot(CaseType.SKIP)

    def run_all_stats(
        self, stats: AggregateStats, invalid: list[InvalidSuite]
    ) -> None:
        title = datetime.now().strftime("[%H:%M:%S] Summary: ")
        warn = (
            TerminalColors.warning(f" (invalid test files: {len(invalid)})")
            if invalid
            else ""
        )
        if not self.verbose:
            self.write()
        summary = TerminalColors.format_test_summary(stats, prefix=title)
        self.write(f"\n--> {summary}{warn}\n")

    def run_all_errors_summary(
        self,
        error_details: dict[str, list[ErrorDetail]],
        invalid: list[InvalidSuite],
    ) -> None:
        if error_details:
            self.write(TerminalColors.error(f"\n{_INDENT}Errors summary"))
            for suite_label, details in error_details.items():
                self.write(TerminalColors.muted("\n--> ") + suite_label)
                for detail in details:
                    self.write(
                        TerminalColors.error(f"{_INDENT}{detail.label}")
                        + TerminalColors.muted(f" - {sanitize_error(detail.error)}")
                    )
            self.write()

        if invalid:
            self.write(TerminalColors.warning(f"\n{_INDENT}Invalid files summary"), 2)
            for entry in invalid:
                self.write(
                    TerminalColors.muted("--> ")
                    + TerminalColors.warning(entry.label)
                    + TerminalColors.muted(f" --> {sanitize_error(entry.error)}"),
                    2,
                )
            self.write()

    def log(self, kind: str, message: str) -> None:
        color = _COLORS.get(kind, TerminalColors.muted)
        self.write(color(f"[LOG]: {message}"))
