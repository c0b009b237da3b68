# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Global pytest fixtures shared across all test modules.

This module provides:
- RecordingRenderer: a Renderer capturing every engine event in order
- Path to the bundled example suites
"""

from pathlib import Path
from typing import Any

import pytest

from suitecase.core.models import CaseType, ErrorDetail, InvalidSuite
from suitecase.core.types import AggregateStats, RunResult

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


class RecordingRenderer:
    """Renderer capturing events as (name, payload) tuples."""

    def __init__(self, verbose: bool = True) -> None:
        self.verbose = verbose
        self.events: list[tuple[str, dict[str, Any]]] = []

    def _record(self, name: str, /, **payload: Any) -> None:
        self.events.append((name, payload))

    def suite_name(self, suite_name: str) -> None:
        self._record("suite_name", suite_name=suite_name)

    def result(
        self,
        type: CaseType,
        label: str,
        error: str | None = None,
        stack: str | None = None,
        duration_ms: int | None = None,
    ) -> None:
        self._record(
            "result",
            type=type,
            label=label,
            error=error,
            stack=stack,
            duration_ms=duration_ms,
        )

    def stats(self, result: RunResult) -> None:
        self._record("stats", result=result)

    def run_all_title(self, whitelist: list[str]) -> None:
        self._record("run_all_title", whitelist=whitelist)

    def run_all_suite_error(self, error: str, name: str) -> None:
        self._record("run_all_suite_error", error=error, name=name)

    def run_all_stats(
        self, stats: AggregateStats, invalid: list[InvalidSuite]
    ) -> None:
        self._record("run_all_stats", stats=stats, invalid=invalid)

    def run_all_errors_summary(
        self,
        error_details: dict[str, list[ErrorDetail]],
        invalid: list[InvalidSuite],
    ) -> None:
        self._record(
            "run_all_errors_summary", error_details=error_details, invalid=invalid
        )

    def log(self, kind: str, message: str) -> None:
        self._record("log", kind=kind, message=message)

    # helpers

    def names(self) -> list[str]:
        """Event names in emission order."""
        return [name for name, _ in self.events]

    def of(self, name: str) -> list[dict[str, Any]]:
        """Payloads of all events with the given name."""
        return [payload for event, payload in self.events if event == name]

    def results_for(self, label: str) -> list[dict[str, Any]]:
        """Result payloads emitted for a case label."""
        return [payload for payload in self.of("result") if payload["label"] == label]


@pytest.fixture()
def renderer() -> RecordingRenderer:
    """Provide a fresh recording renderer."""
    return RecordingRenderer()


@pytest.fixture()
def examples_dir() -> Path:
    """Directory holding the bundled example suite files."""
    return EXAMPLES_DIR
