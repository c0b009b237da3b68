# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Unit tests for CaseExecutor timeout racing."""

import asyncio
import time
from typing import Any

from suitecase.core.models import CaseType, SuiteConfig, TestCase, TestStatus
from suitecase.engine.executor import CaseExecutor
from suitecase.engine.suite import Suite
from tests.conftest import RecordingRenderer


async def slow(ctx: dict[str, Any]) -> None:
    await asyncio.sleep(0.2)


def blocking(ctx: dict[str, Any]) -> None:
    time.sleep(0.2)


class TestTimeouts:
    """Tests for the per-case timeout race."""

    def test_timeout_fails_case_with_message_and_no_stack(
        self, renderer: RecordingRenderer
    ) -> None:
        executor = CaseExecutor("s", SuiteConfig(), renderer)
        case = TestCase("slow", slow, timeout_ms=10)

        result = asyncio.run(executor.execute(case, 0, True, True))

        assert result.errors == 1
        detail = result.details[0]
        assert detail.status == TestStatus.FAILED
        assert detail.error == "Timed out! (10 ms)"
        assert detail.stack is None
        assert executor.timed_out == {0}
        assert result.termination is None

    def test_late_settlement_is_not_rendered(self, renderer: RecordingRenderer) -> None:
        executor = CaseExecutor("s", SuiteConfig(), renderer)
        case = TestCase("slow", slow, timeout_ms=10)

        async def scenario() -> None:
            await executor.execute(case, 0, True, True)
            # let the abandoned body settle
            await asyncio.sleep(0.3)

        asyncio.run(scenario())

        results = renderer.results_for("slow")
        assert len(results) == 1
        assert results[0]["type"] == CaseType.TEST
        assert results[0]["error"] == "Timed out! (10 ms)"

    def test_case_timeout_overrides_suite_default(
        self, renderer: RecordingRenderer
    ) -> None:
        executor = CaseExecutor("s", SuiteConfig(timeout_ms=10), renderer)
        case = TestCase("slow", slow, timeout_ms=1000)

        result = asyncio.run(executor.execute(case, 0, True, True))

        assert result.ok == 1

    def test_suite_default_timeout_applies(self, renderer: RecordingRenderer) -> None:
        executor = CaseExecutor("s", SuiteConfig(timeout_ms=10), renderer)
        case = TestCase("slow", slow)

        result = asyncio.run(executor.execute(case, 0, True, True))

        assert result.details[0].error == "Timed out! (10 ms)"

    def test_sync_body_times_out(self, renderer: RecordingRenderer) -> None:
        executor = CaseExecutor("s", SuiteConfig(), renderer)
        case = TestCase("blocking", blocking, timeout_ms=10)

        result = asyncio.run(executor.execute(case, 0, True, True))

        assert result.errors == 1
        assert result.details[0].error == "Timed out! (10 ms)"

    def test_timeout_includes_hooks(self, renderer: RecordingRenderer) -> None:
        async def before_each(meta: Any) -> None:
            await asyncio.sleep(0.2)

        executor = CaseExecutor("s", SuiteConfig(before_each=before_each), renderer)
        case = TestCase("fast body", lambda ctx: None, timeout_ms=10)

        result = asyncio.run(executor.execute(case, 0, True, True))

        assert result.errors == 1

    def test_suite_keeps_running_after_timeout(
        self, renderer: RecordingRenderer
    ) -> None:
        suite = Suite("s", renderer=renderer)
        suite.test("slow", slow, timeout_ms=10)
        suite.test("next", lambda ctx: None)

        result = asyncio.run(suite.run())

        assert (result.ok, result.errors) == (1, 1)
        assert renderer.names()[-1] == "stats"


class TestExitOnTimeout:
    """Tests for the exit_on_timeout termination signal."""

    def test_requests_exit_code_zero(self, renderer: RecordingRenderer) -> None:
        executor = CaseExecutor("s", SuiteConfig(), renderer, exit_on_timeout=True)
        case = TestCase("slow", slow, timeout_ms=10)

        result = asyncio.run(executor.execute(case, 0, True, True))

        assert result.termination is not None
        assert result.termination.code == 0
        assert renderer.of("log") == [
            {"kind": "warn", "message": "Timed out! (10 ms) (see exit_on_timeout option)"}
        ]
        assert renderer.of("result") == []

    def test_requests_exit_code_one_with_error_exit(
        self, renderer: RecordingRenderer
    ) -> None:
        executor = CaseExecutor(
            "s",
            SuiteConfig(),
            renderer,
            error_exit_on_first_fail=True,
            exit_on_timeout=True,
        )
        case = TestCase("slow", slow, timeout_ms=10)

        result = asyncio.run(executor.execute(case, 0, True, True))

        assert result.termination is not None
        assert result.termination.code == 1

    def test_suite_stops_on_timeout(self, renderer: RecordingRenderer) -> None:
        suite = Suite("s", SuiteConfig(exit_on_timeout=True), renderer=renderer)
        suite.test("slow", slow, timeout_ms=10)
        suite.test("never", lambda ctx: None)

        result = asyncio.run(suite.run())

        assert result.exit_code == 0
        assert result.termination is not None
        assert renderer.results_for("never") == []
        assert "stats" not in renderer.names()
