# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Suite registration and run loop.

Basic usage:

    from suitecase import Suite

    suite = Suite("my suite")

    def truth(ctx):
        assert True

    suite.test("truth and nothing but the truth", truth)

    suite.run_sync()

Suite files discovered by `run_all` expose their suite as the module-level
`suite` attribute.
"""

import asyncio
import logging
import time
from collections.abc import Mapping
from typing import Any

from suitecase.core.constants import UNTITLED_LABEL
from suitecase.core.errors import MissingTestFunctionError
from suitecase.core.models import CaseType, SuiteConfig, TestCase, TestFunction, Termination
from suitecase.core.types import RunResult
from suitecase.engine.executor import CaseExecutor, elapsed_ms
from suitecase.rendering import Renderer, TerminalRenderer

logger = logging.getLogger(__name__)


def _missing_test_function(context: dict[str, Any]) -> None:
    raise MissingTestFunctionError("Missing test function")


class Suite:
    """A named, ordered collection of test cases plus hooks and run policy."""

    def __init__(
        self,
        label: str,
        config: SuiteConfig | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        """Initialize the suite.

        Args:
            label: Display name, not required to be unique
            config: Hooks, default timeout and policy flags
            renderer: Event consumer, defaults to a TerminalRenderer
        """
        self.label = label
        self.config = config or SuiteConfig()
        self.renderer: Renderer = renderer or TerminalRenderer()
        self.cases: list[TestCase] = []

    def _add(
        self,
        label: str | TestFunction | None,
        test_fn: TestFunction | None,
        timeout_ms: int | None,
        type: CaseType,
    ) -> "Suite":
        # support for the "no label" signature
        if callable(label) and not callable(test_fn):
            test_fn, label = label, UNTITLED_LABEL

        if not callable(test_fn):
            test_fn = _missing_test_function

        self.cases.append(
            TestCase(
                label=str(label or "") or UNTITLED_LABEL,
                test_fn=test_fn,
                timeout_ms=timeout_ms,
                type=type,
            )
        )
        return self

    def test(
        self,
        label: str | TestFunction | None = None,
        test_fn: TestFunction | None = None,
        timeout_ms: int | None = None,
    ) -> "Suite":
        """Register a regular test case."""
        return self._add(label, test_fn, timeout_ms, CaseType.TEST)

    def skip(
        self,
        label: str | TestFunction | None = None,
        test_fn: TestFunction | None = None,
        timeout_ms: int | None = None,
    ) -> "Suite":
        """Register a case that is reported as skipped without running."""
        return self._add(label, test_fn, timeout_ms, CaseType.SKIP)

    def only(
        self,
        label: str | TestFunction | None = None,
        test_fn: TestFunction | None = None,
        timeout_ms: int | None = None,
    ) -> "Suite":
        """Register a case that runs exclusively, demoting plain tests to skip."""
        return self._add(label, test_fn, timeout_ms, CaseType.ONLY)

    def todo(
        self,
        label: str | TestFunction | None = None,
        test_fn: TestFunction | None = None,
        timeout_ms: int | None = None,
    ) -> "Suite":
        """Register a placeholder case that is reported as todo."""
        return self._add(label, test_fn, timeout_ms, CaseType.TODO)

    def _resolve_types(self) -> None:
        """Apply skip_all and only-resolution to the registered cases."""
        if self.config.skip_all:
            for case in self.cases:
                if case.type is CaseType.TEST:
                    case.type = CaseType.SKIP

        # if at least one "only" exists, everything else is skipped
        if any(case.type is CaseType.ONLY for case in self.cases):
            switch = {CaseType.TEST: CaseType.SKIP, CaseType.ONLY: CaseType.TEST}
            for case in self.cases:
                case.type = switch.get(case.type, case.type)

    async def run(
        self,
        verbose: bool = True,
        context: Mapping[str, Any] | None = None,
        *,
        error_exit_on_first_fail: bool | None = None,
        exit_on_timeout: bool | None = None,
        renderer: Renderer | None = None,
    ) -> RunResult:
        """Run all cases in registration order.

        Args:
            verbose: Full (True) vs dotted (False) output
            context: Fixture context merged into every test function argument
            error_exit_on_first_fail: Stop and request exit code 1 on the
                first error; None falls back to the suite config
            exit_on_timeout: Stop and request exit (1 if
                error_exit_on_first_fail else 0) on the first timeout; None
                falls back to the suite config
            renderer: Event consumer for this run, defaults to the suite's

        Returns:
            The suite's RunResult. When a policy flag requested termination,
            the result is partial and carries the `termination` signal.
        """
        if error_exit_on_first_fail is None:
            error_exit_on_first_fail = self.config.error_exit_on_first_fail
        if exit_on_timeout is None:
            exit_on_timeout = self.config.exit_on_timeout

        render = renderer or self.renderer
        render.verbose = verbose

        self._resolve_types()
        total_runnable = sum(1 for case in self.cases if case.type is CaseType.TEST)

        executor = CaseExecutor(
            self.label,
            self.config,
            render,
            error_exit_on_first_fail=error_exit_on_first_fail,
            exit_on_timeout=exit_on_timeout,
        )
        results = RunResult(error_exit_on_first_fail=error_exit_on_first_fail)
        total_start = time.monotonic()
        runnable_seen = 0

        render.suite_name(self.label)

        for index, case in enumerate(self.cases):
            if case.type is CaseType.SKIP:
                results.skip += 1
                render.result(case.type, case.label)
                continue
            if case.type is CaseType.TODO:
                results.todo += 1
                render.result(case.type, case.label)
                continue

            partial = await executor.execute(
                case,
                index,
                is_first=runnable_seen == 0,
                is_last=runnable_seen == total_runnable - 1,
                context=context,
            )
            runnable_seen += 1
            results.merge(partial)

            if partial.termination is not None:
                results.termination = partial.termination
            elif results.has_failures and error_exit_on_first_fail:
                results.termination = Termination(
                    code=1, reason=f"Test case '{case.label}' failed"
                )

            if results.termination is not None:
                results.duration_ms = elapsed_ms(total_start)
                logger.info(
                    "Suite '%s' requested termination: %s",
                    self.label,
                    results.termination.reason,
                )
                return results

        results.duration_ms = elapsed_ms(total_start)
        logger.debug("Suite '%s' finished: %s", self.label, results)
        render.stats(results)
        return results

    def run_sync(self, *args: Any, **kwargs: Any) -> RunResult:
        """Run the suite from synchronous code (e.g. a `__main__` guard)."""
        return asyncio.run(self.run(*args, **kwargs))

