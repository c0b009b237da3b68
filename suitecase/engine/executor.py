# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Hook and timeout executor for a single test case.

A runnable case goes through its lifecycle inside a timeout race:

    [before] -> before_each -> test_fn -> after_each -> [after]

`before` only runs for the first runnable case of a suite and `after` only
for the last one. Errors raised anywhere in the sequence are merged with a
first-error-wins rule and never propagate past the executor.

The timeout race does not cancel the losing body. A timed-out case keeps
running in the background; its late result is discarded and never rendered.
"""

import asyncio
import copy
import logging
import time
from collections.abc import Mapping
from typing import Any

from suitecase.core.constants import DEFAULT_TIMEOUT_MS
from suitecase.core.error_classification import CaseOutcome, classify_error
from suitecase.core.errors import CaseTimeoutError
from suitecase.core.models import (
    CaseType,
    HookFunction,
    HookMeta,
    SuiteConfig,
    TestCase,
    TestDetail,
    TestStatus,
    Termination,
)
from suitecase.core.types import RunResult
from suitecase.rendering import Renderer
from suitecase.utils.asyncio_utils import call_maybe_async

logger = logging.getLogger(__name__)


def elapsed_ms(start: float) -> int:
    """Milliseconds elapsed since a `time.monotonic()` reading."""
    return int((time.monotonic() - start) * 1000)


class CaseExecutor:
    """Runs the runnable cases of one suite invocation.

    One executor is created per `Suite.run()` call; it owns the set of
    timed-out case indexes and the background tasks abandoned by the
    timeout race.
    """

    def __init__(
        self,
        suite_label: str,
        config: SuiteConfig,
        renderer: Renderer,
        error_exit_on_first_fail: bool = False,
        exit_on_timeout: bool = False,
    ) -> None:
        """Initialize the executor.

        Args:
            suite_label: Label of the suite, passed to hooks and details
            config: Suite hooks and default timeout
            renderer: Event consumer
            error_exit_on_first_fail: Effective policy flag, decides the exit
                code of a timeout termination
            exit_on_timeout: Request termination when a case times out
        """
        self.suite_label = suite_label
        self.config = config
        self.renderer = renderer
        self.error_exit_on_first_fail = error_exit_on_first_fail
        self.exit_on_timeout = exit_on_timeout
        self.timed_out: set[int] = set()
        self._abandoned: set[asyncio.Task[RunResult]] = set()

    async def execute(
        self,
        case: TestCase,
        index: int,
        is_first: bool,
        is_last: bool,
        context: Mapping[str, Any] | None = None,
    ) -> RunResult:
        """Execute one runnable case under its timeout.

        Args:
            case: The case to run (resolved type TEST)
            index: Position of the case among all registered cases
            is_first: Whether this is the first runnable case (runs `before`)
            is_last: Whether this is the last runnable case (runs `after`)
            context: Caller supplied fixture context

        Returns:
            Partial RunResult holding exactly one counted case and its
            detail, plus a termination signal when a timeout requested it
        """
        timeout_ms = case.timeout_ms or self.config.timeout_ms or DEFAULT_TIMEOUT_MS
        start = time.monotonic()

        task = asyncio.ensure_future(
            self._run_case(case, index, is_first, is_last, context or {})
        )
        done, _ = await asyncio.wait({task}, timeout=timeout_ms / 1000)
        if task in done:
            return task.result()

        # keep a reference until the abandoned body settles
        self._abandoned.add(task)
        task.add_done_callback(self._abandoned.discard)
        return self._timed_out(case, index, CaseTimeoutError(timeout_ms), start)

    def _timed_out(
        self, case: TestCase, index: int, error: CaseTimeoutError, start: float
    ) -> RunResult:
        self.timed_out.add(index)
        logger.warning(
            "Test case '%s' of suite '%s' %s", case.label, self.suite_label, error
        )

        detail = TestDetail(
            label=case.label,
            suite_label=self.suite_label,
            status=TestStatus.FAILED,
            error=str(error),
            duration_ms=elapsed_ms(start),
        )
        partial = RunResult(errors=1, details=[detail])

        if self.exit_on_timeout:
            self.renderer.log("warn", f"{error} (see exit_on_timeout option)")
            partial.termination = Termination(
                code=1 if self.error_exit_on_first_fail else 0, reason=str(error)
            )
            return partial

        self.renderer.result(
            CaseType.TEST, case.label, error=detail.error, duration_ms=detail.duration_ms
        )
        return partial

    async def _run_case(
        self,
        case: TestCase,
        index: int,
        is_first: bool,
        is_last: bool,
        context: Mapping[str, Any],
    ) -> RunResult:
        start = time.monotonic()
        meta = HookMeta(test=case.label, suite=self.suite_label)
        error: BaseException | None = None

        # "pre" hooks up until the test function...
        try:
            if is_first:
                await self._exec_hook(self.config.before, meta)
            fixture = await self._exec_hook(self.config.before_each, meta)
            await call_maybe_async(case.test_fn, self._merge_context(context, fixture))
        except (asyncio.CancelledError, KeyboardInterrupt):
            raise
        except BaseException as e:
            # SystemExit and pytest outcomes are case failures too
            error = e

        # ...and "post" hooks, even if an error happened above
        error = await self._catch(error, self.config.after_each, meta)
        if is_last:
            error = await self._catch(error, self.config.after, meta)

        partial = self._classify(case, error, elapsed_ms(start))

        if index not in self.timed_out:
            detail = partial.details[0]
            if detail.status is TestStatus.SKIPPED:
                self.renderer.result(CaseType.SKIP, case.label, error=detail.message)
            else:
                self.renderer.result(
                    CaseType.TEST,
                    case.label,
                    error=detail.error,
                    stack=detail.stack,
                    duration_ms=detail.duration_ms,
                )
        return partial

    def _classify(
        self, case: TestCase, error: BaseException | None, duration_ms: int
    ) -> RunResult:
        detail = TestDetail(
            label=case.label,
            suite_label=self.suite_label,
            status=TestStatus.PASSED,
            duration_ms=duration_ms,
        )
        if error is None:
            return RunResult(ok=1, details=[detail])

        outcome, message, stack = classify_error(error)
        if outcome is CaseOutcome.SKIPPED:
            detail.status = TestStatus.SKIPPED
            detail.message = message
            return RunResult(skip=1, details=[detail])

        detail.status = TestStatus.FAILED
        detail.error = message
        detail.stack = stack
        return RunResult(errors=1, details=[detail])

    @staticmethod
    def _merge_context(
        context: Mapping[str, Any], fixture: Mapping[str, Any] | None
    ) -> dict[str, Any]:
        if fixture is not None and not isinstance(fixture, Mapping):
            raise TypeError(
                f"before_each must return a mapping or None, got {type(fixture).__name__}"
            )
        # deep copy so no test can leak fixture mutations into the next one
        return copy.deepcopy({**context, **(fixture or {})})

    @staticmethod
    async def _exec_hook(hook: HookFunction | None, meta: HookMeta) -> Any:
        if hook is None:
            return None
        return await call_maybe_async(hook, meta)

    async def _catch(
        self, previous: BaseException | None, hook: HookFunction | None, meta: HookMeta
    ) -> BaseException | None:
        try:
            await self._exec_hook(hook, meta)
        except (asyncio.CancelledError, KeyboardInterrupt):
            raise
        except BaseException as e:
            # first error wins
            return previous or e
        return previous
