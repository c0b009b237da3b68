"""Core data models shared across the suitecase framework.

This module contains the data structures describing registered test cases
and their per-case outcomes. Aggregated results live in `suitecase.core.types`.
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

TestFunction = Callable[[dict[str, Any]], Awaitable[None] | None]
HookFunction = Callable[["HookMeta"], Awaitable[Mapping[str, Any] | None] | Mapping[str, Any] | None]


class CaseType(str, Enum):
    """Registration type of a test case.

    ONLY never reaches execution: suite resolution rewrites it to TEST
    (and demotes plain TEST cases to SKIP) before the run loop starts.
    """

    TEST = "test"
    SKIP = "skip"
    ONLY = "only"
    TODO = "todo"


class TestStatus(str, Enum):
    """Final status of an executed test case."""

    __test__ = False  # not a pytest test class

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class SuiteConfig:
    """Lifecycle hooks and run policy of a suite.

    Attributes:
        before: Called once before the first runnable case
        before_each: Called before every runnable case; a returned mapping is
            merged into the fixture context passed to the test function
        after: Called once after the last runnable case
        after_each: Called after every runnable case, even if it failed
        timeout_ms: Default per-case timeout
        skip_all: Turn every plain test case into a skipped one
        error_exit_on_first_fail: Request termination on the first error
        exit_on_timeout: Request termination on the first timeout
    """

    before: HookFunction | None = None
    before_each: HookFunction | None = None
    after: HookFunction | None = None
    after_each: HookFunction | None = None
    timeout_ms: int | None = None
    skip_all: bool = False
    error_exit_on_first_fail: bool = False
    exit_on_timeout: bool = False


@dataclass
class TestCase:
    """A single registered unit of test logic."""

    __test__ = False

    label: str
    test_fn: TestFunction
    timeout_ms: int | None = None
    type: CaseType = CaseType.TEST


@dataclass(frozen=True)
class HookMeta:
    """Argument passed to every lifecycle hook."""

    test: str
    suite: str


@dataclass
class TestDetail:
    """Outcome of one executed test case.

    Attributes:
        label: Case label
        suite_label: Label of the owning suite
        status: Final status of the case
        error: Sanitized error message, None unless the case failed
        stack: Raw traceback text, None for timeouts and expected errors
        message: Reason of a runtime skip
        duration_ms: Wall time spent in hooks and body
    """

    __test__ = False

    label: str
    suite_label: str
    status: TestStatus
    error: str | None = None
    stack: str | None = None
    message: str | None = None
    duration_ms: int = 0


@dataclass(frozen=True)
class Termination:
    """Request to stop the whole run and exit with `code`."""

    code: int
    reason: str


@dataclass(frozen=True)
class ErrorDetail:
    """A failing case as listed in the run-all errors summary."""

    label: str
    error: str


@dataclass(frozen=True)
class InvalidSuite:
    """A suite file that could not be loaded or run."""

    label: str
    error: str
