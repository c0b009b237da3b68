"""Core components shared across the suitecase framework."""

from suitecase.core.constants import (
    # Discovery
    DEFAULT_SUITE_FILE_PATTERN,
    DEFAULT_TEST_DIRS,
    # Timeouts
    DEFAULT_TIMEOUT_MS,
    EXCLUDED_PATH_SEGMENTS,
    # Rendering
    STACK_FRAME_LIMIT,
    SUITE_ATTRIBUTE,
    UNTITLED_LABEL,
)
from suitecase.core.errors import (
    CaseTimeoutError,
    InvalidSuiteError,
    MissingTestFunctionError,
    SkipError,
    SuitecaseError,
    skip,
)
from suitecase.core.models import (
    CaseType,
    ErrorDetail,
    HookMeta,
    InvalidSuite,
    SuiteConfig,
    TestCase,
    TestDetail,
    TestStatus,
    Termination,
)
from suitecase.core.types import AggregateStats, RunResult

__all__ = [
    # Constants
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_SUITE_FILE_PATTERN",
    "DEFAULT_TEST_DIRS",
    "EXCLUDED_PATH_SEGMENTS",
    "STACK_FRAME_LIMIT",
    "SUITE_ATTRIBUTE",
    "UNTITLED_LABEL",
    # Errors
    "SuitecaseError",
    "CaseTimeoutError",
    "SkipError",
    "MissingTestFunctionError",
    "InvalidSuiteError",
    "skip",
    # Models
    "CaseType",
    "TestStatus",
    "TestCase",
    "HookMeta",
    "TestDetail",
    "Termination",
    "ErrorDetail",
    "InvalidSuite",
    "SuiteConfig",
    "RunResult",
    "AggregateStats",
]
