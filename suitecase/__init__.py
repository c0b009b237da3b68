# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

from importlib.metadata import PackageNotFoundError, version  # type: ignore

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    # Package not installed in production mode
    __version__ = "0.1.0"

from suitecase.core import (  # noqa: E402
    AggregateStats,
    CaseType,
    HookMeta,
    RunResult,
    SkipError,
    SuiteConfig,
    TestDetail,
    TestStatus,
    skip,
)
from suitecase.engine import Suite  # noqa: E402
from suitecase.orchestrator import RunAllOptions, RunAllOrchestrator, run_all  # noqa: E402

__all__ = [
    "__version__",
    "AggregateStats",
    "CaseType",
    "HookMeta",
    "RunAllOptions",
    "RunAllOrchestrator",
    "RunResult",
    "SkipError",
    "Suite",
    "SuiteConfig",
    "TestDetail",
    "TestStatus",
    "run_all",
    "skip",
]
