# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Exception taxonomy used by the suite engine."""


class SuitecaseError(Exception):
    """Base class for all suitecase errors."""


class CaseTimeoutError(SuitecaseError):
    """Raised by the timer side of the timeout race."""

    def __init__(self, timeout_ms: int) -> None:
        super().__init__(f"Timed out! ({timeout_ms} ms)")
        self.timeout_ms = timeout_ms


class SkipError(SuitecaseError):
    """Raised from inside a test body to skip it at runtime."""


class MissingTestFunctionError(SuitecaseError):
    """Raised by the placeholder body of a case registered without a callable."""


class InvalidSuiteError(SuitecaseError):
    """Raised when a loaded suite file does not expose a usable Suite."""


def skip(message: str = "") -> None:
    """Skip the currently running test case.

    The case is counted as skipped (not as an error) and is rendered with
    the given message.

    Args:
        message: Optional reason, defaults to "Skipped"

    Raises:
        SkipError: Always
    """
    raise SkipError(message or "Skipped")
