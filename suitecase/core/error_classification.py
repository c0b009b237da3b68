# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Error classification utilities for test case failures.

This module converts raw exceptions raised by hooks and test bodies into
structured outcome classifications, and produces the compact message and
stack text used for display.
"""

import os
import re
import traceback
from enum import Enum

from suitecase.core.constants import STACK_FRAME_LIMIT
from suitecase.core.errors import (
    CaseTimeoutError,
    MissingTestFunctionError,
    SkipError,
)


class CaseOutcome(Enum):
    """Outcome classification for an exception raised while running a case."""

    SKIPPED = "skipped"
    TIMED_OUT = "timed_out"
    MISSING_FUNCTION = "missing_function"
    FAILED = "failed"


# Generic prefixes carrying no information once the message is displayed
_GENERIC_PREFIX_PATTERN: re.Pattern[str] = re.compile(
    r"^(?:Error|Exception):\s*", re.IGNORECASE
)

# pytest assertion rewriting appends "+  where ..." explanation lines
_ASSERTION_EXPLANATION_PATTERN: re.Pattern[str] = re.compile(
    r"\n\s*\+\s+where\b.*", re.DOTALL
)

_WHITESPACE_PATTERN: re.Pattern[str] = re.compile(r"\s\s+")

# Matches the absolute prefix of an installed package path
_SITE_PACKAGES_PATTERN: re.Pattern[str] = re.compile(r"\"[^\"]*?(site-packages)")


def format_exception(error: BaseException) -> str:
    """Render an exception as "<Type>: <message>" (or just "<Type>")."""
    message = str(error)
    name = type(error).__name__
    return f"{name}: {message}" if message else name


def sanitize_error(error: BaseException | str | None) -> str:
    """Convert an error into a compact, single-line display message.

    Args:
        error: Exception instance or already formatted message

    Returns:
        Message without generic prefix, working directory, assertion
        explanation lines and repeated whitespace

    Examples:
        >>> sanitize_error(Exception("boom"))
        'boom'
        >>> sanitize_error(ValueError("bad   value"))
        'ValueError: bad value'
    """
    if error is None:
        return ""
    text = error if isinstance(error, str) else format_exception(error)
    text = _ASSERTION_EXPLANATION_PATTERN.sub("", text)
    text = _GENERIC_PREFIX_PATTERN.sub("", text)
    text = text.replace(os.getcwd() + os.sep, "").replace(os.getcwd(), "")
    return _WHITESPACE_PATTERN.sub(" ", text).strip()


def sanitize_stack(stack: str | None, limit: int = STACK_FRAME_LIMIT) -> str:
    """Trim a formatted traceback down to its innermost frames.

    The "Traceback (most recent call last):" header and the final exception
    line are dropped (the message is displayed separately), long
    site-packages paths are shortened and the working directory is removed.

    Args:
        stack: Traceback text as produced by `traceback.format_exception`
        limit: Number of frame lines to keep

    Returns:
        Compact multi-line stack, empty if there is nothing to show
    """
    if not stack:
        return ""
    cwd = os.getcwd()
    lines = []
    for line in stack.splitlines():
        if not line.strip().startswith("File "):
            continue
        line = _SITE_PACKAGES_PATTERN.sub(r'"\1', line)
        line = line.replace(cwd + os.sep, "").replace(cwd, "")
        lines.append(_WHITESPACE_PATTERN.sub(" ", line).strip())
    return "\n".join(lines[-limit:])


def classify_error(error: BaseException) -> tuple[CaseOutcome, str, str | None]:
    """Classify an exception raised by a hook or a test body.

    Args:
        error: The first exception raised while running the case

    Returns:
        A tuple of (CaseOutcome, sanitized message, raw stack or None).
        Expected errors (skip, timeout, missing function) carry no stack.
    """
    if isinstance(error, SkipError):
        return CaseOutcome.SKIPPED, sanitize_error(str(error)), None

    if isinstance(error, CaseTimeoutError):
        return CaseOutcome.TIMED_OUT, str(error), None

    if isinstance(error, MissingTestFunctionError):
        return CaseOutcome.MISSING_FUNCTION, str(error), None

    stack = "".join(
        traceback.format_exception(type(error), error, error.__traceback__)
    )
    return CaseOutcome.FAILED, sanitize_error(error), stack
