# -*- coding: utf-8 -*-

"""Utility modules for suitecase framework."""

from suitecase.utils.asyncio_utils import call_maybe_async
from suitecase.utils.strings import sanitize_identifier
from suitecase.utils.terminal import terminal

__all__ = [
    "terminal",
    "call_maybe_async",
    "sanitize_identifier",
]
