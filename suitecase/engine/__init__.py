# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Suite execution engine."""

from .executor import CaseExecutor
from .suite import Suite

__all__ = ["CaseExecutor", "Suite"]
