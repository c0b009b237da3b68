# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Suite discovery components."""

from .loader import ModuleSuiteLoader, SuiteLoader
from .suite_discovery import SuiteDiscovery
from .walker import Visitor, Walker, walk

__all__ = [
    "ModuleSuiteLoader",
    "SuiteDiscovery",
    "SuiteLoader",
    "Visitor",
    "Walker",
    "walk",
]
