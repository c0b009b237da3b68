# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Loading of suite files.

Orchestration only depends on the `SuiteLoader` protocol. The default
`ModuleSuiteLoader` imports the file as a Python module and returns its
exported suite:

    1. The module-level `suite` attribute, if it is a Suite
    2. Otherwise the only Suite instance defined at module level
"""

import hashlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Protocol

from suitecase.core.constants import SUITE_ATTRIBUTE
from suitecase.core.errors import InvalidSuiteError
from suitecase.engine.suite import Suite
from suitecase.utils.strings import sanitize_identifier

logger = logging.getLogger(__name__)


class SuiteLoader(Protocol):
    """Capability to turn a suite file path into a Suite."""

    def load(self, path: Path) -> Suite: ...


class ModuleSuiteLoader:
    """Imports suite files with importlib."""

    def __init__(self, attribute: str = SUITE_ATTRIBUTE) -> None:
        self.attribute = attribute

    @staticmethod
    def _module_name(path: Path) -> str:
        """Unique module name, stable for a given absolute path."""
        digest = hashlib.sha1(str(path.resolve()).encode()).hexdigest()[:8]
        return f"suitecase_suite_{sanitize_identifier(path.stem)}_{digest}"

    def load(self, path: Path) -> Suite:
        """Import `path` and return its exported Suite.

        Args:
            path: Suite file to import

        Returns:
            The Suite exported by the module

        Raises:
            InvalidSuiteError: If the file cannot be imported as a module or
                does not export exactly one usable Suite
            Exception: Anything raised while executing the module body
        """
        module_name = self._module_name(path)
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise InvalidSuiteError(f"Cannot import {path.name}")

        logger.debug(f"Loading suite file {path} as {module_name}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise

        exported = getattr(module, self.attribute, None)
        if isinstance(exported, Suite):
            return exported
        if exported is not None:
            raise InvalidSuiteError(
                f"'{self.attribute}' in {path.name} is not a Suite "
                f"(got {type(exported).__name__})"
            )

        candidates = [
            value for value in vars(module).values() if isinstance(value, Suite)
        ]
        if len(candidates) == 1:
            return candidates[0]
        if not candidates:
            raise InvalidSuiteError(f"No Suite exported by {path.name}")
        raise InvalidSuiteError(
            f"Multiple Suite instances in {path.name}, "
            f"export the one to run as '{self.attribute}'"
        )
