# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Suite file discovery.

A file is a suite candidate when its path, relative to the configured root
directory, matches every pattern of the whitelist:

    1. The default suite file pattern (`*.test.py` / `*.tests.py`)
    2. Every caller supplied pattern (case-insensitive regular expressions)

Patterns are AND-combined, so extra patterns narrow an already test-shaped
set (e.g. "auth" keeps only suite files whose path also contains "auth").
Paths inside `node_modules`, `__pycache__` or `site-packages` are never
candidates.
"""

import logging
import os
import re
from collections.abc import Iterable
from pathlib import Path

from suitecase.core.constants import DEFAULT_SUITE_FILE_PATTERN, EXCLUDED_PATH_SEGMENTS

from .walker import Walker, walk

logger = logging.getLogger(__name__)


class SuiteDiscovery:
    """Discovers suite files under one or more root directories."""

    def __init__(
        self,
        dirs: Path | str | Iterable[Path | str],
        whitelist: str | Iterable[str] | None = None,
        root_dir: Path | str | None = None,
        walker: Walker = walk,
    ) -> None:
        """Initialize suite discovery.

        Args:
            dirs: Directory or directories to search
            whitelist: Extra pattern(s) every candidate path must match
            root_dir: Prefix removed from absolute paths before matching
                (defaults to the current working directory)
            walker: Recursive file-walk primitive
        """
        if isinstance(dirs, (str, Path)):
            dirs = [dirs]
        # normalize + de-duplicate, keeping the given order
        self.dirs = [Path(d) for d in dict.fromkeys(os.path.normpath(d) for d in dirs)]

        if whitelist is None:
            whitelist = []
        elif isinstance(whitelist, str):
            whitelist = [whitelist]
        self.extra_patterns = [
            re.compile(pattern, re.IGNORECASE) for pattern in whitelist
        ]
        self.patterns = [
            re.compile(DEFAULT_SUITE_FILE_PATTERN, re.IGNORECASE),
            *self.extra_patterns,
        ]

        self.root_dir = Path(root_dir or os.getcwd()).resolve()
        self.walker = walker

    @property
    def whitelist(self) -> list[str]:
        """Caller supplied patterns (without the default suite file pattern)."""
        return [pattern.pattern for pattern in self.extra_patterns]

    def _is_excluded(self, path: Path) -> bool:
        """Check if any path segment is on the hard blacklist."""
        return any(part in EXCLUDED_PATH_SEGMENTS for part in path.parts)

    def _relative_path(self, path: Path) -> str:
        """Path relative to root_dir, absolute if it lies outside of it."""
        try:
            return path.relative_to(self.root_dir).as_posix()
        except ValueError:
            return path.as_posix()

    def is_whitelisted(self, relative_path: str) -> bool:
        """Check if a relative path matches every whitelist pattern."""
        return all(pattern.search(relative_path) for pattern in self.patterns)

    def discover(self) -> list[Path]:
        """Walk every directory and collect candidate suite files.

        Returns:
            Absolute paths of candidate suite files, in discovery order
        """
        found: list[Path] = []
        excluded_count = 0

        def visit(filename: str, path: Path) -> None:
            nonlocal excluded_count
            # hard blacklist check first
            if self._is_excluded(path):
                excluded_count += 1
                return
            if self.is_whitelisted(self._relative_path(path)):
                found.append(path)

        for directory in self.dirs:
            logger.debug(f"Discovering suite files in {directory}")
            self.walker(directory, visit)

        if excluded_count:
            logger.debug(f"Ignored {excluded_count} file(s) in excluded directories")
        logger.info(f"Discovered {len(found)} suite file(s)")
        return found
