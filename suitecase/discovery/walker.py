# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Recursive file-walk primitive used by suite discovery."""

import os
from collections.abc import Callable
from pathlib import Path

Visitor = Callable[[str, Path], None]
Walker = Callable[[Path, Visitor], None]


def walk(root: Path, visit: Visitor) -> None:
    """Visit every regular file reachable from `root`.

    Directories and files are visited in sorted order so repeated runs over
    the same tree discover files in the same order.

    Args:
        root: Directory to walk
        visit: Called with (filename, absolute path) for each file
    """
    for dirpath, dirnames, filenames in os.walk(Path(root).resolve()):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if path.is_file():
                visit(filename, path)
