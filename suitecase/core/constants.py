# -*- coding: utf-8 -*-

"""Core constants shared across the suitecase framework."""

# Timeouts
DEFAULT_TIMEOUT_MS = 1000  # per test case, unless overridden

# Discovery
DEFAULT_SUITE_FILE_PATTERN = r"\.tests?\.py$"
EXCLUDED_PATH_SEGMENTS = ("node_modules", "__pycache__", "site-packages")
DEFAULT_TEST_DIRS = ("./tests", "./src")

# Suite loading - module attribute holding the exported suite
SUITE_ATTRIBUTE = "suite"

# Registration
UNTITLED_LABEL = "untitled"

# Rendering
STACK_FRAME_LIMIT = 4
