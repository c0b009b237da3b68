# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""String utility functions for suitecase framework."""

import re


def sanitize_identifier(name: str) -> str:
    """Sanitize a file name for use as a Python module identifier.

    Replaces any character that is not alphanumeric or underscore with an
    underscore, then converts to lowercase. A leading digit is prefixed with
    an underscore so the result is always a valid identifier.

    Args:
        name: The name to sanitize (e.g., "10-basic.test").

    Returns:
        Sanitized identifier (e.g., "_10_basic_test").

    Examples:
        >>> sanitize_identifier("10-basic.test")
        '_10_basic_test'
        >>> sanitize_identifier("Auth.Tests")
        'auth_tests'
    """
    identifier = re.sub(r"[^a-zA-Z0-9_]", "_", name).lower()
    if not identifier or identifier[0].isdigit():
        identifier = f"_{identifier}"
    return identifier
