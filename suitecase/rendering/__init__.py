# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Rendering of engine events."""

from .renderer import Renderer, TerminalRenderer

__all__ = ["Renderer", "TerminalRenderer"]
