"""Centralized terminal formatting utilities for suitecase."""

from colorama import Fore, Style, init
import os
import re

from suitecase.core.types import AggregateStats, RunResult

# autoreset=True means colors reset after each print
init(autoreset=True)


class TerminalColors:
    """Centralized color scheme for consistent terminal output.

    This class provides semantic color mappings and formatting methods
    to ensure consistent terminal output across the suitecase codebase.
    """

    # Semantic color mapping for different message types
    ERROR = Fore.RED
    WARNING = Fore.YELLOW
    SUCCESS = Fore.GREEN
    HIGHLIGHT = Fore.MAGENTA
    MUTED = Fore.LIGHTBLACK_EX
    RESET = Style.RESET_ALL

    # Semantic styles
    BOLD = Style.BRIGHT

    # Check if colors should be disabled (for CI/CD environments)
    NO_COLOR = os.environ.get("NO_COLOR") is not None

    # Regex pattern to match ANSI escape sequences
    ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

    @classmethod
    def strip_ansi(cls, text: str) -> str:
        """Remove all ANSI escape sequences from text.

        Args:
            text: Text potentially containing ANSI color codes

        Returns:
            Clean text without any ANSI escape sequences
        """
        return cls.ANSI_ESCAPE_PATTERN.sub("", text)

    @classmethod
    def _wrap(cls, color: str, text: str) -> str:
        if cls.NO_COLOR:
            return text
        return f"{color}{text}{cls.RESET}"

    @classmethod
    def error(cls, text: str) -> str:
        """Format error text in red."""
        return cls._wrap(cls.ERROR, text)

    @classmethod
    def warning(cls, text: str) -> str:
        """Format warning text in yellow."""
        return cls._wrap(cls.WARNING, text)

    @classmethod
    def success(cls, text: str) -> str:
        """Format success text in green."""
        return cls._wrap(cls.SUCCESS, text)

    @classmethod
    def highlight(cls, text: str) -> str:
        """Format highlighted text in magenta."""
        return cls._wrap(cls.HIGHLIGHT, text)

    @classmethod
    def muted(cls, text: str) -> str:
        """Format secondary text in gray."""
        return cls._wrap(cls.MUTED, text)

    @classmethod
    def bold(cls, text: str) -> str:
        """Format text in bold."""
        return cls._wrap(cls.BOLD, text)

    @classmethod
    def format_duration(cls, duration_ms: int) -> str:
        """Format a duration as "(N ms)", or "(N s)" above one second."""
        if duration_ms > 1000:
            return cls.muted(f"({round(duration_ms / 1000)} s)")
        return cls.muted(f"({duration_ms} ms)")

    @classmethod
    def format_test_summary(
        cls, stats: RunResult | AggregateStats, prefix: str = "Summary: "
    ) -> str:
        """Format a one-line results summary.

        Only non-zero counters are listed; an empty run shows "0 tests".

        Args:
            stats: Suite or run-all results
            prefix: Leading title, e.g. "Summary: "

        Returns:
            Formatted summary, e.g. "Summary: OK 3, errors 1 (12 ms)"
        """
        parts = [
            cls.success(f"OK {stats.ok}") if stats.ok else "",
            cls.error(f"errors {stats.errors}") if stats.errors else "",
            cls.warning(f"skipped {stats.skip}") if stats.skip else "",
            cls.highlight(f"todo {stats.todo}") if stats.todo else "",
        ]
        summary = cls.muted(", ").join(part for part in parts if part)
        if not summary:
            summary = cls.muted("0 tests")
        return f"{cls.bold(prefix)}{summary} {cls.format_duration(stats.duration_ms)}"


# Single instance for use across the codebase
terminal = TerminalColors()
