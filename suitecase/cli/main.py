# -*- coding: utf-8 -*-

# Copyright: (c) 2022, Daniel Schmidt <danischm@cisco.com>

import logging
import os
from pathlib import Path
from typing import Optional

import errorhandler

import typer
from typing_extensions import Annotated

import suitecase
from suitecase.core.constants import DEFAULT_TEST_DIRS
from suitecase.orchestrator import RunAllOptions, RunAllOrchestrator
from suitecase.utils.logging import configure_logging, VerbosityLevel
from suitecase.utils.terminal import terminal


app = typer.Typer(
    add_completion=False, context_settings={"help_option_names": ["-h", "--help"]}
)

logger = logging.getLogger(__name__)

error_handler = errorhandler.ErrorHandler()

# Environment variable guarding against accidental runs in production
ENVIRONMENT_VARIABLE = "SUITECASE_ENV"


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"suitecase, version {suitecase.__version__}")
        raise typer.Exit()


Filters = Annotated[
    Optional[list[str]],
    typer.Argument(
        help="Extra patterns every suite file path must match (case-insensitive).",
        show_default=False,
    ),
]


Dirs = Annotated[
    Optional[list[Path]],
    typer.Option(
        "-d",
        "--dir",
        dir_okay=True,
        file_okay=False,
        help="Directory to search for suite files. [default: ./tests, ./src]",
        envvar="SUITECASE_DIRS",
        show_default=False,
    ),
]


Verbose = Annotated[
    bool,
    typer.Option(
        "-v",
        "--verbose",
        help="Full output instead of one dot per test case.",
        envvar="SUITECASE_VERBOSE",
    ),
]


RootDir = Annotated[
    Optional[Path],
    typer.Option(
        "--root-dir",
        exists=True,
        dir_okay=True,
        file_okay=False,
        help="Prefix removed from suite file paths before pattern matching. [default: current directory]",
        envvar="SUITECASE_ROOT_DIR",
    ),
]


ErrorsSummary = Annotated[
    bool,
    typer.Option(
        "--errors-summary",
        help="Print a compact errors summary below the dotted output.",
        envvar="SUITECASE_ERRORS_SUMMARY",
    ),
]


ErrorExitOnFirstFail = Annotated[
    bool,
    typer.Option(
        "--error-exit-on-first-fail",
        help="Stop and exit with code 1 on the first failed test case.",
        envvar="SUITECASE_ERROR_EXIT_ON_FIRST_FAIL",
    ),
]


ExitOnTimeout = Annotated[
    bool,
    typer.Option(
        "--exit-on-timeout",
        help="Stop on the first timed out test case (exit code 1 with --error-exit-on-first-fail, else 0).",
        envvar="SUITECASE_EXIT_ON_TIMEOUT",
    ),
]


Verbosity = Annotated[
    VerbosityLevel,
    typer.Option(
        "--verbosity",
        help="Log verbosity level.",
        envvar="SUITECASE_VERBOSITY",
        is_eager=True,
    ),
]


Version = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=version_callback,
        help="Display version number.",
        is_eager=True,
    ),
]


@app.command()
def main(
    filters: Filters = None,
    dirs: Dirs = None,
    verbose: Verbose = False,
    root_dir: RootDir = None,
    errors_summary: ErrorsSummary = False,
    error_exit_on_first_fail: ErrorExitOnFirstFail = False,
    exit_on_timeout: ExitOnTimeout = False,
    verbosity: Verbosity = VerbosityLevel.WARNING,
    version: Version = False,
) -> None:
    """Discover and run *.test.py suite files."""
    configure_logging(verbosity, error_handler)

    if os.environ.get(ENVIRONMENT_VARIABLE) == "production":
        typer.echo(
            terminal.error(
                f"ERROR: '{ENVIRONMENT_VARIABLE}=production' detected. Tests will not run!"
            )
        )
        typer.echo(
            terminal.muted(f"(To override, use: {ENVIRONMENT_VARIABLE}=testing)")
        )
        raise typer.Exit(1)

    requested = dirs or [Path(d) for d in DEFAULT_TEST_DIRS]
    existing = [d for d in requested if d.is_dir()]
    if not existing:
        joined = ", ".join(str(d) for d in requested)
        typer.echo(
            terminal.error(f"ERROR: none of the dirs ({terminal.bold(joined)}) were found...")
        )
        typer.echo(terminal.muted("Please specify test dir via `-d ./some/path` arg"))
        raise typer.Exit(1)

    orchestrator = RunAllOrchestrator(
        existing,
        RunAllOptions(
            whitelist=[f for f in (filters or []) if f.strip()],
            verbose=verbose,
            root_dir=root_dir,
            error_exit_on_first_fail=error_exit_on_first_fail,
            enable_errors_summary_on_non_verbose=errors_summary,
            exit_on_timeout=exit_on_timeout,
        ),
    )
    stats = orchestrator.run()

    if stats.termination is not None:
        raise typer.Exit(stats.termination.code)
    exit()


def exit() -> None:
    if error_handler.fired:
        raise typer.Exit(1)
    else:
        raise typer.Exit(0)
