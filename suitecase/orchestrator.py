# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Run-all orchestrator: discover suite files, run every suite, aggregate totals."""

import asyncio
import copy
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from suitecase.core.error_classification import sanitize_error
from suitecase.core.models import InvalidSuite
from suitecase.core.types import AggregateStats
from suitecase.discovery import ModuleSuiteLoader, SuiteDiscovery, SuiteLoader, Walker, walk
from suitecase.rendering import Renderer, TerminalRenderer

logger = logging.getLogger(__name__)


@dataclass
class RunAllOptions:
    """Options of a run-all invocation.

    Attributes:
        whitelist: Extra patterns every suite file path must match
        verbose: Full vs dotted output
        root_dir: Prefix removed from absolute paths before matching
            (defaults to the current working directory)
        context: Fixture context, deep-copied for every suite run
        error_exit_on_first_fail: Request exit code 1 on the first error
        enable_errors_summary_on_non_verbose: Print a compact errors summary
            below the dotted output
        exit_on_timeout: Request exit on the first timeout
    """

    whitelist: list[str] = field(default_factory=list)
    verbose: bool = False
    root_dir: Path | None = None
    context: Mapping[str, Any] = field(default_factory=dict)
    error_exit_on_first_fail: bool = False
    enable_errors_summary_on_non_verbose: bool = False
    exit_on_timeout: bool = False


class RunAllOrchestrator:
    """Runs every suite discovered under a set of directories.

    Suites run sequentially in discovery order. A file that cannot be
    loaded (or whose run raises outside the per-test flow) is recorded as
    invalid and never aborts the whole run.
    """

    def __init__(
        self,
        dirs: Path | str | Iterable[Path | str],
        options: RunAllOptions | None = None,
        renderer: Renderer | None = None,
        loader: SuiteLoader | None = None,
        walker: Walker = walk,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            dirs: Directory or directories to search for suite files
            options: Run options
            renderer: Event consumer; defaults to a TerminalRenderer which
                clears the screen when there is something to run
            loader: Suite file loader
            walker: Recursive file-walk primitive
        """
        self.options = options or RunAllOptions()
        self.discovery = SuiteDiscovery(
            dirs,
            whitelist=self.options.whitelist,
            root_dir=self.options.root_dir,
            walker=walker,
        )
        self.renderer = renderer
        self.loader: SuiteLoader = loader or ModuleSuiteLoader()

    def run(self) -> AggregateStats:
        """Synchronous entry point."""
        return asyncio.run(self.run_async())

    async def run_async(self) -> AggregateStats:
        """Discover, load and run every suite.

        Returns:
            AggregateStats with summed counters, invalid files and error
            details. If a suite requested termination, processing stops
            and the signal is returned on `termination`.
        """
        options = self.options
        suite_files = self.discovery.discover()

        render = self.renderer or TerminalRenderer(
            options.verbose, clear=bool(suite_files)
        )
        render.verbose = options.verbose
        render.run_all_title(self.discovery.whitelist)

        stats = AggregateStats()

        for path in suite_files:
            try:
                suite = self.loader.load(path)
                result = await suite.run(
                    options.verbose,
                    copy.deepcopy(dict(options.context)),
                    error_exit_on_first_fail=options.error_exit_on_first_fail,
                    exit_on_timeout=options.exit_on_timeout,
                    renderer=render,
                )
            except (asyncio.CancelledError, KeyboardInterrupt):
                raise
            except BaseException as e:
                # includes SystemExit raised while importing a suite file
                error = sanitize_error(e)
                logger.warning(f"Invalid suite file {path.name}: {error}")
                render.run_all_suite_error(error, path.name)
                stats.invalid.append(InvalidSuite(label=path.name, error=error))
                continue

            stats.add(result)
            if result.termination is not None:
                stats.termination = result.termination
                logger.info(
                    f"Run stopped after {path.name}: {result.termination.reason}"
                )
                return stats

        logger.info(f"Run finished: {stats}")
        render.run_all_stats(stats, stats.invalid)

        if not options.verbose and options.enable_errors_summary_on_non_verbose:
            render.run_all_errors_summary(stats.error_details, stats.invalid)

        return stats


async def run_all(
    dirs: Path | str | Iterable[Path | str],
    renderer: Renderer | None = None,
    loader: SuiteLoader | None = None,
    walker: Walker = walk,
    **options: Any,
) -> AggregateStats:
    """Run every suite under `dirs`; keyword options map to RunAllOptions."""
    orchestrator = RunAllOrchestrator(
        dirs,
        RunAllOptions(**options),
        renderer=renderer,
        loader=loader,
        walker=walker,
    )
    return await orchestrator.run_async()
