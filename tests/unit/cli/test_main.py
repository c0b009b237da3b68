# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Tests for the suitecase command line."""

import logging
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from typer.testing import CliRunner, Result

import suitecase
from suitecase.cli.main import app
from suitecase.core.models import Termination
from suitecase.core.types import AggregateStats


class TestMain:
    """Tests for argument handling and exit codes."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.runner = CliRunner()

    def _invoke(self, args: list[str], **env: str) -> Result:
        return self.runner.invoke(app, args, env=env or None)

    def _mock_orchestrator(self, cls: Mock, stats: AggregateStats) -> Mock:
        orchestrator = Mock()
        orchestrator.run.return_value = stats
        cls.return_value = orchestrator
        return orchestrator

    @patch("suitecase.cli.main.RunAllOrchestrator")
    def test_exit_code_0_when_run_completes(
        self, mock_orchestrator_cls: Mock, tmp_path: Path
    ) -> None:
        """Failures alone never change the exit code."""
        self._mock_orchestrator(mock_orchestrator_cls, AggregateStats(ok=1, errors=3))

        result = self._invoke(["-d", str(tmp_path)])

        assert result.exit_code == 0

    @pytest.mark.parametrize("code", [0, 1])
    @patch("suitecase.cli.main.RunAllOrchestrator")
    def test_exit_code_follows_termination(
        self, mock_orchestrator_cls: Mock, code: int, tmp_path: Path
    ) -> None:
        stats = AggregateStats(errors=1, termination=Termination(code, "stopped"))
        self._mock_orchestrator(mock_orchestrator_cls, stats)

        result = self._invoke(["-d", str(tmp_path), "--exit-on-timeout"])

        assert result.exit_code == code

    @patch("suitecase.cli.main.RunAllOrchestrator")
    def test_exit_code_1_when_error_was_logged(
        self, mock_orchestrator_cls: Mock, tmp_path: Path
    ) -> None:
        orchestrator = self._mock_orchestrator(mock_orchestrator_cls, AggregateStats())

        def run() -> AggregateStats:
            logging.getLogger("suitecase.test").error("something broke")
            return AggregateStats()

        orchestrator.run.side_effect = run

        result = self._invoke(["-d", str(tmp_path)])

        assert result.exit_code == 1

    @patch("suitecase.cli.main.RunAllOrchestrator")
    def test_options_reach_orchestrator(
        self, mock_orchestrator_cls: Mock, tmp_path: Path
    ) -> None:
        self._mock_orchestrator(mock_orchestrator_cls, AggregateStats())
        other = tmp_path / "other"
        other.mkdir()

        result = self._invoke(
            [
                "auth",
                "login",
                "-d",
                str(tmp_path),
                "-d",
                str(other),
                "-v",
                "--root-dir",
                str(tmp_path),
                "--error-exit-on-first-fail",
                "--errors-summary",
            ]
        )

        assert result.exit_code == 0
        dirs, options = mock_orchestrator_cls.call_args.args
        assert dirs == [tmp_path, other]
        assert options.whitelist == ["auth", "login"]
        assert options.verbose is True
        assert options.root_dir == tmp_path
        assert options.error_exit_on_first_fail is True
        assert options.enable_errors_summary_on_non_verbose is True
        assert options.exit_on_timeout is False

    @patch("suitecase.cli.main.RunAllOrchestrator")
    def test_missing_dirs_are_ignored(
        self, mock_orchestrator_cls: Mock, tmp_path: Path
    ) -> None:
        self._mock_orchestrator(mock_orchestrator_cls, AggregateStats())

        result = self._invoke(["-d", str(tmp_path / "missing"), "-d", str(tmp_path)])

        assert result.exit_code == 0
        assert mock_orchestrator_cls.call_args.args[0] == [tmp_path]

    @patch("suitecase.cli.main.RunAllOrchestrator")
    def test_no_existing_dir_exits_1(
        self, mock_orchestrator_cls: Mock, tmp_path: Path
    ) -> None:
        result = self._invoke(["-d", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "were found" in result.output
        mock_orchestrator_cls.assert_not_called()

    @patch("suitecase.cli.main.RunAllOrchestrator")
    def test_production_guard(
        self, mock_orchestrator_cls: Mock, tmp_path: Path
    ) -> None:
        result = self._invoke(["-d", str(tmp_path)], SUITECASE_ENV="production")

        assert result.exit_code == 1
        assert "Tests will not run" in result.output
        mock_orchestrator_cls.assert_not_called()

    @patch("suitecase.cli.main.RunAllOrchestrator")
    def test_dirs_from_environment(
        self, mock_orchestrator_cls: Mock, tmp_path: Path
    ) -> None:
        self._mock_orchestrator(mock_orchestrator_cls, AggregateStats())

        result = self._invoke([], SUITECASE_DIRS=str(tmp_path))

        assert result.exit_code == 0
        assert mock_orchestrator_cls.call_args.args[0] == [tmp_path]

    def test_version(self) -> None:
        result = self._invoke(["--version"])

        assert result.exit_code == 0
        assert suitecase.__version__ in result.output
