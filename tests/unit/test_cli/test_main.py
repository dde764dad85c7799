"""Tests for CLI main module."""

import json
import os
from collections.abc import Callable, Iterable
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from classpath_infer.cli.main import main
from classpath_infer.core.config.settings import Settings
from classpath_infer.core.exceptions.errors import DependencyListingError
from classpath_infer.inference.infer_config import InferConfig
from classpath_infer.models.classpath import StrategyKind


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def isolated_config(settings: Settings):
    """Route the CLI's InferConfig through the temporary repositories."""

    def build(path: Path, external_deps: Iterable[str]) -> InferConfig:
        return InferConfig(path, external_dependencies=list(external_deps), settings=settings)

    with patch("classpath_infer.cli.main.build_config", side_effect=build) as mock_build:
        yield mock_build


class TestMainCommand:
    """Test main CLI command."""

    def test_version_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "classpath-infer version 0.1.0" in result.output

    def test_no_command_shows_help(self, runner: CliRunner) -> None:
        result = runner.invoke(main, [])
        assert result.exit_code == 0
        assert "classpath" in result.output
        assert "report" in result.output


class TestDetectCommand:
    """Test detect subcommand."""

    def test_detect_maven(self, runner: CliRunner, workspace: Path, isolated_config: MagicMock) -> None:
        (workspace / "pom.xml").write_text("<project/>")
        result = runner.invoke(main, ["detect", "--path", str(workspace)])
        assert result.exit_code == 0
        assert "maven" in result.output

    def test_detect_external(self, runner: CliRunner, workspace: Path, isolated_config: MagicMock) -> None:
        result = runner.invoke(main, ["detect", "-p", str(workspace), "-e", "junit:junit:4.12"])
        assert result.exit_code == 0
        assert StrategyKind.EXTERNAL_DEPS.value in result.output

    def test_missing_path(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(main, ["detect", "--path", str(tmp_path / "missing")])
        assert result.exit_code == 2


class TestClasspathCommand:
    """Test classpath subcommand."""

    def test_plain_format(
        self,
        runner: CliRunner,
        workspace: Path,
        isolated_config: MagicMock,
        install_maven_jar: Callable[..., Path],
    ) -> None:
        junit = install_maven_jar("junit:junit:4.12")
        hamcrest = install_maven_jar("org.hamcrest:hamcrest-core:1.3")

        result = runner.invoke(
            main,
            [
                "classpath",
                "--path", str(workspace),
                "-e", "junit:junit:4.12",
                "-e", "org.hamcrest:hamcrest-core:1.3",
                "--format", "plain",
            ],
        )

        assert result.exit_code == 0
        assert result.stdout.strip() == os.pathsep.join(sorted([str(junit), str(hamcrest)]))

    def test_json_format(
        self,
        runner: CliRunner,
        workspace: Path,
        isolated_config: MagicMock,
        install_maven_jar: Callable[..., Path],
    ) -> None:
        junit = install_maven_jar("junit:junit:4.12")

        result = runner.invoke(
            main,
            ["classpath", "-p", str(workspace), "-e", "junit:junit:4.12", "--library", "-f", "json"],
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [str(junit)]

    def test_table_format(
        self,
        runner: CliRunner,
        workspace: Path,
        isolated_config: MagicMock,
        install_maven_jar: Callable[..., Path],
    ) -> None:
        install_maven_jar("junit:junit:4.12")
        result = runner.invoke(main, ["classpath", "-p", str(workspace), "-e", "junit:junit:4.12"])
        assert result.exit_code == 0
        assert "1 entries" in result.output

    @patch("classpath_infer.cli.main.build_config")
    def test_resolution_failure(self, mock_build: MagicMock, runner: CliRunner, workspace: Path) -> None:
        mock_build.return_value.class_path.side_effect = DependencyListingError(
            "Maven dependency listing failed with code 1", return_code=1
        )

        result = runner.invoke(main, ["classpath", "-p", str(workspace)])

        assert result.exit_code == 1
        assert "Classpath Resolution Failed" in result.output

    def test_malformed_external_dependency(
        self, runner: CliRunner, workspace: Path, isolated_config: MagicMock
    ) -> None:
        result = runner.invoke(main, ["classpath", "-p", str(workspace), "-e", "junit:junit"])
        assert result.exit_code == 1


class TestDocpathCommand:
    """Test docpath subcommand."""

    def test_docpath_plain(
        self,
        runner: CliRunner,
        workspace: Path,
        isolated_config: MagicMock,
        install_maven_jar: Callable[..., Path],
    ) -> None:
        sources = install_maven_jar("junit:junit:4.12", source=True)
        result = runner.invoke(
            main, ["docpath", "-p", str(workspace), "-e", "junit:junit:4.12", "-f", "plain"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == str(sources)


class TestReportCommand:
    """Test report subcommand."""

    def test_report_to_stdout(
        self,
        runner: CliRunner,
        workspace: Path,
        isolated_config: MagicMock,
        install_maven_jar: Callable[..., Path],
    ) -> None:
        junit = install_maven_jar("junit:junit:4.12")

        result = runner.invoke(main, ["report", "-p", str(workspace), "-e", "junit:junit:4.12"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["strategy"] == "external_deps"
        assert data["class_path"] == [str(junit)]
        assert data["doc_path"] == []

    def test_report_to_file(
        self,
        runner: CliRunner,
        tmp_path: Path,
        workspace: Path,
        isolated_config: MagicMock,
    ) -> None:
        output = tmp_path / "report.json"

        result = runner.invoke(main, ["report", "-p", str(workspace), "-o", str(output)])

        assert result.exit_code == 0
        assert "Report written" in result.output
        data = json.loads(output.read_text())
        assert data["strategy"] == "none"
        assert data["workspace_root"] == str(workspace)
