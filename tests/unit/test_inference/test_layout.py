"""Tests for repository layout helpers."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from classpath_infer.core.exceptions.errors import DependencyListingError
from classpath_infer.inference import layout
from classpath_infer.inference.layout import (
    find_executable_on_path,
    gradle_artifact_dir,
    jar_file_name,
    jar_or_aar_names,
    maven_command,
    maven_jar_path,
)
from classpath_infer.models.artifact import Artifact

GUAVA = Artifact.parse("com.google.guava:guava:28.1-jre")


class TestFileNames:
    """Tests for jar file naming."""

    def test_binary_jar(self) -> None:
        assert jar_file_name(GUAVA) == "guava-28.1-jre.jar"

    def test_source_jar(self) -> None:
        assert jar_file_name(GUAVA, source=True) == "guava-28.1-jre-sources.jar"

    def test_jar_or_aar(self) -> None:
        assert jar_or_aar_names(GUAVA) == ("guava-28.1-jre.jar", "guava-28.1-jre.aar")
        assert jar_or_aar_names(GUAVA, source=True) == (
            "guava-28.1-jre-sources.jar",
            "guava-28.1-jre-sources.aar",
        )


class TestRepositoryPaths:
    """Tests for Maven and Gradle repository paths."""

    def test_maven_jar_path(self, tmp_path: Path) -> None:
        """Test groupId dots become directories."""
        expected = (
            tmp_path
            / "repository"
            / "com"
            / "google"
            / "guava"
            / "guava"
            / "28.1-jre"
            / "guava-28.1-jre.jar"
        )
        assert maven_jar_path(tmp_path, GUAVA) == expected

    def test_maven_source_jar_path(self, tmp_path: Path) -> None:
        assert maven_jar_path(tmp_path, GUAVA, source=True).name == "guava-28.1-jre-sources.jar"

    def test_gradle_artifact_dir_keeps_dotted_group(self, tmp_path: Path) -> None:
        expected = (
            tmp_path
            / "caches"
            / "modules-2"
            / "files-2.1"
            / "com.google.guava"
            / "guava"
            / "28.1-jre"
        )
        assert gradle_artifact_dir(tmp_path, GUAVA) == expected


class TestExecutableLookup:
    """Tests for locating executables on PATH."""

    def _make_executable(self, directory: Path, name: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        exe = directory / name
        exe.write_text("#!/bin/sh\n")
        exe.chmod(0o755)
        return exe

    def test_found(self, tmp_path: Path) -> None:
        exe = self._make_executable(tmp_path / "bin", "mvn.cmd")
        search = os.pathsep.join([str(tmp_path / "empty"), str(tmp_path / "bin")])
        assert find_executable_on_path("mvn.cmd", search) == str(exe)

    def test_first_match_wins(self, tmp_path: Path) -> None:
        first = self._make_executable(tmp_path / "a", "mvn")
        self._make_executable(tmp_path / "b", "mvn")
        search = os.pathsep.join([str(tmp_path / "a"), str(tmp_path / "b")])
        assert find_executable_on_path("mvn", search) == str(first)

    def test_not_executable(self, tmp_path: Path) -> None:
        (tmp_path / "mvn").write_text("")
        (tmp_path / "mvn").chmod(0o644)
        assert find_executable_on_path("mvn", str(tmp_path)) is None

    def test_directory_is_not_executable_file(self, tmp_path: Path) -> None:
        (tmp_path / "mvn").mkdir()
        assert find_executable_on_path("mvn", str(tmp_path)) is None

    def test_uses_path_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        exe = self._make_executable(tmp_path, "mvn.bat")
        monkeypatch.setenv("PATH", str(tmp_path))
        assert find_executable_on_path("mvn.bat") == str(exe)


class TestMavenCommand:
    """Tests for choosing the Maven executable."""

    def test_explicit_executable(self) -> None:
        assert maven_command("/opt/maven/bin/mvn") == "/opt/maven/bin/mvn"

    def test_posix_default(self) -> None:
        with patch.object(layout.os, "sep", "/"):
            assert maven_command() == "mvn"

    def test_windows_prefers_cmd(self) -> None:
        found = {"mvn.cmd": r"C:\maven\bin\mvn.cmd", "mvn.bat": r"C:\maven\bin\mvn.bat"}
        with patch.object(layout.os, "sep", "\\"), patch.object(
            layout, "find_executable_on_path", side_effect=found.get
        ):
            assert maven_command() == r"C:\maven\bin\mvn.cmd"

    def test_windows_falls_back_to_bat(self) -> None:
        found = {"mvn.bat": r"C:\maven\bin\mvn.bat"}
        with patch.object(layout.os, "sep", "\\"), patch.object(
            layout, "find_executable_on_path", side_effect=found.get
        ):
            assert maven_command() == r"C:\maven\bin\mvn.bat"

    def test_windows_not_found(self) -> None:
        with patch.object(layout.os, "sep", "\\"), patch.object(
            layout, "find_executable_on_path", return_value=None
        ):
            with pytest.raises(DependencyListingError, match="mvn.cmd or mvn.bat"):
                maven_command()
