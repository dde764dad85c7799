"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from classpath_infer.core.config.settings import InferenceSettings, LoggingSettings, Settings
from classpath_infer.inference.layout import maven_jar_path
from classpath_infer.models.artifact import Artifact


class FakeDependencyLister:
    """Stands in for MavenDependencyLister; returns canned results in order."""

    def __init__(self, *results: Iterable[Artifact]) -> None:
        self.results = [set(r) for r in results] or [set()]
        self.calls: list[Path] = []

    def list_maven_dependencies(self, workspace_root: Path) -> set[Artifact]:
        self.calls.append(workspace_root)
        index = min(len(self.calls) - 1, len(self.results) - 1)
        return self.results[index]


@pytest.fixture
def maven_home(tmp_path: Path) -> Path:
    """Empty Maven home (the ~/.m2 equivalent)."""
    home = tmp_path / "m2"
    (home / "repository").mkdir(parents=True)
    return home


@pytest.fixture
def gradle_home(tmp_path: Path) -> Path:
    """Empty Gradle user home (the ~/.gradle equivalent)."""
    home = tmp_path / "gradle-home"
    home.mkdir()
    return home


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty workspace root."""
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def settings(maven_home: Path, gradle_home: Path) -> Settings:
    """Settings pointing at the temporary repositories."""
    return Settings(
        inference=InferenceSettings(maven_home=maven_home, gradle_home=gradle_home),
        logging=LoggingSettings(use_rich=False),
    )


@pytest.fixture
def install_maven_jar(maven_home: Path) -> Callable[..., Path]:
    """Return a function that places a jar in the Maven repository.

    Usage: ``install_maven_jar("g:a:v", source=False)``.
    """

    def install(coordinate: str, source: bool = False) -> Path:
        jar = maven_jar_path(maven_home, Artifact.parse(coordinate), source)
        jar.parent.mkdir(parents=True, exist_ok=True)
        jar.write_bytes(b"PK\x03\x04")
        return jar

    return install


@pytest.fixture
def install_gradle_jar(gradle_home: Path) -> Callable[..., Path]:
    """Return a function that places a jar in the Gradle module cache.

    Usage: ``install_gradle_jar("g:a:v", source=False, checksum="abc", ext="jar")``.
    """

    def install(
        coordinate: str,
        source: bool = False,
        checksum: str = "0a1b2c",
        ext: str = "jar",
    ) -> Path:
        artifact = Artifact.parse(coordinate)
        suffix = "-sources" if source else ""
        jar = (
            gradle_home
            / "caches"
            / "modules-2"
            / "files-2.1"
            / artifact.group_id
            / artifact.artifact_id
            / artifact.version
            / checksum
            / f"{artifact.artifact_id}-{artifact.version}{suffix}.{ext}"
        )
        jar.parent.mkdir(parents=True, exist_ok=True)
        jar.write_bytes(b"PK\x03\x04")
        return jar

    return install


@pytest.fixture
def fake_lister() -> Callable[..., FakeDependencyLister]:
    """Factory for FakeDependencyLister instances."""
    return FakeDependencyLister


MVN_DEPENDENCY_LIST_OUTPUT = """\
[INFO] Scanning for projects...
[INFO]
[INFO] ------------------------< com.example:demo >-------------------------
[INFO] Building demo 1.0-SNAPSHOT
[INFO] --------------------------------[ jar ]---------------------------------
[INFO]
[INFO] --- maven-dependency-plugin:2.8:list (default-cli) @ demo ---
[INFO]
[INFO] The following files have been resolved:
[INFO]    junit:junit:jar:4.12:test
[INFO]    org.hamcrest:hamcrest-core:jar:1.3:test
[INFO]    com.google.guava:guava:jar:28.1-jre:compile
[INFO]
[INFO] ------------------------------------------------------------------------
[INFO] BUILD SUCCESS
[INFO] ------------------------------------------------------------------------
"""


@pytest.fixture
def mvn_output() -> str:
    """Realistic ``mvn dependency:list`` output."""
    return MVN_DEPENDENCY_LIST_OUTPUT
