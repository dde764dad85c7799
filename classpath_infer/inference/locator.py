"""Locate dependency jars in the local Maven and Gradle repositories."""

import logging
from collections.abc import Iterable
from pathlib import Path

from classpath_infer.core.logger.logger import get_logger
from classpath_infer.inference.gradle import GradleProject
from classpath_infer.inference.layout import maven_jar_path
from classpath_infer.models.artifact import Artifact, RepositoryRoots


class ArtifactLocator:
    """Finds the jar for an artifact, Maven local repository first, then Gradle."""

    def __init__(
        self,
        roots: RepositoryRoots,
        workspace_root: Path,
        gradle: GradleProject | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the locator.

        Args:
            roots: Maven and Gradle repository homes.
            workspace_root: Workspace being resolved, passed to the Gradle lookup.
            gradle: Gradle collaborator used for the fallback lookup.
            logger: Diagnostics sink.
        """
        self.roots = roots
        self.workspace_root = workspace_root
        self.logger = logger or get_logger(__name__)
        self.gradle = gradle or GradleProject(logger=self.logger)

    def find_maven_jar(self, artifact: Artifact, source: bool = False) -> Path | None:
        """Return the Maven-layout jar if it exists on disk."""
        jar = maven_jar_path(self.roots.maven_home, artifact, source)
        if jar.exists():
            return jar
        return None

    def locate(self, artifact: Artifact, source: bool = False) -> Path | None:
        """Find a jar in either repository.

        Args:
            artifact: Coordinate to look up.
            source: Look for the ``-sources.jar`` variant instead.

        Returns:
            Path of the jar, or None when neither repository has it.
        """
        found = self.find_maven_jar(artifact, source)
        if found is not None:
            return found

        return self.gradle.find_gradle_jar(
            self.roots.gradle_home, artifact, source, self.workspace_root
        )

    def locate_all(self, artifacts: Iterable[Artifact], source: bool = False) -> set[Path]:
        """Locate every artifact, logging and omitting the ones not found.

        A missing jar is never fatal to classpath computation.
        """
        kind = "doc jar" if source else "jar"

        result: set[Path] = set()
        for artifact in artifacts:
            found = self.locate(artifact, source)
            if found is not None:
                result.add(found)
            else:
                self.logger.warning(
                    f"Couldn't find {kind} for {artifact} in "
                    f"{self.roots.maven_home} or {self.roots.gradle_home}"
                )
        return result
