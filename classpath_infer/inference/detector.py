"""Build system detection for classpath inference.

Decides, from marker files in the workspace root, which resolution
strategy applies. The first match wins:

1. external dependencies were supplied
2. ``pom.xml`` (Maven)
3. ``WORKSPACE`` (Bazel)
4. a Gradle build
5. nothing recognised
"""

from collections.abc import Collection
from pathlib import Path

from classpath_infer.inference.gradle import GradleProject
from classpath_infer.models.classpath import StrategyKind


class BuildSystemDetector:
    """Detects the build system of a Java workspace."""

    def __init__(self, gradle: GradleProject | None = None) -> None:
        """Initialize the detector.

        Args:
            gradle: Gradle collaborator asked whether a Gradle project is present.
        """
        self.gradle = gradle or GradleProject()

    def detect(
        self,
        workspace_root: Path,
        external_dependencies: Collection[str] = (),
    ) -> StrategyKind:
        """Detect the strategy for a workspace.

        Args:
            workspace_root: Workspace root directory.
            external_dependencies: User-supplied coordinates; when non-empty
                they override every build file.

        Returns:
            The strategy kind to resolve with.
        """
        if external_dependencies:
            return StrategyKind.EXTERNAL_DEPS

        if (workspace_root / "pom.xml").exists():
            return StrategyKind.MAVEN

        if (workspace_root / "WORKSPACE").exists():
            return StrategyKind.BAZEL

        if self.gradle.has_gradle_project(workspace_root):
            return StrategyKind.GRADLE

        return StrategyKind.NONE


def detect_build_system(
    workspace_root: Path,
    external_dependencies: Collection[str] = (),
) -> StrategyKind:
    """Convenience function to detect the build system.

    Args:
        workspace_root: Workspace root directory.
        external_dependencies: User-supplied coordinates.

    Returns:
        The strategy kind to resolve with.
    """
    detector = BuildSystemDetector()
    return detector.detect(workspace_root, external_dependencies)
