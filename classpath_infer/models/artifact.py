"""Artifact and repository-location data models."""

import os
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from classpath_infer.core.exceptions.errors import ArtifactParseError

# `mvn dependency:list` entry: two spaces, then group:artifact:type:version:scope.
# The fields are greedy, so surplus colons end up in the leading fields.
DEPENDENCY_LIST_PATTERN = re.compile(r"\s{2}(\S+):(\S+):(\S+):(\S+):(\S+)")


class Artifact(BaseModel):
    """A Maven coordinate identifying a published Java library.

    Instances are immutable and compare and hash structurally.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str = Field(..., min_length=1, description="Maven groupId")
    artifact_id: str = Field(..., min_length=1, description="Maven artifactId")
    version: str = Field(..., min_length=1, description="Artifact version")

    @classmethod
    def parse(cls, coordinate: str) -> "Artifact":
        """Parse a user-supplied ``group:artifact:version`` id.

        Args:
            coordinate: Colon-delimited coordinate string.

        Returns:
            Parsed artifact.

        Raises:
            ArtifactParseError: If the string does not have three non-empty fields.
        """
        parts = coordinate.strip().split(":")
        if len(parts) != 3:
            raise ArtifactParseError(
                f"{coordinate!r} is not a properly formed Maven/Gradle artifact",
                coordinate=coordinate,
            )

        try:
            return cls(group_id=parts[0], artifact_id=parts[1], version=parts[2])
        except ValidationError as e:
            raise ArtifactParseError(
                f"{coordinate!r} has an empty coordinate field",
                coordinate=coordinate,
                details={"error": str(e)},
            ) from e

    @classmethod
    def from_dependency_list_line(cls, line: str) -> "Artifact | None":
        """Parse one line of ``mvn dependency:list`` output.

        Returns None for lines that are not dependency entries.
        """
        match = DEPENDENCY_LIST_PATTERN.search(line)
        if not match:
            return None

        group_id, artifact_id, _type, version, _scope = match.groups()
        return cls(group_id=group_id, artifact_id=artifact_id, version=version)

    @property
    def group_path(self) -> str:
        """groupId with dots replaced by the platform path separator."""
        return self.group_id.replace(".", os.sep)

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


def _default_gradle_home() -> Path:
    gradle_user_home = os.environ.get("GRADLE_USER_HOME")
    if gradle_user_home and Path(gradle_user_home).is_dir():
        return Path(gradle_user_home)

    return Path.home() / ".gradle"


class RepositoryRoots(BaseModel):
    """Local Maven and Gradle repository locations."""

    model_config = ConfigDict(frozen=True)

    maven_home: Path = Field(description="Maven home, usually ~/.m2")
    gradle_home: Path = Field(description="Gradle user home, usually ~/.gradle")

    @classmethod
    def default(
        cls,
        maven_home: Path | None = None,
        gradle_home: Path | None = None,
    ) -> "RepositoryRoots":
        """Build repository roots, filling unset homes from the environment.

        Args:
            maven_home: Explicit Maven home. Defaults to ``$HOME/.m2``.
            gradle_home: Explicit Gradle home. Defaults to ``$GRADLE_USER_HOME``
                when it names an existing directory, else ``$HOME/.gradle``.
        """
        return cls(
            maven_home=maven_home or Path.home() / ".m2",
            gradle_home=gradle_home or _default_gradle_home(),
        )
