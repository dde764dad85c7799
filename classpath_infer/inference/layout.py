"""On-disk repository conventions for Maven and Gradle.

Pure path arithmetic plus executable lookup; nothing here checks whether a
jar actually exists.
"""

import os
from pathlib import Path

from classpath_infer.core.exceptions.errors import DependencyListingError
from classpath_infer.models.artifact import Artifact

GRADLE_FILES_CACHE = Path("caches") / "modules-2" / "files-2.1"


def jar_file_name(artifact: Artifact, source: bool = False) -> str:
    """Return ``<artifactId>-<version>[-sources].jar``."""
    suffix = "-sources" if source else ""
    return f"{artifact.artifact_id}-{artifact.version}{suffix}.jar"


def jar_or_aar_names(artifact: Artifact, source: bool = False) -> tuple[str, str]:
    """Return the ``.jar`` and ``.aar`` file names Gradle may have cached."""
    jar = jar_file_name(artifact, source)
    return jar, jar[: -len(".jar")] + ".aar"


def maven_jar_path(maven_home: Path, artifact: Artifact, source: bool = False) -> Path:
    """Expected jar location inside a Maven local repository.

    ``<maven_home>/repository/<group/as/dirs>/<artifactId>/<version>/<file>``
    """
    return (
        maven_home
        / "repository"
        / artifact.group_path
        / artifact.artifact_id
        / artifact.version
        / jar_file_name(artifact, source)
    )


def gradle_artifact_dir(gradle_home: Path, artifact: Artifact) -> Path:
    """Directory holding the per-checksum subdirectories of a Gradle-cached artifact.

    Unlike Maven, Gradle keeps the groupId dotted.
    """
    return (
        gradle_home
        / GRADLE_FILES_CACHE
        / artifact.group_id
        / artifact.artifact_id
        / artifact.version
    )


def find_executable_on_path(name: str, path: str | None = None) -> str | None:
    """Find an executable regular file named ``name`` on PATH.

    Args:
        name: File name to look for.
        path: Search path; defaults to the PATH environment variable.

    Returns:
        Absolute path of the first match, or None.
    """
    search = path if path is not None else os.environ.get("PATH", "")
    for dirname in search.split(os.pathsep):
        if not dirname:
            continue
        candidate = Path(dirname) / name
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return str(candidate.absolute())
    return None


def maven_command(executable: str | None = None) -> str:
    """Return the Maven executable to launch.

    On platforms with a backslash path separator the ``mvn.cmd`` or
    ``mvn.bat`` wrapper has to be located on PATH explicitly.

    Raises:
        DependencyListingError: If no Maven wrapper is found on such a platform.
    """
    if executable:
        return executable

    if os.sep != "\\":
        return "mvn"

    for name in ("mvn.cmd", "mvn.bat"):
        found = find_executable_on_path(name)
        if found:
            return found

    raise DependencyListingError("Could not find mvn.cmd or mvn.bat on PATH")
