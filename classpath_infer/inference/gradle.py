"""File-based Gradle resolver.

Reads coordinates straight out of ``build.gradle`` / ``build.gradle.kts``
and looks them up in the Gradle user home's module cache. Gradle itself is
never launched.
"""

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from classpath_infer.core.exceptions.errors import WorkspaceScanError
from classpath_infer.core.logger.logger import get_logger
from classpath_infer.inference.layout import gradle_artifact_dir, jar_or_aar_names
from classpath_infer.inference.scanner import walk_tree
from classpath_infer.models.artifact import Artifact

GRADLE_MARKERS = (
    "build.gradle",
    "build.gradle.kts",
    "settings.gradle",
    "settings.gradle.kts",
    "gradlew",
)

BUILD_FILES = ("build.gradle", "build.gradle.kts")

# Directories never searched for build files
SKIP_DIRS = {"build", ".gradle", ".git", "node_modules", "out"}

# Compiled output of the java and kotlin plugins, relative to a module's build/
OUTPUT_DIRS = (
    Path("classes") / "java" / "main",
    Path("classes") / "java" / "test",
    Path("classes") / "kotlin" / "main",
    Path("classes") / "kotlin" / "test",
    Path("resources") / "main",
)

STRING_NOTATION = re.compile(
    r"""['"](?P<group>[^:'"\s]+):(?P<artifact>[^:'"\s]+):(?P<version>[^'"\s]+)['"]"""
)
PROPERTY_REFERENCE = re.compile(r"\$\{?(\w+)\}?")


class GradleProject:
    """Gradle collaborator: project detection, dependencies and cached jars.

    An unreadable directory or build file raises WorkspaceScanError.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger(__name__)

    def has_gradle_project(self, root: Path) -> bool:
        """Check whether the workspace root is a Gradle build."""
        return any((root / marker).exists() for marker in GRADLE_MARKERS)

    def workspace_class_path(self, root: Path) -> set[Path]:
        """Compiled-output directories of every Gradle module in the workspace.

        Entries are emitted for every module with a ``build`` directory,
        whether or not the individual output directories exist.
        """
        result: set[Path] = set()
        for build_file in self._build_files(root):
            build_dir = build_file.parent / "build"
            if build_dir.is_dir():
                result.update(build_dir / output for output in OUTPUT_DIRS)
        return result

    def gradle_build_class_path(self, root: Path, gradle_home: Path) -> set[Path]:
        """Cached jars for every dependency declared in the workspace."""
        result: set[Path] = set()
        for artifact in sorted(self.gradle_dependencies(root), key=str):
            jar = self.find_gradle_jar(gradle_home, artifact, False, root)
            if jar is not None:
                result.add(jar)
            else:
                self.logger.warning(f"Couldn't find jar for {artifact} in {gradle_home}")
        return result

    def gradle_dependencies(self, root: Path) -> set[Artifact]:
        """Collect string-notation dependencies from all build files."""
        properties = self._read_gradle_properties(root / "gradle.properties")

        dependencies: set[Artifact] = set()
        for build_file in self._build_files(root):
            dependencies.update(self._parse_build_file(build_file, properties))

        self.logger.info(f"Gradle Dependencies: {sorted(str(d) for d in dependencies)}")
        return dependencies

    def find_gradle_jar(
        self,
        gradle_home: Path,
        artifact: Artifact,
        source: bool,
        root: Path,
    ) -> Path | None:
        """Find a jar (or aar) for ``artifact`` in the Gradle module cache.

        Falls back to a flat ``libs/`` directory in the workspace root.
        """
        artifact_dir = gradle_artifact_dir(gradle_home, artifact)
        names = jar_or_aar_names(artifact, source)

        if artifact_dir.is_dir():
            for name in names:
                matches = sorted(artifact_dir.glob(f"*/{name}"))
                if matches:
                    return matches[0]

        for name in names:
            local = root / "libs" / name
            if local.is_file():
                return local

        return None

    def _build_files(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in walk_tree(root):
            dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
            for name in BUILD_FILES:
                if name in filenames:
                    yield dirpath / name

    def _read_gradle_properties(self, path: Path) -> dict[str, str]:
        properties: dict[str, str] = {}
        if not path.is_file():
            return properties

        content = _read_text(path)

        for line in content.splitlines():
            line = line.strip()
            if not line or line.startswith(("#", "!")) or "=" not in line:
                continue
            key, value = line.split("=", 1)
            properties[key.strip()] = value.strip()
        return properties

    def _parse_build_file(
        self, build_file: Path, inherited: dict[str, str]
    ) -> list[Artifact]:
        content = _read_text(build_file)
        content = re.sub(r"//.*$", "", content, flags=re.MULTILINE)
        content = re.sub(r"/\*.*?\*/", "", content, flags=re.DOTALL)

        properties = dict(inherited)
        properties.update(self._extract_properties(content))

        artifacts: list[Artifact] = []
        for block in _dependency_blocks(content):
            for match in STRING_NOTATION.finditer(block):
                artifact = self._resolve_coordinate(match, properties)
                if artifact is not None:
                    artifacts.append(artifact)
        return artifacts

    def _extract_properties(self, content: str) -> dict[str, str]:
        """Variables usable in coordinates: ext blocks, ext.x, def/val x."""
        properties: dict[str, str] = {}

        for ext_block in re.finditer(r"\bext\s*\{(.*?)\}", content, re.DOTALL):
            for match in re.finditer(r"(\w+)\s*=\s*['\"]([^'\"]+)['\"]", ext_block.group(1)):
                properties[match.group(1)] = match.group(2)

        for pattern in (
            r"ext\.(\w+)\s*=\s*['\"]([^'\"]+)['\"]",
            r"\bdef\s+(\w+)\s*=\s*['\"]([^'\"]+)['\"]",
            r"\bval\s+(\w+)\s*=\s*\"([^\"]+)\"",
            r"extra\[\"(\w+)\"\]\s*=\s*\"([^\"]+)\"",
        ):
            for match in re.finditer(pattern, content):
                properties[match.group(1)] = match.group(2)

        return properties

    def _resolve_coordinate(
        self, match: re.Match, properties: dict[str, str]
    ) -> Artifact | None:
        def substitute(value: str) -> str:
            return PROPERTY_REFERENCE.sub(
                lambda m: properties.get(m.group(1), m.group(0)), value
            )

        group = substitute(match.group("group"))
        artifact_id = substitute(match.group("artifact"))
        # Drop classifiers (g:a:v:classifier) and artifact types (g:a:v@aar)
        version = substitute(match.group("version")).split(":")[0].split("@")[0]

        if "$" in group + artifact_id + version or not version:
            self.logger.debug(f"Skipping unresolved Gradle coordinate {match.group(0)}")
            return None

        return Artifact(group_id=group, artifact_id=artifact_id, version=version)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise WorkspaceScanError(f"Failed to read {path}: {e}", path=str(path)) from e


def _dependency_blocks(content: str) -> Iterator[str]:
    """Yield the bodies of all ``dependencies { ... }`` blocks, braces balanced."""
    for match in re.finditer(r"\bdependencies\s*\{", content):
        depth = 1
        start = match.end()
        pos = start
        while pos < len(content) and depth:
            if content[pos] == "{":
                depth += 1
            elif content[pos] == "}":
                depth -= 1
            pos += 1
        yield content[start : pos - 1]
