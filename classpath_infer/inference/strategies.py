"""Classpath resolution strategies, one per build system."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from classpath_infer.inference.gradle import GradleProject
from classpath_infer.inference.locator import ArtifactLocator
from classpath_infer.inference.maven import MavenDependencyLister
from classpath_infer.inference.scanner import FilesystemOutputScanner
from classpath_infer.models.artifact import Artifact, RepositoryRoots
from classpath_infer.models.classpath import StrategyKind


@dataclass
class ResolutionContext:
    """Everything a strategy needs to resolve one workspace.

    Attributes:
        workspace_root: Workspace being resolved.
        roots: Maven and Gradle repository homes.
        external_dependencies: User-supplied ``group:artifact:version`` ids.
        listed_dependencies: Maven listing kept for reuse.
        reuse_listing: Share one Maven listing between the dependency and
            doc paths, as a single report does.
        locator: Jar lookup in the local repositories.
        lister: Maven dependency lister.
        scanner: Compiled-output and generated-jar scanner.
        gradle: Gradle collaborator.
        logger: Diagnostics sink.
    """

    workspace_root: Path
    roots: RepositoryRoots
    locator: ArtifactLocator
    lister: MavenDependencyLister
    scanner: FilesystemOutputScanner
    gradle: GradleProject
    logger: logging.Logger
    external_dependencies: list[str] = field(default_factory=list)
    listed_dependencies: set[Artifact] | None = None
    reuse_listing: bool = False

    def maven_dependencies(self) -> set[Artifact]:
        """Run the Maven listing, at most once when ``reuse_listing`` is set."""
        if self.reuse_listing and self.listed_dependencies is not None:
            return self.listed_dependencies
        listed = self.lister.list_maven_dependencies(self.workspace_root)
        if self.reuse_listing:
            self.listed_dependencies = listed
        return listed


class ClasspathStrategy(ABC):
    """Resolves the classpath of one kind of workspace."""

    kind: StrategyKind

    @abstractmethod
    def dependency_class_path(self, ctx: ResolutionContext) -> set[Path]:
        """Third-party jars (the expensive, cacheable part)."""

    def workspace_class_path(self, ctx: ResolutionContext) -> set[Path]:
        """Compiled output inside the workspace."""
        return set()

    def doc_path(self, ctx: ResolutionContext) -> set[Path]:
        """Source jars for the dependencies."""
        return set()


class ExternalDependenciesStrategy(ClasspathStrategy):
    """Coordinates given explicitly by the user; no build files consulted."""

    kind = StrategyKind.EXTERNAL_DEPS

    def _artifacts(self, ctx: ResolutionContext) -> list[Artifact]:
        return [Artifact.parse(coordinate) for coordinate in ctx.external_dependencies]

    def dependency_class_path(self, ctx: ResolutionContext) -> set[Path]:
        return ctx.locator.locate_all(self._artifacts(ctx))

    def doc_path(self, ctx: ResolutionContext) -> set[Path]:
        return ctx.locator.locate_all(self._artifacts(ctx), source=True)


class MavenStrategy(ClasspathStrategy):
    """``mvn dependency:list`` for jars, ``target/`` directories for workspace output."""

    kind = StrategyKind.MAVEN

    def dependency_class_path(self, ctx: ResolutionContext) -> set[Path]:
        artifacts = ctx.maven_dependencies()
        return ctx.locator.locate_all(sorted(artifacts, key=str))

    def workspace_class_path(self, ctx: ResolutionContext) -> set[Path]:
        return ctx.scanner.scan(ctx.workspace_root)

    def doc_path(self, ctx: ResolutionContext) -> set[Path]:
        artifacts = ctx.maven_dependencies()
        return ctx.locator.locate_all(sorted(artifacts, key=str), source=True)


class BazelStrategy(ClasspathStrategy):
    """Jars from ``bazel-genfiles``, class directories from ``bazel-bin``.

    Bazel has no source jar lookup, so doc_path is always empty.
    """

    kind = StrategyKind.BAZEL

    def dependency_class_path(self, ctx: ResolutionContext) -> set[Path]:
        genfiles = ctx.workspace_root / "bazel-genfiles"
        if not (genfiles.exists() and genfiles.is_symlink()):
            return set()
        return ctx.scanner.scan_bazel_genfiles(genfiles)

    def workspace_class_path(self, ctx: ResolutionContext) -> set[Path]:
        bazel_bin = ctx.workspace_root / "bazel-bin"
        if not (bazel_bin.exists() and bazel_bin.is_symlink()):
            return set()
        return ctx.scanner.scan_bazel_javac(bazel_bin, ctx.workspace_root)


class GradleStrategy(ClasspathStrategy):
    """Delegates wholesale to the Gradle collaborator."""

    kind = StrategyKind.GRADLE

    def dependency_class_path(self, ctx: ResolutionContext) -> set[Path]:
        return ctx.gradle.gradle_build_class_path(ctx.workspace_root, ctx.roots.gradle_home)

    def workspace_class_path(self, ctx: ResolutionContext) -> set[Path]:
        return ctx.gradle.workspace_class_path(ctx.workspace_root)

    def doc_path(self, ctx: ResolutionContext) -> set[Path]:
        result: set[Path] = set()
        for artifact in ctx.gradle.gradle_dependencies(ctx.workspace_root):
            jar = ctx.gradle.find_gradle_jar(
                ctx.roots.gradle_home, artifact, True, ctx.workspace_root
            )
            if jar is not None:
                result.add(jar)
            else:
                ctx.logger.warning(
                    f"Couldn't find doc jar for {artifact} in {ctx.roots.gradle_home}"
                )
        return result


class NoBuildSystemStrategy(ClasspathStrategy):
    """No recognised build system: an empty classpath, not an error."""

    kind = StrategyKind.NONE

    def dependency_class_path(self, ctx: ResolutionContext) -> set[Path]:
        return set()


STRATEGIES: dict[StrategyKind, type[ClasspathStrategy]] = {
    StrategyKind.EXTERNAL_DEPS: ExternalDependenciesStrategy,
    StrategyKind.MAVEN: MavenStrategy,
    StrategyKind.BAZEL: BazelStrategy,
    StrategyKind.GRADLE: GradleStrategy,
    StrategyKind.NONE: NoBuildSystemStrategy,
}


def strategy_for(kind: StrategyKind) -> ClasspathStrategy:
    """Instantiate the strategy for a detected build system."""
    return STRATEGIES[kind]()
