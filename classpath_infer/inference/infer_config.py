"""Classpath inference for a Java workspace.

InferConfig is the public entry point: it detects the workspace's build
system, resolves third-party jars once per instance and merges them with
the workspace's own compiled output.
"""

import dataclasses
import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from classpath_infer.core.config.settings import Settings, get_settings
from classpath_infer.core.logger.logger import get_logger
from classpath_infer.inference.detector import BuildSystemDetector
from classpath_infer.inference.gradle import GradleProject
from classpath_infer.inference.locator import ArtifactLocator
from classpath_infer.inference.maven import MavenDependencyLister
from classpath_infer.inference.scanner import FilesystemOutputScanner
from classpath_infer.inference.strategies import (
    ClasspathStrategy,
    ResolutionContext,
    strategy_for,
)
from classpath_infer.models.artifact import RepositoryRoots
from classpath_infer.models.classpath import CacheState, ClasspathReport, StrategyKind


class InferConfig:
    """Infers the compile-time classpath of one workspace.

    The dependency part of the classpath is computed at most once per
    instance and never invalidated. Concurrent first callers block until
    that single computation is done; later reads take no lock.
    """

    def __init__(
        self,
        workspace_root: Path | str,
        external_dependencies: Iterable[str] | None = None,
        maven_home: Path | None = None,
        gradle_home: Path | None = None,
        settings: Settings | None = None,
        lister: MavenDependencyLister | None = None,
        gradle: GradleProject | None = None,
        scanner: FilesystemOutputScanner | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize classpath inference for a workspace.

        Args:
            workspace_root: Root of the workspace to analyze.
            external_dependencies: ``group:artifact:version`` ids that, when
                given, replace build-file based detection entirely.
            maven_home: Maven home, overriding settings and ``~/.m2``.
            gradle_home: Gradle user home, overriding settings and the default.
            settings: Application settings; the global settings when None.
            lister: Maven dependency lister to use.
            gradle: Gradle collaborator to use.
            scanner: Filesystem scanner to use.
            logger: Diagnostics sink shared by every component.
        """
        settings = settings or get_settings()
        self.logger = logger or get_logger(__name__)

        self.workspace_root = Path(workspace_root).absolute()
        self.external_dependencies = list(external_dependencies or [])
        self.roots = RepositoryRoots.default(
            maven_home=maven_home or settings.inference.maven_home,
            gradle_home=gradle_home or settings.inference.gradle_home,
        )

        self.gradle = gradle or GradleProject(logger=self.logger)
        self.lister = lister or MavenDependencyLister(
            executable=settings.inference.maven_executable,
            goal=settings.inference.dependency_list_goal,
            timeout=settings.inference.dependency_list_timeout,
            logger=self.logger,
        )
        self.scanner = scanner or FilesystemOutputScanner(logger=self.logger)
        self.locator = ArtifactLocator(
            self.roots, self.workspace_root, gradle=self.gradle, logger=self.logger
        )
        self.detector = BuildSystemDetector(gradle=self.gradle)

        self._context = ResolutionContext(
            workspace_root=self.workspace_root,
            roots=self.roots,
            locator=self.locator,
            lister=self.lister,
            scanner=self.scanner,
            gradle=self.gradle,
            logger=self.logger,
            external_dependencies=self.external_dependencies,
        )

        self._cache_lock = threading.Lock()
        self._cache_state = CacheState.UNINITIALIZED
        self._cached_build_class_path: frozenset[Path] = frozenset()

    @property
    def cache_state(self) -> CacheState:
        return self._cache_state

    def strategy_kind(self) -> StrategyKind:
        """The build system this workspace is resolved with."""
        return self.detector.detect(self.workspace_root, self.external_dependencies)

    def _strategy(self) -> ClasspathStrategy:
        return strategy_for(self.strategy_kind())

    def class_path(self) -> set[Path]:
        """Dependency jars plus the workspace's compiled output directories.

        Entries may not exist on disk; consumers must tolerate that.

        Raises:
            ClasspathResolutionError: If dependency listing or a filesystem
                walk fails.
        """
        result = set(self.library_class_path())
        result.update(self.workspace_class_path())
        return result

    def library_class_path(self) -> set[Path]:
        """Third-party jars only, computed once and cached."""
        return self._library_class_path(self._context)

    def _library_class_path(self, ctx: ResolutionContext) -> set[Path]:
        if self._cache_state is CacheState.CACHED:
            return set(self._cached_build_class_path)

        with self._cache_lock:
            if self._cache_state is not CacheState.CACHED:
                self._cache_state = CacheState.COMPUTING
                try:
                    strategy = self._strategy()
                    self.logger.info(
                        f"Resolving dependencies of {self.workspace_root} "
                        f"with the {strategy.kind.value} strategy"
                    )
                    resolved = strategy.dependency_class_path(ctx)
                except Exception:
                    self._cache_state = CacheState.UNINITIALIZED
                    raise
                self._cached_build_class_path = frozenset(resolved)
                self._cache_state = CacheState.CACHED

        return set(self._cached_build_class_path)

    def workspace_class_path(self) -> set[Path]:
        """Directories of compiled classes inside the workspace.

        Recomputed on every call.
        """
        return self._strategy().workspace_class_path(self._context)

    def doc_path(self) -> set[Path]:
        """Source jars of the dependencies. Not cached; empty for Bazel."""
        return self._strategy().doc_path(self._context)

    def report(self) -> ClasspathReport:
        """Resolve everything and collect it into a report.

        The build tool is asked for the dependency list at most once per report.
        """
        ctx = dataclasses.replace(self._context, reuse_listing=True)
        strategy = self._strategy()

        library = self._library_class_path(ctx)
        workspace = strategy.workspace_class_path(ctx)
        return ClasspathReport(
            workspace_root=self.workspace_root,
            strategy=strategy.kind,
            class_path=sorted(library | workspace),
            library_class_path=sorted(library),
            doc_path=sorted(strategy.doc_path(ctx)),
        )
