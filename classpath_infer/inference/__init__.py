"""Classpath inference for Maven, Gradle and Bazel workspaces.

This module provides:
- Build system detection
- Dependency listing through the build tool
- Jar lookup in local Maven and Gradle repositories
- Discovery of compiled output on disk
"""

from classpath_infer.inference.detector import BuildSystemDetector, detect_build_system
from classpath_infer.inference.gradle import GradleProject
from classpath_infer.inference.infer_config import InferConfig
from classpath_infer.inference.locator import ArtifactLocator
from classpath_infer.inference.maven import (
    CommandResult,
    MavenDependencyLister,
    parse_dependency_list,
)
from classpath_infer.inference.scanner import FilesystemOutputScanner
from classpath_infer.inference.strategies import (
    BazelStrategy,
    ClasspathStrategy,
    ExternalDependenciesStrategy,
    GradleStrategy,
    MavenStrategy,
    NoBuildSystemStrategy,
    ResolutionContext,
    strategy_for,
)

__all__ = [
    "InferConfig",
    "BuildSystemDetector",
    "detect_build_system",
    "ArtifactLocator",
    "MavenDependencyLister",
    "CommandResult",
    "parse_dependency_list",
    "FilesystemOutputScanner",
    "GradleProject",
    "ClasspathStrategy",
    "ResolutionContext",
    "ExternalDependenciesStrategy",
    "MavenStrategy",
    "BazelStrategy",
    "GradleStrategy",
    "NoBuildSystemStrategy",
    "strategy_for",
]
