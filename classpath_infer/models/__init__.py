"""Data models module."""

from classpath_infer.models.artifact import Artifact, RepositoryRoots
from classpath_infer.models.classpath import CacheState, ClasspathReport, StrategyKind

__all__ = [
    "Artifact",
    "RepositoryRoots",
    "StrategyKind",
    "CacheState",
    "ClasspathReport",
]
