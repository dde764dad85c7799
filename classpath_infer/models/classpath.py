"""Classpath-resolution data models."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class StrategyKind(str, Enum):
    """Build systems a workspace can be resolved with."""

    EXTERNAL_DEPS = "external_deps"
    MAVEN = "maven"
    BAZEL = "bazel"
    GRADLE = "gradle"
    NONE = "none"


class CacheState(str, Enum):
    """Lifecycle of the dependency classpath cache."""

    UNINITIALIZED = "uninitialized"
    COMPUTING = "computing"
    CACHED = "cached"


class ClasspathReport(BaseModel):
    """Everything resolved for one workspace."""

    workspace_root: Path = Field(description="Workspace that was resolved")
    strategy: StrategyKind = Field(description="Build system used for resolution")
    class_path: list[Path] = Field(default_factory=list)
    library_class_path: list[Path] = Field(default_factory=list)
    doc_path: list[Path] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "workspace_root": str(self.workspace_root),
            "strategy": self.strategy.value,
            "class_path": [str(p) for p in self.class_path],
            "library_class_path": [str(p) for p in self.library_class_path],
            "doc_path": [str(p) for p in self.doc_path],
        }
