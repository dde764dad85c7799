"""Exception definitions module."""

from classpath_infer.core.exceptions.errors import (
    ArtifactParseError,
    ClasspathInferError,
    ClasspathResolutionError,
    ConfigurationError,
    DependencyListingError,
    WorkspaceScanError,
)

__all__ = [
    "ClasspathInferError",
    "ArtifactParseError",
    "ClasspathResolutionError",
    "DependencyListingError",
    "WorkspaceScanError",
    "ConfigurationError",
]
