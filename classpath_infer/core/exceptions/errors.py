"""Custom exception definitions for classpath-infer."""

from typing import Any


class ClasspathInferError(Exception):
    """Base exception for all classpath-infer errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ArtifactParseError(ClasspathInferError, ValueError):
    """Exception raised when a dependency coordinate cannot be parsed."""

    def __init__(
        self,
        message: str,
        coordinate: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize artifact parse error.

        Args:
            message: Error message.
            coordinate: The coordinate string that failed to parse.
            details: Additional error details.
        """
        details = details or {}
        if coordinate is not None:
            details["coordinate"] = coordinate
        super().__init__(message, details)


class ClasspathResolutionError(ClasspathInferError):
    """A systemic failure while resolving a classpath.

    Raised to the caller of InferConfig; never absorbed by the engine.
    """


class DependencyListingError(ClasspathResolutionError):
    """Exception raised when the build tool's dependency listing fails."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        return_code: int | None = None,
        stderr: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dependency listing error.

        Args:
            message: Error message.
            command: Command line that was executed.
            return_code: Exit code of the process, if it ran.
            stderr: Standard error excerpt of the process.
            details: Additional error details.
        """
        details = details or {}
        if command:
            details["command"] = " ".join(command)
        if return_code is not None:
            details["return_code"] = return_code
        if stderr:
            details["stderr"] = stderr[:1000]
        super().__init__(message, details)


class WorkspaceScanError(ClasspathResolutionError):
    """Exception raised when a filesystem walk or symlink resolution fails."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize workspace scan error.

        Args:
            message: Error message.
            path: Path that could not be read.
            details: Additional error details.
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class ConfigurationError(ClasspathInferError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
