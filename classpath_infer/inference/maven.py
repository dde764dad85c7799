"""Dependency listing through the Maven command line.

Runs ``mvn dependency:list`` in the workspace and turns its resolved
dependency report into artifacts.
"""

import logging
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from classpath_infer.core.exceptions.errors import DependencyListingError
from classpath_infer.core.logger.logger import get_logger
from classpath_infer.inference.layout import maven_command
from classpath_infer.models.artifact import Artifact


@dataclass
class CommandResult:
    """Result of a dependency listing command.

    Attributes:
        command: The command line that was executed.
        return_code: Exit code of the process (-1 when it timed out).
        stdout: Standard output.
        stderr: Standard error.
        duration_seconds: Wall-clock time of the command.
        timed_out: Whether the command was killed after the timeout.
    """

    command: list[str]
    return_code: int = 0
    stdout: str = ""
    stderr: str = ""
    duration_seconds: float = 0.0
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.return_code == 0 and not self.timed_out

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "command": " ".join(self.command),
            "return_code": self.return_code,
            "duration_seconds": self.duration_seconds,
            "timed_out": self.timed_out,
        }


def parse_dependency_list(output: str) -> set[Artifact]:
    """Parse ``mvn dependency:list`` output.

    Lines that are not dependency entries (Maven's surrounding log noise)
    are ignored.
    """
    dependencies: dict[Artifact, None] = {}
    for line in output.splitlines():
        artifact = Artifact.from_dependency_list_line(line)
        if artifact is not None:
            dependencies[artifact] = None
    return set(dependencies)


class MavenDependencyLister:
    """Lists a Maven workspace's resolved dependencies."""

    def __init__(
        self,
        executable: str | None = None,
        goal: str = "dependency:list",
        timeout: int = 300,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the lister.

        Args:
            executable: Maven executable; platform default when None.
            goal: Maven goal that prints the dependency report.
            timeout: Maximum run time of the command in seconds.
            logger: Diagnostics sink.
        """
        self.executable = executable
        self.goal = goal
        self.timeout = timeout
        self.logger = logger or get_logger(__name__)

    def list_maven_dependencies(self, workspace_root: Path) -> set[Artifact]:
        """List the dependencies of the Maven project rooted at ``workspace_root``.

        Returns an empty set when there is no ``pom.xml`` or when the command
        times out.

        Raises:
            DependencyListingError: If Maven cannot be started or exits non-zero.
        """
        if not (workspace_root / "pom.xml").exists():
            return set()

        result = self.run(workspace_root)

        if result.timed_out:
            self.logger.warning(
                f"{' '.join(result.command)} timed out after {self.timeout}s; "
                f"no Maven dependencies listed"
            )
            return set()

        if not result.success:
            raise DependencyListingError(
                f"Maven dependency listing failed with code {result.return_code}",
                command=result.command,
                return_code=result.return_code,
                stderr=result.stderr or result.stdout[-1000:],
            )

        dependencies = parse_dependency_list(result.stdout)
        self.logger.info(f"Maven Dependencies: {sorted(str(d) for d in dependencies)}")
        return dependencies

    def run(self, workspace_root: Path) -> CommandResult:
        """Run the listing command in ``workspace_root``.

        Raises:
            DependencyListingError: If the process cannot be started.
        """
        command = [maven_command(self.executable), self.goal]
        self.logger.debug(f"Running {' '.join(command)} in {workspace_root}")

        start_time = time.time()
        try:
            completed = subprocess.run(
                command,
                cwd=workspace_root,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            return CommandResult(
                command=command,
                return_code=-1,
                stdout=_as_text(e.stdout),
                stderr=_as_text(e.stderr),
                duration_seconds=time.time() - start_time,
                timed_out=True,
            )
        except OSError as e:
            raise DependencyListingError(
                f"Could not start Maven: {e}",
                command=command,
            ) from e

        return CommandResult(
            command=command,
            return_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
            duration_seconds=time.time() - start_time,
        )


def _as_text(output: str | bytes | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output
