"""Discovery of compiled output directories and generated jars on disk."""

import fnmatch
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from classpath_infer.core.exceptions.errors import WorkspaceScanError
from classpath_infer.core.logger.logger import get_logger

JAVAC_DIR = "_javac"
JAVAC_CLASSES_GLOB = "lib*_classes"


def walk_tree(root: Path) -> Iterator[tuple[Path, list[str], list[str]]]:
    """os.walk that raises instead of silently skipping unreadable directories."""

    def fail(error: OSError) -> None:
        raise WorkspaceScanError(
            f"Failed to read directory during scan: {error}",
            path=error.filename,
        ) from error

    for dirpath, dirnames, filenames in os.walk(root, onerror=fail):
        yield Path(dirpath), dirnames, filenames


def _resolve_link(link: Path) -> Path:
    try:
        return link.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise WorkspaceScanError(
            f"Failed to resolve symbolic link {link}: {e}",
            path=str(link),
        ) from e


class FilesystemOutputScanner:
    """Walks workspace and Bazel output trees for classpath entries.

    Any I/O failure is raised as WorkspaceScanError; partial results are
    never returned.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger(__name__)

    def scan(self, workspace_root: Path) -> set[Path]:
        """Maven compiled output of every module in the workspace.

        For each ``pom.xml`` with a sibling ``target`` directory, emits
        ``target/classes`` and ``target/test-classes`` whether or not they
        exist.
        """
        result: set[Path] = set()
        for dirpath, dirnames, filenames in walk_tree(workspace_root):
            if "pom.xml" not in filenames:
                continue
            target = dirpath / "target"
            if target.is_dir():
                result.add(target / "classes")
                result.add(target / "test-classes")
        return result

    def scan_bazel_javac(self, bazel_output_root: Path, workspace_root: Path) -> set[Path]:
        """Per-package javac output under ``bazel-bin``.

        Matches ``<pkg>/_javac/**/lib*_classes``. Only descends into child
        directories that also exist in the real workspace, so Bazel's
        internal directories are never traversed.

        Args:
            bazel_output_root: The ``bazel-bin`` symlink (or its target).
            workspace_root: The real workspace tree to mirror.
        """
        bazel_root = _resolve_link(bazel_output_root)
        self.logger.info(f"Searching for bazel output directories in {bazel_root}")

        result: set[Path] = set()
        pending: list[tuple[Path, Path]] = [(bazel_root, workspace_root)]
        while pending:
            bazel_dir, real_dir = pending.pop()

            javac = bazel_dir / JAVAC_DIR
            if javac.is_dir():
                result.update(self._javac_class_dirs(javac))

            for name in self._list_dir(bazel_dir):
                bazel_child = bazel_dir / name
                real_child = real_dir / name
                if bazel_child.is_dir() and real_child.is_dir():
                    pending.append((bazel_child, real_child))

        self.logger.info(f"Found {len(result)} bazel output directories")
        return result

    def scan_bazel_genfiles(self, bazel_genfiles_root: Path) -> set[Path]:
        """Every ``*.jar`` below the ``bazel-genfiles`` symlink's target."""
        target = _resolve_link(bazel_genfiles_root)
        self.logger.info(f"Looking for bazel generated files in {target}")

        result: set[Path] = set()
        for dirpath, dirnames, filenames in walk_tree(target):
            for name in dirnames + filenames:
                if name.endswith(".jar"):
                    result.add(dirpath / name)

        self.logger.info(f"Found {len(result)} generated jars")
        return result

    def _javac_class_dirs(self, javac: Path) -> Iterator[Path]:
        for dirpath, dirnames, _filenames in walk_tree(javac):
            for name in dirnames:
                if fnmatch.fnmatchcase(name, JAVAC_CLASSES_GLOB):
                    yield dirpath / name

    def _list_dir(self, directory: Path) -> list[str]:
        try:
            return sorted(os.listdir(directory))
        except OSError as e:
            raise WorkspaceScanError(
                f"Failed to list directory {directory}: {e}",
                path=str(directory),
            ) from e
