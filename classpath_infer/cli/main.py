"""Main CLI entry point for classpath-infer."""

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

import click

from classpath_infer.cli.display import console, show_error, show_paths, show_strategy
from classpath_infer.core.exceptions.errors import ClasspathInferError
from classpath_infer.core.logger.logger import setup_logging
from classpath_infer.inference import InferConfig

FORMATS = click.Choice(["table", "plain", "json"])

path_option = click.option(
    "--path",
    "-p",
    required=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Workspace root",
)
external_dep_option = click.option(
    "--external-dep",
    "-e",
    "external_deps",
    multiple=True,
    help="group:artifact:version to resolve instead of the build files (repeatable)",
)
format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=FORMATS,
    default="table",
    help="Output format",
)


def build_config(path: Path, external_deps: Iterable[str]) -> InferConfig:
    """Create the InferConfig for a CLI invocation."""
    return InferConfig(path, external_dependencies=list(external_deps))


def emit_paths(title: str, paths: set[Path], output_format: str) -> None:
    """Print classpath entries in the requested format."""
    entries = sorted(paths)
    if output_format == "plain":
        click.echo(os.pathsep.join(str(p) for p in entries))
    elif output_format == "json":
        click.echo(json.dumps([str(p) for p in entries], indent=2))
    else:
        show_paths(title, entries)


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, version: bool, verbose: bool) -> None:
    """classpath-infer - find the compile-time classpath of a Java workspace."""
    if version:
        from classpath_infer import __version__

        click.echo(f"classpath-infer version {__version__}")
        return

    if verbose:
        setup_logging()
        logging.getLogger().setLevel(logging.DEBUG)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@path_option
@external_dep_option
def detect(path: Path, external_deps: tuple[str, ...]) -> None:
    """Show which build system the workspace is resolved with.

    Example:
        classpath-infer detect --path /path/to/project
    """
    config = build_config(path, external_deps)
    show_strategy(config.workspace_root, config.strategy_kind())


@main.command()
@path_option
@external_dep_option
@click.option("--library", is_flag=True, help="Only third-party jars, no workspace output")
@format_option
def classpath(
    path: Path,
    external_deps: tuple[str, ...],
    library: bool,
    output_format: str,
) -> None:
    """Print the compile-time classpath of a workspace.

    Example:
        classpath-infer classpath --path /path/to/project --format plain
    """
    config = build_config(path, external_deps)
    try:
        paths = config.library_class_path() if library else config.class_path()
    except ClasspathInferError as e:
        show_error("Classpath Resolution Failed", str(e))
        raise SystemExit(1) from e

    emit_paths("Library Classpath" if library else "Classpath", paths, output_format)


@main.command()
@path_option
@external_dep_option
@format_option
def docpath(path: Path, external_deps: tuple[str, ...], output_format: str) -> None:
    """Print the source jars of the workspace's dependencies."""
    config = build_config(path, external_deps)
    try:
        paths = config.doc_path()
    except ClasspathInferError as e:
        show_error("Doc Path Resolution Failed", str(e))
        raise SystemExit(1) from e

    emit_paths("Source Jars", paths, output_format)


@main.command()
@path_option
@external_dep_option
@click.option("--output", "-o", "output_path", type=click.Path(path_type=Path), help="Output file for JSON report")
def report(path: Path, external_deps: tuple[str, ...], output_path: Path | None) -> None:
    """Resolve everything and write a JSON report.

    Example:
        classpath-infer report --path /path/to/project --output classpath.json
    """
    config = build_config(path, external_deps)
    try:
        data = config.report().to_dict()
    except ClasspathInferError as e:
        show_error("Classpath Resolution Failed", str(e))
        raise SystemExit(1) from e

    content = json.dumps(data, indent=2)
    if output_path:
        output_path.write_text(content + "\n", encoding="utf-8")
        console.print(f"[green]Report written to {output_path}[/]")
    else:
        click.echo(content)


if __name__ == "__main__":
    main()
