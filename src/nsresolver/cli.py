"""Command-line interface for the PHP namespace resolver."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

import click

from nsresolver import __version__
from nsresolver.commands import Resolver
from nsresolver.config import (
    ResolverConfig,
    find_project_root,
    load_config,
    save_config,
    set_config_value,
)
from nsresolver.exceptions import ConfigError
from nsresolver.ui.console import Console
from nsresolver.workspace import FileSystemHost, parse_selection

console = Console()

file_argument = click.argument(
    "file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
path_option = click.option("--path", "-p", default=None, help="Path to the workspace root.")
dry_run_option = click.option(
    "--dry-run", is_flag=True, help="Print the resulting file instead of writing it."
)
line_option = click.option("--line", "-l", type=int, default=None, help="Cursor line (1-based).")
column_option = click.option(
    "--column", "-c", type=int, default=None, help="Cursor column (1-based)."
)


def _get_workspace_root(file: Path, path: str | None = None) -> Path | None:
    """The workspace root: --path, a .nsresolver project, or the cwd when it holds the file."""
    if path:
        root = Path(path).resolve()
        if not root.is_dir():
            console.error(f"Path does not exist: {path}")
            sys.exit(1)
        return root

    root = find_project_root(file.resolve().parent)
    if root is not None:
        return root

    cwd = Path.cwd().resolve()
    if file.resolve().is_relative_to(cwd):
        return cwd
    return None


def _load_config(root: Path | None) -> ResolverConfig:
    if root is None:
        return ResolverConfig()
    try:
        return load_config(root)
    except ConfigError as e:
        console.error(str(e))
        sys.exit(1)


def _run(host: FileSystemHost, config: ResolverConfig, command: str) -> None:
    """Run one resolver command and report how it went."""
    resolver = Resolver(host, config)
    asyncio.run(getattr(resolver, command)())

    if host.dry_run:
        console.code(host.document().text)
    if resolver.errors:
        sys.exit(1)


def _make_host(
    file: Path,
    path: str | None,
    dry_run: bool,
    names: tuple[str, ...] = (),
    line: int | None = None,
    column: int | None = None,
) -> tuple[FileSystemHost, ResolverConfig]:
    root = _get_workspace_root(file, path)
    config = _load_config(root)
    selections: list = list(names)
    cursor = parse_selection(line, column)
    if cursor is not None:
        selections.append(cursor)
    host = FileSystemHost(file, root, console, selections=selections, dry_run=dry_run)
    return host, config


@click.group()
@click.version_option(version=__version__, prog_name="nsresolver")
@click.option("--verbose", "-v", is_flag=True, help="Log resolver decisions.")
def main(verbose: bool):
    """PHP Namespace Resolver - import, expand and sort PHP class references."""
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console.console, show_path=False)],
        )


@main.command("import")
@file_argument
@click.argument("names", nargs=-1)
@line_option
@column_option
@path_option
@dry_run_option
def import_cmd(
    file: Path,
    names: tuple[str, ...],
    line: int | None,
    column: int | None,
    path: str | None,
    dry_run: bool,
):
    """Import classes by name or the class under the cursor.

    Examples:

        nsresolver import src/Http/Kernel.php Request

        nsresolver import src/Http/Kernel.php --line 12 --column 20
    """
    host, config = _make_host(file, path, dry_run, names, line, column)
    if not host.selections():
        console.error("No class is selected.")
        sys.exit(1)
    _run(host, config, "import_selections")


@main.command("import-all")
@file_argument
@path_option
@dry_run_option
def import_all(file: Path, path: str | None, dry_run: bool):
    """Import every class referenced in FILE that is not imported yet."""
    host, config = _make_host(file, path, dry_run)
    _run(host, config, "import_all")


@main.command()
@file_argument
@line_option
@column_option
@path_option
@dry_run_option
def expand(
    file: Path,
    line: int | None,
    column: int | None,
    path: str | None,
    dry_run: bool,
):
    """Replace the class under the cursor with its fully qualified name.

    Examples:

        nsresolver expand src/Http/Kernel.php --line 12 --column 20
    """
    host, config = _make_host(file, path, dry_run, line=line, column=column)
    if not host.selections():
        console.error("No class is selected.")
        sys.exit(1)
    _run(host, config, "expand_selections")


@main.command()
@file_argument
@path_option
@dry_run_option
def sort(file: Path, path: str | None, dry_run: bool):
    """Sort the use statements of FILE."""
    host, config = _make_host(file, path, dry_run)
    _run(host, config, "sort_imports")


@main.command()
@file_argument
@path_option
@dry_run_option
def namespace(file: Path, path: str | None, dry_run: bool):
    """Write the PSR-4 namespace of FILE from the nearest composer.json."""
    host, config = _make_host(file, path, dry_run)
    _run(host, config, "generate_namespace")


# =========================================================================
# Config Management
# =========================================================================

@main.command("config")
@click.argument("action", type=click.Choice(["set", "get", "show"]))
@click.argument("key", required=False)
@click.argument("value", required=False)
@click.option("--path", "-p", default=".", help="Path to the workspace root.")
def config_cmd(action: str, key: str | None, value: str | None, path: str):
    """Manage resolver configuration."""
    root = Path(path).resolve()
    config = _load_config(root)

    if action == "show":
        console.console.print_json(json.dumps(config.model_dump(by_alias=True), indent=2))
    elif action == "get":
        if not key:
            console.error("Usage: nsresolver config get <key>")
            sys.exit(1)
        try:
            console.console.print(f"{key} = {config.get(key)}")
        except KeyError:
            console.error(f"Unknown key: {key}")
            sys.exit(1)
    elif action == "set":
        if not key or value is None:
            console.error("Usage: nsresolver config set <key> <value>")
            sys.exit(1)
        try:
            # Try to parse as JSON for non-string values
            try:
                parsed_value = json.loads(value)
            except json.JSONDecodeError:
                parsed_value = value

            config = set_config_value(config, key, parsed_value)
            save_config(root, config)
            console.success(f"Set {key} = {parsed_value}")
        except KeyError:
            console.error(f"Unknown config key: {key}")
            sys.exit(1)
        except ConfigError as e:
            console.error(str(e))
            sys.exit(1)


if __name__ == "__main__":
    main()
