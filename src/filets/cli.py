"""CLI commands using Typer."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from filets import __version__
from filets.console import Output
from filets.directories import (
    copy_directory,
    create_directory,
    ensure_directory_exists,
    get_directory_contents,
    move_directory,
    remove_directory,
)
from filets.errors import FiletsError
from filets.files import copy_file, move_file, read_text_file, remove_file
from filets.predicates import directory_exists, file_exists, get_file_stats, is_writable
from filets.search import find_directories, find_files
from filets.validation import sanitize_filename

app = typer.Typer(
    name="filets",
    help="File and path convenience helpers",
    no_args_is_help=True,
)

console = Console()
output = Output(console)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"filets v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Send library debug logs to stderr through rich."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log every filesystem call")
    ] = False,
) -> None:
    """File and path convenience helpers."""
    _configure_logging(verbose)


def _fail(error: FiletsError) -> typer.Exit:
    """Report an operation error and build the exit to raise."""
    output.show_error(str(error))
    return typer.Exit(1)


# ============================================================================
# Query Commands
# ============================================================================


@app.command()
def info(
    path: Annotated[str, typer.Argument(help="File or directory")],
    _fs=None,
) -> None:
    """Show size, type and timestamps of a path."""
    try:
        stats = get_file_stats(path, fs=_fs)
    except FiletsError as e:
        raise _fail(e) from e
    output.show_stats(path, stats)


@app.command("ls")
def list_directory(
    path: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    _fs=None,
) -> None:
    """List the entries of one directory."""
    try:
        names = get_directory_contents(path, fs=_fs)
    except FiletsError as e:
        raise _fail(e) from e
    output.show_names(names, f"No entries in {path}")


@app.command()
def find(
    path: Annotated[str, typer.Argument(help="Directory to search")],
    pattern: Annotated[
        str | None, typer.Argument(help="Substring the name must contain")
    ] = None,
    dirs: Annotated[
        bool, typer.Option("--dirs", "-d", help="Find directories instead of files")
    ] = False,
    _fs=None,
) -> None:
    """Search a directory tree by name substring."""
    try:
        if dirs:
            found = find_directories(path, pattern, fs=_fs)
        else:
            found = find_files(path, pattern, fs=_fs)
    except FiletsError as e:
        raise _fail(e) from e
    output.show_names(found, "No matches")


@app.command()
def cat(
    path: Annotated[str, typer.Argument(help="Text file to print")],
    _fs=None,
) -> None:
    """Print a UTF-8 text file."""
    try:
        content = read_text_file(path, fs=_fs)
    except FiletsError as e:
        raise _fail(e) from e
    output.show_text(content)


@app.command()
def writable(
    path: Annotated[str, typer.Argument(help="Directory to probe")],
    _fs=None,
) -> None:
    """Check whether files can be created in a directory."""
    if is_writable(path, fs=_fs):
        output.show_success(f"{path} is writable")
    else:
        output.show_error(f"{path} is not writable")
        raise typer.Exit(1)


@app.command()
def sanitize(
    name: Annotated[str, typer.Argument(help="Name to sanitize")],
) -> None:
    """Print a filesystem-safe version of a name."""
    console.print(sanitize_filename(name), markup=False, highlight=False)


# ============================================================================
# Mutating Commands
# ============================================================================


@app.command()
def mkdir(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    strict: Annotated[
        bool, typer.Option("--strict", help="Fail if the directory already exists")
    ] = False,
    _fs=None,
) -> None:
    """Create a directory and any missing parents."""
    try:
        if strict:
            create_directory(path, fs=_fs)
        else:
            ensure_directory_exists(path, fs=_fs)
    except FiletsError as e:
        raise _fail(e) from e
    output.show_success(f"Created {path}")


@app.command()
def rm(
    path: Annotated[str, typer.Argument(help="File or directory to remove")],
    _fs=None,
) -> None:
    """Remove a file or a whole directory tree."""
    if not file_exists(path, fs=_fs):
        output.show_info(f"Nothing to remove at {path}")
        return
    try:
        if directory_exists(path, fs=_fs):
            remove_directory(path, fs=_fs)
        else:
            remove_file(path, fs=_fs)
    except FiletsError as e:
        raise _fail(e) from e
    output.show_success(f"Removed {path}")


@app.command()
def cp(
    source: Annotated[str, typer.Argument(help="File or directory to copy")],
    dest: Annotated[str, typer.Argument(help="Destination path")],
    _fs=None,
) -> None:
    """Copy a file or a directory tree."""
    try:
        if directory_exists(source, fs=_fs):
            copy_directory(source, dest, fs=_fs)
        else:
            copy_file(source, dest, fs=_fs)
    except FiletsError as e:
        raise _fail(e) from e
    output.show_success(f"Copied {source} to {dest}")


@app.command()
def mv(
    source: Annotated[str, typer.Argument(help="File or directory to move")],
    dest: Annotated[str, typer.Argument(help="Destination path")],
    _fs=None,
) -> None:
    """Move a file or a directory tree."""
    try:
        if directory_exists(source, fs=_fs):
            move_directory(source, dest, fs=_fs)
        else:
            move_file(source, dest, fs=_fs)
    except FiletsError as e:
        raise _fail(e) from e
    output.show_success(f"Moved {source} to {dest}")


if __name__ == "__main__":
    app()
