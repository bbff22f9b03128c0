"""Command‑line interface for the **code_patcher** package.

The CLI exposes the bracket matcher, the range splicer and the block
patcher for use from shell scripts:

* ``match`` – print the offset of the bracket matching a given bracket.
* ``splice`` – replace an inclusive character range of a file.
* ``insert`` – insert a snippet at the start or end of a bracketed block.
* ``replace-body`` – replace the body of a bracketed block.
* ``render`` – render a ``str.format`` template into a file.

Implementation details
----------------------
* Uses **Typer** for argument parsing.
* File patching goes through :func:`code_patcher.core.patch_file`, so
  every command that writes supports ``--dry-run`` (print the unified
  diff only) and ``--backup``.
* The global ``--config`` option loads a JSON config via
  :func:`code_patcher.main.load_config`; ``--debug`` turns on DEBUG logs.
* Package errors are printed to stderr and exit with status 1.
"""

import logging
from functools import partial
from pathlib import Path
from typing import List, Optional

import click
import typer

from code_patcher.core import PatchResult, insert_into_block, patch_file, replace_block_body
from code_patcher.exceptions import CodePatcherError
from code_patcher.file_generator import create_from_template, read_file
from code_patcher.main import load_config, setup_logging
from code_patcher.utils.match_brackets import find_matching_bracket_position, replace_contents_with_offset

log = logging.getLogger(__name__)

app = typer.Typer(name = "code_patcher", help = "Bracket aware patching of source‑like text files")


@app.callback()
def configure(
        ctx: typer.Context, debug: bool = typer.Option(
                False, "--debug", help = "Enable DEBUG logs."
                ), config: Optional[Path] = typer.Option(
                None, "--config", help = "Path to a JSON config file (or a directory holding patcher_config.json).", ),
        ):
    """Load configuration and set up logging before running a command."""
    cfg = load_config(config) if config else load_config()
    setup_logging(debug, cfg.get("log_level", "INFO"))
    ctx.obj = cfg


def _fail(exc: Exception) -> None:
    log.debug("Command failed", exc_info = True)
    typer.echo(f"Error: {exc}", err = True)
    raise typer.Exit(code = 1)


def _report(result: PatchResult, dry_run: bool) -> None:
    if dry_run:
        typer.echo(result.diff, nl = False)
    elif result.written:
        typer.echo(f"Patched: {result.path}")
    else:
        typer.echo(f"Unchanged: {result.path}")


@app.command(help = "Print the offset of the bracket matching the first BRACKET in TEXT (-1 if none).")
def match(
        text: str = typer.Argument(..., help = "Text to search, or a file path with --file."),
        bracket: str = typer.Option(..., "--bracket", "-b", help = "One of ( ) { } [ ]."),
        from_file: bool = typer.Option(False, "--file", help = "Treat TEXT as a path and search its content."),
        ):
    """Print the matching bracket offset.

    A missing match is not an error: ``-1`` is printed and the exit code
    is 0.
    """

    ctx = click.get_current_context()
    try:
        content = read_file(text, encoding = ctx.obj["encoding"]) if from_file else text
    except (OSError, UnicodeDecodeError) as exc:
        _fail(exc)
    typer.echo(str(find_matching_bracket_position(content, bracket)))


@app.command(help = "Replace the inclusive character range START..END of a file.")
def splice(
        file_path: Path = typer.Argument(..., exists = True, dir_okay = False, help = "File to patch."),
        start: int = typer.Argument(..., help = "First offset to replace (inclusive)."),
        end: int = typer.Argument(..., help = "Last offset to replace (inclusive)."),
        replacement: str = typer.Option("", "--replacement", "-r", help = "Replacement text."),
        dry_run: bool = typer.Option(False, "--dry-run", help = "Print the diff without writing."),
        backup: Optional[bool] = typer.Option(None, "--backup/--no-backup", help = "Keep a .bak copy."),
        ):
    """Splice ``replacement`` into ``file_path`` in place of ``[start, end]``."""

    cfg = click.get_current_context().obj
    transform = partial(_splice, replacement = replacement, start = start, end = end)
    try:
        result = patch_file(
                file_path, transform, backup = cfg["backup"] if backup is None else backup, dry_run = dry_run,
                encoding = cfg["encoding"], )
    except CodePatcherError as exc:
        _fail(exc)
    _report(result, dry_run)


def _splice(content: str, *, replacement: str, start: int, end: int) -> str:
    return replace_contents_with_offset(content, replacement, start, end)


@app.command(help = "Insert a snippet at the start or end of the block following an anchor.")
def insert(
        file_path: Path = typer.Argument(..., exists = True, dir_okay = False, help = "File to patch."),
        anchor: str = typer.Option(..., "--anchor", "-a", help = "Text that precedes the block."),
        snippet: str = typer.Option(..., "--snippet", "-s", help = "Text to insert."),
        position: str = typer.Option("end", "--position", "-p", help = "Where to insert: start|end."),
        bracket: str = typer.Option("{", "--bracket", "-b", help = "Opening bracket of the block."),
        dry_run: bool = typer.Option(False, "--dry-run", help = "Print the diff without writing."),
        backup: Optional[bool] = typer.Option(None, "--backup/--no-backup", help = "Keep a .bak copy."),
        ):
    """Insert ``snippet`` into the first block after ``anchor``."""

    cfg = click.get_current_context().obj
    transform = partial(insert_into_block, anchor = anchor, snippet = snippet, bracket = bracket, position = position)
    try:
        result = patch_file(
                file_path, transform, backup = cfg["backup"] if backup is None else backup, dry_run = dry_run,
                encoding = cfg["encoding"], )
    except (CodePatcherError, ValueError) as exc:
        _fail(exc)
    _report(result, dry_run)


@app.command("replace-body", help = "Replace the body of the block following an anchor.")
def replace_body(
        file_path: Path = typer.Argument(..., exists = True, dir_okay = False, help = "File to patch."),
        anchor: str = typer.Option(..., "--anchor", "-a", help = "Text that precedes the block."),
        body: str = typer.Option(..., "--body", help = "New block body."),
        bracket: str = typer.Option("{", "--bracket", "-b", help = "Opening bracket of the block."),
        dry_run: bool = typer.Option(False, "--dry-run", help = "Print the diff without writing."),
        backup: Optional[bool] = typer.Option(None, "--backup/--no-backup", help = "Keep a .bak copy."),
        ):
    """Replace everything between the brackets of the first block after ``anchor``."""

    cfg = click.get_current_context().obj
    transform = partial(replace_block_body, anchor = anchor, body = body, bracket = bracket)
    try:
        result = patch_file(
                file_path, transform, backup = cfg["backup"] if backup is None else backup, dry_run = dry_run,
                encoding = cfg["encoding"], )
    except (CodePatcherError, ValueError) as exc:
        _fail(exc)
    _report(result, dry_run)


@app.command(help = "Render a str.format template into a file.")
def render(
        template: Path = typer.Argument(..., exists = True, dir_okay = False, help = "Template file."),
        dest: Path = typer.Argument(..., help = "Destination file; parent directories are created."),
        var: Optional[List[str]] = typer.Option(None, "--var", help = "Template variable as key=value."),
        overwrite: bool = typer.Option(False, "--overwrite", help = "Replace an existing destination."),
        ):
    """Render ``template`` to ``dest`` with ``--var`` substitutions."""

    try:
        replace_vars = {}
        for item in var or []:
            key, sep, value = item.partition("=")
            if not sep or not key:
                raise CodePatcherError(f"Invalid --var {item!r}; expected key=value")
            replace_vars[key] = value
        create_from_template(template, dest, replace_vars = replace_vars, overwrite = overwrite)
    except CodePatcherError as exc:
        _fail(exc)
    typer.echo(f"File written: {dest}")


def main() -> None:  # pragma: no cover – thin wrapper
    """Entry point used by ``python -m code_patcher`` and the console script."""
    app()


if __name__ == "__main__":
    main()
