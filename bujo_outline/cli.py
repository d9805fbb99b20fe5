"""
Validates and inspects bullet-journal outline files.
Each command reads a journal file, parses it, and reports on stdout.
"""

from __future__ import annotations

import json

import click

from . import __version__
from .config import OUTPUT_FORMATS, ConfigError, OutlineConfig, build_config
from .filesystem import (
    collect_file_stat,
    enforce_file_size,
    get_max_file_size,
    get_max_line_length,
    normalize_filepath,
)
from .folding import fold_range, foldable_ranges
from .formatter import format_document
from .locator import find_entry_line
from .log import configure_logging, get_logger
from .models import ParsedDocument, ParsedLine
from .parser import ParseFileError, parse_file

__all__ = ["cli"]

logger = get_logger(__name__)


def _load_document(filepath: str, **overrides: object) -> tuple[OutlineConfig, ParsedDocument]:
    """Resolve, configure, and parse a journal file for a command.

    Raises:
        click.BadParameter: If the path or configuration is invalid.
        click.ClickException: If limits are exceeded or the file cannot be parsed.
    """
    try:
        path = normalize_filepath(filepath)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = build_config(path.parent, **overrides)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
        max_line_length = get_max_line_length(default=config.max_line_length)
    except ValueError as error:
        raise click.ClickException(str(error)) from error

    try:
        enforce_file_size(collect_file_stat(path), max_file_size, path)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    try:
        document = parse_file(path, max_line_length, config)
    except ParseFileError as error:
        raise click.ClickException(str(error)) from error

    logger.info("document_loaded", path=str(path), valid=document.is_valid)
    return config, document


def _line_to_dict(line: ParsedLine) -> dict[str, object]:
    return {
        "line_number": line.line_number,
        "kind": line.kind.name.lower(),
        "depth": line.depth,
        "symbol": line.entry_type,
        "priority": int(line.priority),
        "content": line.content,
        "migration_target": line.migration_target,
        "error": line.error_message,
    }


def _document_to_dict(document: ParsedDocument) -> dict[str, object]:
    return {
        "is_valid": document.is_valid,
        "lines": [_line_to_dict(line) for line in document.lines],
        "errors": [
            {"line_number": error.line_number, "message": error.message}
            for error in document.errors
        ],
    }


@click.group()
@click.version_option(version=__version__, prog_name="bujo-outline")
def cli():
    """
    Validate and inspect bullet-journal outline files.

    Log verbosity is controlled by the BUJO_OUTLINE_LOG_LEVEL environment
    variable (DEBUG, INFO, WARNING, ERROR).
    """
    configure_logging()


@cli.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    help="Report format (text or json)",
)
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def check(ctx: click.Context, filepath: str, output_format: str | None = None):
    """
    Validate a journal file and report every invalid line.

    Exits with status 1 when the document contains errors.

    Examples:
        bujo-outline check today.bujo --format json
    """
    config, document = _load_document(filepath, output_format=output_format)

    if config.output_format == "json":
        click.echo(json.dumps(_document_to_dict(document), indent=2, ensure_ascii=False))
    else:
        for error in document.errors:
            click.echo(f"{filepath}:{error.line_number}: {error.message}")
        if document.is_valid:
            click.echo(f"{filepath}: OK ({len(document.entries)} entries)")
        else:
            click.echo(f"{filepath}: {document.error_count} error(s)")

    if not document.is_valid:
        ctx.exit(1)


@cli.command()
@click.option(
    "--line",
    "line_number",
    type=click.IntRange(min=1),
    help="Only report the subtree under this 1-based line",
)
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def folds(ctx: click.Context, filepath: str, line_number: int | None = None):
    """
    Print foldable subtrees as 1-based START-END line ranges.

    Examples:
        bujo-outline folds today.bujo --line 3
    """
    _, document = _load_document(filepath)
    lines = [line.raw for line in document.lines]

    if line_number is None:
        for found in foldable_ranges(lines):
            click.echo(f"{found.start + 1}-{found.end + 1}")
        return

    if line_number > len(lines):
        raise click.BadParameter(
            f"{filepath} has {len(lines)} line(s).", param_hint="'--line'"
        )

    found = fold_range(lines, line_number - 1)
    if found is None:
        click.echo(f"Line {line_number} has nothing to fold.", err=True)
        ctx.exit(1)
    click.echo(f"{found.start + 1}-{found.end + 1}")


@cli.command()
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
@click.argument("text")
@click.pass_context
def find(ctx: click.Context, filepath: str, text: str):
    """
    Locate the first entry whose content contains TEXT.

    Prints LINE:START:END followed by the line itself, where START and END
    are character offsets into the file.
    """
    _, document = _load_document(filepath)
    content = "\n".join(line.raw for line in document.lines)

    match = find_entry_line(content, text)
    if match is None:
        click.echo(f"No entry matching {text!r}.", err=True)
        ctx.exit(1)
    click.echo(f"{match.line}:{match.start}:{match.end}\t{content[match.start : match.end]}")


@cli.command()
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def fmt(filepath: str):
    """
    Print the journal with canonical indentation and marker spacing.

    Lines that cannot be parsed are printed unchanged.
    """
    _, document = _load_document(filepath)
    click.echo(format_document(document), nl=False)


if __name__ == "__main__":
    cli()
