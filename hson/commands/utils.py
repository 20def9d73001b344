"""Shared utility functions for commands."""

import sys
from pathlib import Path
from typing import NoReturn

import click

from hson.errors import ParseError, format_error, format_parse_error
from hson.reader import HsonReader
from hson.source import detect_bom
from hson.whitespace import WhitespaceHandling

STDIN = "-"


def parse_whitespace(ctx, param, value: str | None) -> WhitespaceHandling:
    """Click callback turning --whitespace text into a WhitespaceHandling.

    Raises:
        click.BadParameter: If the value names no policy
    """
    if value is None:
        return WhitespaceHandling.NO_WHITESPACE
    try:
        return WhitespaceHandling.from_name(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


whitespace_option = click.option(
    "--whitespace",
    "-W",
    envvar="HSON_WHITESPACE",
    default=WhitespaceHandling.NO_WHITESPACE.value,
    show_default=True,
    callback=parse_whitespace,
    help="Whitespace policy: none, comma-colon or untouched",
)

encoding_option = click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Input encoding when no byte-order mark is present",
)


def open_reader(
    file: str, whitespace: WhitespaceHandling, encoding: str
) -> HsonReader:
    """Open an HsonReader over FILE, or over stdin for '-'."""
    if file == STDIN:
        return HsonReader(
            click.get_binary_stream("stdin"),
            whitespace,
            encoding=encoding,
            close_stream=False,
        )
    return HsonReader(Path(file), whitespace, encoding=encoding)


def describe_parse_error(file: str, error: ParseError, encoding: str) -> str:
    """Render a ParseError, with source context when FILE can be re-read.

    A byte-order mark in FILE overrides encoding, as it did when parsing.
    """
    if file == STDIN:
        return f"<stdin>: {error}"
    try:
        data = Path(file).read_bytes()
    except OSError:
        return f"{file}: {error}"
    detected, bom_length = detect_bom(data)
    if detected is not None:
        encoding, data = detected, data[bom_length:]
    original_text = data.decode(encoding, errors="replace")
    return f"{file}: {format_parse_error(original_text, error)}"


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    click.echo(format_error(message), err=True)
    sys.exit(1)
