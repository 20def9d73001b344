"""Strip command implementation."""

import logging
from pathlib import Path

import click

from hson.commands.utils import (
    STDIN,
    describe_parse_error,
    encoding_option,
    fail,
    open_reader,
    whitespace_option,
)
from hson.errors import ParseError
from hson.whitespace import WhitespaceHandling

_logging = logging.getLogger(__name__)


@click.command(name="strip")
@click.argument("file", required=False, default=STDIN, type=click.Path(dir_okay=False, allow_dash=True))
@click.option(
    "--output",
    "-o",
    default=STDIN,
    type=click.Path(dir_okay=False, allow_dash=True, writable=True),
    help="Write JSON here instead of stdout",
)
@whitespace_option
@encoding_option
def strip_command(file: str, output: str, whitespace: WhitespaceHandling, encoding: str):
    """Strip comments and multi-line strings from an HSON file.

    Writes the resulting JSON text. Nothing is written when the input is
    malformed.

    FILE: Path to the HSON file (default: stdin)
    """
    if file != STDIN and not Path(file).exists():
        fail(f"File not found: {file}")

    _logging.debug(f"Stripping {file} with whitespace handling {whitespace.value}")
    try:
        with open_reader(file, whitespace, encoding) as reader:
            json_text = reader.read_to_end()
    except ParseError as e:
        fail(describe_parse_error(file, e, encoding))
    except UnicodeDecodeError:
        fail(f"Input is not valid {encoding}: {file}")
    except OSError as e:
        fail(f"Error reading {file}: {e}")

    try:
        with click.open_file(output, "w", encoding="utf-8") as f:
            f.write(json_text)
    except OSError as e:
        fail(f"Error writing {output}: {e}")
