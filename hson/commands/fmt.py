"""Format command implementation."""

import json
import sys
import uuid
from pathlib import Path

import click
import yaml

from hson.commands.utils import (
    STDIN,
    describe_parse_error,
    encoding_option,
    fail,
    open_reader,
)
from hson.errors import ParseError, format_suggestion
from hson.whitespace import WhitespaceHandling


@click.command(name="fmt")
@click.argument("file", required=False, default=STDIN, type=click.Path(dir_okay=False, allow_dash=True))
@click.option(
    "--write",
    "-w",
    is_flag=True,
    help="Overwrite the file instead of printing to stdout",
)
@click.option("--indent", default=2, show_default=True, type=click.IntRange(min=0), help="JSON indentation")
@click.option("--yaml", "as_yaml", is_flag=True, help="Emit YAML instead of JSON")
@encoding_option
def fmt(file: str, write: bool, indent: int, as_yaml: bool, encoding: str):
    """Re-serialize an HSON file as indented JSON (or YAML).

    Comments are accepted on input but not preserved after formatting, and
    multi-line strings become regular JSON strings.

    FILE: Path to the HSON file (default: stdin)
    """
    if write and file == STDIN:
        click.echo(format_suggestion("--write needs a file", "pass FILE or drop --write"), err=True)
        sys.exit(1)

    file_path = Path(file)
    if file != STDIN and not file_path.exists():
        fail(f"File not found: {file_path}")

    try:
        with open_reader(file, WhitespaceHandling.NO_WHITESPACE, encoding) as reader:
            json_text = reader.read_to_end()
    except ParseError as e:
        fail(describe_parse_error(file, e, encoding))
    except UnicodeDecodeError:
        fail(f"Input is not valid {encoding}: {file}")
    except OSError as e:
        fail(f"Error reading {file}: {e}")

    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        fail(f"{file}: invalid JSON after stripping: {e}")

    if as_yaml:
        formatted = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
        formatted = formatted.rstrip("\n")
    else:
        formatted = json.dumps(data, indent=indent, ensure_ascii=False)

    if write:
        # Write atomically with unique temp file name
        temp_path = file_path.with_suffix(f".tmp.{uuid.uuid4().hex[:8]}")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(formatted)
                f.write("\n")
            temp_path.replace(file_path)
            click.echo(f"Formatted {file_path}")
        except OSError as e:
            # Clean up temp file if it exists
            if temp_path.exists():
                temp_path.unlink()
            fail(f"Error writing file: {e}")
    else:
        click.echo(formatted)
