"""Check command implementation."""

import sys

import click

from hson.commands.utils import describe_parse_error, encoding_option
from hson.errors import LoadError, ParseError, format_error
from hson.loader import load


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("--quiet", "-q", is_flag=True, help="Show only files with errors")
@encoding_option
def check(files: tuple[str, ...], quiet: bool, encoding: str):
    """Check that HSON files strip to valid JSON."""
    failed = 0

    for file in files:
        try:
            load(file, encoding=encoding)
        except ParseError as e:
            failed += 1
            click.echo(format_error(describe_parse_error(file, e, encoding)), err=True)
            continue
        except LoadError as e:
            failed += 1
            click.echo(format_error(f"{file}: {e}"), err=True)
            continue

        if not quiet:
            click.echo(f"ok: {file}")

    if failed:
        click.echo(f"{failed} of {len(files)} file(s) failed", err=True)
        sys.exit(1)
