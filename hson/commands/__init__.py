"""CLI command definitions for hson."""

import click

from hson import __version__, setup_logging
from hson.commands.check import check
from hson.commands.fmt import fmt
from hson.commands.strip import strip_command


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug output for troubleshooting")
@click.version_option(__version__, prog_name="hson")
@click.pass_context
def cli(ctx, debug):
    """Strip HSON (JSON with comments and @"multi-line" strings) to JSON."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    setup_logging(debug)


# Register all commands
cli.add_command(strip_command, name="strip")
cli.add_command(fmt)
cli.add_command(check)

__all__ = ["cli"]


if __name__ == "__main__":
    cli()
