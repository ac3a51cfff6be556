"""CLI command definitions for sculpt."""

import click

from sculpt.commands.echo import echo
from sculpt.commands.prompts import ask, choice, confirm
from sculpt.commands.status import status
from sculpt.commands.table import table


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug output for troubleshooting")
@click.option(
    "--color/--no-color",
    default=None,
    help="Force ANSI styles on or off (default: detect from the terminal)",
)
@click.pass_context
def cli(ctx, debug, color):
    """Styled output and interactive prompts for shell scripts."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["color"] = color


# Register all commands
cli.add_command(echo)
cli.add_command(status)
cli.add_command(table)
cli.add_command(ask)
cli.add_command(confirm)
cli.add_command(choice)

__all__ = ["cli"]


if __name__ == "__main__":
    cli()
