"""Status message command implementation."""

import click

from sculpt.commands.utils import get_output


@click.command(name="status")
@click.argument("level", type=click.Choice(["success", "warning", "error"]))
@click.argument("message")
@click.option("--err", is_flag=True, help="Write to stderr instead of stdout")
@click.pass_context
def status(ctx, level: str, message: str, err: bool):
    """Print a labelled SUCCESS, WARNING or ERROR line."""
    output = get_output(ctx, err=err)
    getattr(output, level)(message)
