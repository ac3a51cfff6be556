"""Echo command implementation."""

import click

from sculpt.commands.utils import get_output


@click.command(name="echo")
@click.argument("text", nargs=-1)
@click.option("-n", "no_newline", is_flag=True, help="Do not print the trailing newline")
@click.option("--err", is_flag=True, help="Write to stderr instead of stdout")
@click.pass_context
def echo(ctx, text: tuple[str, ...], no_newline: bool, err: bool):
    """Render markup such as '<green>ok</green>' to the terminal.

    Tags are converted to ANSI styles on a color terminal and stripped
    everywhere else.
    """
    output = get_output(ctx, err=err)
    message = " ".join(text)

    if no_newline:
        output.write(message)
    else:
        output.write_ln(message)
