"""Interactive prompt commands for shell scripts.

Questions and menus are written to stderr; the answer is the only thing on
stdout, so ``answer=$(sculpt ask "Name")`` works as expected.
"""

import click

from sculpt.commands.utils import get_prompter
from sculpt.errors import InvalidChoiceError
from sculpt.input import END_OF_STREAM


@click.command(name="ask")
@click.argument("question")
@click.option("--default", "default", default=None, help="Answer used for blank input")
@click.pass_context
def ask(ctx, question: str, default: str | None):
    """Ask a free-text QUESTION and print the answer.

    Exits with status 1 when input ends before an answer is given.
    """
    answer = get_prompter(ctx).ask(question, default)

    if answer is END_OF_STREAM:
        ctx.exit(1)

    click.echo(answer or "")


@click.command(name="confirm")
@click.argument("question")
@click.option(
    "--default",
    "default",
    type=click.Choice(["y", "n"]),
    default="y",
    show_default=True,
    help="Answer used for blank input or end of input",
)
@click.pass_context
def confirm(ctx, question: str, default: str):
    """Ask a yes/no QUESTION. Exits 0 for yes and 1 for no."""
    confirmed = get_prompter(ctx).confirm(question, default == "y")
    ctx.exit(0 if confirmed else 1)


@click.command(name="choice")
@click.argument("question")
@click.argument("choices", nargs=-1, required=True)
@click.option("--default", "default", type=int, default=None, help="Default choice (1-based)")
@click.pass_context
def choice(ctx, question: str, choices: tuple[str, ...], default: int | None):
    """Show a numbered menu of CHOICES and print the selected one."""
    try:
        selected = get_prompter(ctx).choice(question, list(choices), default)
    except InvalidChoiceError as e:
        raise click.BadParameter(str(e), param_hint="--default")

    click.echo(selected)
