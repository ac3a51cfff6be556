"""Shared utility functions for commands."""

import sys
from dataclasses import replace

import click

from sculpt import setup_logging
from sculpt.config import ColorMode, ConsoleSettings, load_settings
from sculpt.errors import ConfigError, format_error
from sculpt.input import ConsoleInput
from sculpt.output import ConsoleOutput


def get_settings(ctx: click.Context) -> ConsoleSettings:
    """Resolve settings from the settings file, environment and CLI flags.

    Exits with status 1 when the settings file or environment is invalid.
    """
    obj = ctx.obj or {}
    setup_logging(obj.get("debug", False))

    try:
        settings = load_settings()
    except ConfigError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    color = obj.get("color")
    if color is not None:
        settings = replace(
            settings, color=ColorMode.ALWAYS if color else ColorMode.NEVER
        )
    return settings


def get_output(ctx: click.Context, err: bool = False) -> ConsoleOutput:
    """Console output on stdout, or on stderr when ``err`` is set."""
    stream = sys.stderr if err else sys.stdout
    return ConsoleOutput(stream=stream, settings=get_settings(ctx))


def get_prompter(ctx: click.Context) -> ConsoleInput:
    """Prompts go to stderr so stdout carries only the answer."""
    return ConsoleInput(get_output(ctx, err=True), stream=sys.stdin)
