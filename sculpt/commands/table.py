"""Table command implementation."""

import csv
import io

import click

from sculpt.commands.utils import get_output


def read_csv_rows(path: str, delimiter: str) -> list[list[str]]:
    """Read non-empty CSV rows from a file, or from stdin for '-'.

    The input is opened with newline="" so quoted fields keep their
    embedded line breaks.
    """
    if path == "-":
        source = io.TextIOWrapper(
            click.get_binary_stream("stdin"), encoding="utf-8", newline=""
        )
        try:
            return [row for row in csv.reader(source, delimiter=delimiter) if row]
        finally:
            # leave the process stdin open
            source.detach()

    with open(path, encoding="utf-8", newline="") as source:
        return [row for row in csv.reader(source, delimiter=delimiter) if row]


@click.command(name="table")
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    help="Column header (repeatable). Without it the first row is the header.",
)
@click.option(
    "--file",
    "-f",
    "source",
    type=click.Path(dir_okay=False, allow_dash=True),
    default="-",
    help="CSV input (default: stdin)",
)
@click.option("--delimiter", "-d", default=",", show_default=True, help="Field delimiter")
@click.pass_context
def table(ctx, headers: tuple[str, ...], source: str, delimiter: str):
    """Render CSV rows as a fixed-width table.

    Example:

        printf 'name,version\\nclick,8.1.7\\n' | sculpt table
    """
    if len(delimiter) != 1:
        raise click.BadParameter("must be a single character", param_hint="--delimiter")

    try:
        rows = read_csv_rows(source, delimiter)
    except OSError as e:
        raise click.FileError(source, hint=e.strerror or str(e))

    if not headers:
        if not rows:
            raise click.UsageError("No header given and no input rows to take it from")
        headers, rows = tuple(rows[0]), rows[1:]

    get_output(ctx).table(list(headers), rows)
