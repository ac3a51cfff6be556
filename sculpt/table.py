"""Column layout helpers for fixed-width tables."""

from typing import Any, Iterable, Mapping

from prompt_toolkit.utils import get_cwidth


def display_width(text: str) -> int:
    """Number of terminal columns ``text`` occupies.

    Counts characters, not bytes: ``"é"`` is 1, wide CJK characters are 2
    and combining marks are 0.
    """
    return get_cwidth(text)


def cell_text(value: Any) -> str:
    """Stringify a cell; None renders as an empty cell."""
    return "" if value is None else str(value)


def reindex(values: Iterable[Any] | Mapping[Any, Any]) -> list[Any]:
    """Turn any ordered collection into a dense zero-based list.

    Mappings contribute their values in iteration order; keys are discarded.
    """
    if isinstance(values, Mapping):
        return list(values.values())
    return list(values)


def column_widths(
    headers: Iterable[str], rows: Iterable[Iterable[Any]]
) -> dict[int, int]:
    """Compute the width of each column over the headers and all rows.

    Args:
        headers: Column headers
        rows: Table rows, cells are stringified before measuring

    Returns:
        Mapping of zero-based column index to its width. Columns that only
        exist in some rows are included as well.
    """
    widths = {
        index: display_width(cell_text(header))
        for index, header in enumerate(reindex(headers))
    }

    for row in rows:
        for index, value in enumerate(reindex(row)):
            widths[index] = max(widths.get(index, 0), display_width(cell_text(value)))

    return widths


def pad_cell(value: Any, width: int) -> str:
    text = cell_text(value)
    return text + " " * max(0, width - display_width(text))


def render_row(row: Iterable[Any], widths: Mapping[int, int]) -> str:
    """Render one table row, padding missing cells and dropping extra ones."""
    cells = reindex(row)
    padded = [
        pad_cell(cells[index] if index < len(cells) else "", width)
        for index, width in widths.items()
    ]
    return "| " + " | ".join(padded) + " |\n"


def render_separator(widths: Mapping[int, int]) -> str:
    return "+-" + "-+-".join("-" * width for width in widths.values()) + "-+\n"


__all__ = [
    "display_width",
    "cell_text",
    "reindex",
    "column_widths",
    "pad_cell",
    "render_row",
    "render_separator",
]
