"""Compute table geometry and turn it into a grid of styled cells."""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from docx_composer.config import DEFAULT_TABLE_WIDTH_TWIPS
from docx_composer.errors import MalformedTableError
from docx_composer.model.elements import (
    ALIGN_CENTER,
    ALIGN_LEFT,
    BorderSpec,
    CellMargins,
    RunStyle,
    TableCellLayout,
    TableGrid,
    TableLayout,
    TableRowLayout,
)
from docx_composer.model.style_model import StyleRegistry
from docx_composer.utils.logger import get_logger

LOGGER = get_logger(__name__)

SHADE_EVEN = "shade-1"
SHADE_ODD = "shade-2"
SHADE_TOKENS = {SHADE_EVEN: "table-shade-1", SHADE_ODD: "table-shade-2"}

HEADER_CELL_MARGINS = CellMargins(top=80, bottom=80, left=120, right=120)
DATA_CELL_MARGINS = CellMargins(top=60, bottom=60, left=120, right=120)
DEFAULT_BORDER_SIZE = 1


def materialize_table(
    headers: Iterable[str], rows: Iterable[Sequence[str]]
) -> Tuple[Tuple[str, ...], Tuple[Tuple[str, ...], ...]]:
    """Freeze headers and rows into tuples, refusing bare strings as rows.

    Rows may come from a generator, so they are read exactly once here.
    """
    if isinstance(headers, str):
        raise MalformedTableError("Table headers must be a sequence of strings, not a single string")
    frozen_rows = []
    for index, row in enumerate(rows):
        if isinstance(row, str):
            raise MalformedTableError(f"Row {index} is a bare string, expected one value per cell")
        frozen_rows.append(tuple(row))
    return tuple(headers), tuple(frozen_rows)


def validate_table_shape(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    """Raise ``MalformedTableError`` unless every row has one cell per header."""
    if isinstance(headers, str):
        raise MalformedTableError("Table headers must be a sequence of strings, not a single string")
    if not headers:
        raise MalformedTableError("Table needs at least one header")
    duplicates = sorted({header for header in headers if list(headers).count(header) > 1})
    if duplicates:
        raise MalformedTableError(f"Duplicate table headers: {', '.join(duplicates)}")
    for index, row in enumerate(rows):
        if isinstance(row, str):
            raise MalformedTableError(f"Row {index} is a bare string, expected one value per cell")
        if len(row) != len(headers):
            raise MalformedTableError(
                f"Row {index} has {len(row)} cells but the table has {len(headers)} headers"
            )


def compute_column_widths(total_width: int, column_count: int) -> Tuple[int, ...]:
    """Split ``total_width`` evenly with floor division.

    The remainder is dropped rather than redistributed, so the columns sum to
    ``total_width - total_width % column_count``.
    """
    if column_count <= 0:
        raise MalformedTableError("Column count must be positive")
    width = total_width // column_count
    return tuple(width for _ in range(column_count))


def row_shade(row_index: int) -> str:
    """Shading key for a data row, by zero-based index parity only."""
    return SHADE_EVEN if row_index % 2 == 0 else SHADE_ODD


def compute_table_grid(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    total_width: int = DEFAULT_TABLE_WIDTH_TWIPS,
) -> TableGrid:
    """Validate the table and compute widths, alignment and row parity."""
    validate_table_shape(headers, rows)
    column_count = len(headers)
    alignments = tuple(ALIGN_LEFT if index == 0 else ALIGN_CENTER for index in range(column_count))
    return TableGrid(
        column_count=column_count,
        column_widths=compute_column_widths(total_width, column_count),
        alignments=alignments,
        row_shades=tuple(row_shade(index) for index in range(len(rows))),
    )


def style_table(
    grid: TableGrid,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    registry: StyleRegistry,
) -> TableLayout:
    """Apply colours and fonts to a computed grid."""
    font = registry.font("font-body").family
    header_style = RunStyle(
        font=font,
        size_pt=registry.size("table-header").size_pt,
        color_hex=registry.color("white").color_hex,
        bold=True,
        italic=True,
    )
    cell_style = RunStyle(
        font=font,
        size_pt=registry.size("table-cell").size_pt,
        color_hex=registry.color("deep").color_hex,
        bold=True,
    )
    header_fill = registry.color("deep").color_hex
    shade_fills = {key: registry.color(token).color_hex for key, token in SHADE_TOKENS.items()}

    header_cells = tuple(
        TableCellLayout(
            text=text,
            row_index=None,
            column_index=column,
            width=grid.column_widths[column],
            alignment=ALIGN_CENTER,
            fill_hex=header_fill,
            run_style=header_style,
            margins=HEADER_CELL_MARGINS,
        )
        for column, text in enumerate(headers)
    )

    data_rows: List[TableRowLayout] = []
    for row_index, row in enumerate(rows):
        shade = grid.row_shades[row_index]
        cells = tuple(
            TableCellLayout(
                text=text,
                row_index=row_index,
                column_index=column,
                width=grid.column_widths[column],
                alignment=grid.alignments[column],
                fill_hex=shade_fills[shade],
                run_style=cell_style,
                margins=DATA_CELL_MARGINS,
            )
            for column, text in enumerate(row)
        )
        data_rows.append(TableRowLayout(cells=cells, is_header=False, shade=shade))

    return TableLayout(
        column_widths=grid.column_widths,
        header_row=TableRowLayout(cells=header_cells, is_header=True),
        data_rows=tuple(data_rows),
        border=BorderSpec(color_hex=registry.color("table-border").color_hex, size=DEFAULT_BORDER_SIZE),
    )


def layout_table(
    headers: Iterable[str],
    rows: Iterable[Sequence[str]],
    registry: StyleRegistry,
    total_width: int = DEFAULT_TABLE_WIDTH_TWIPS,
) -> TableLayout:
    """Validate, lay out and style a table in one step."""
    headers, rows = materialize_table(headers, rows)
    grid = compute_table_grid(headers, rows, total_width)
    LOGGER.debug(
        "Table %s: %d rows, column width %d twips",
        headers[0],
        len(rows),
        grid.column_widths[0],
    )
    return style_table(grid, headers, rows, registry)
