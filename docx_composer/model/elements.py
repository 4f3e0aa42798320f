"""In-memory representation of styled content nodes and table layout."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

ALIGN_LEFT = "left"
ALIGN_CENTER = "center"


@dataclass(frozen=True, slots=True)
class RunStyle:
    """Resolved inline styling for a contiguous run of text."""

    font: str
    size_pt: float
    color_hex: Optional[str] = None
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True, slots=True)
class ParagraphFormat:
    """Paragraph-level spacing, alignment and background."""

    space_before_pt: float = 0.0
    space_after_pt: float = 0.0
    alignment: str = ALIGN_LEFT
    shading_hex: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Header:
    text: str
    style_ref: str
    run_style: RunStyle
    paragraph: ParagraphFormat


@dataclass(frozen=True, slots=True)
class SubHeader:
    text: str
    style_ref: str
    run_style: RunStyle
    paragraph: ParagraphFormat


@dataclass(frozen=True, slots=True)
class Body:
    text: str
    color_ref: str
    run_style: RunStyle
    paragraph: ParagraphFormat


@dataclass(frozen=True, slots=True)
class Bullet:
    """Marker glyph, emphasized label and plain description on one line."""

    label: str
    description: str
    marker: str
    marker_style: RunStyle
    label_style: RunStyle
    description_style: RunStyle
    paragraph: ParagraphFormat


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Fixed-width listing; one paragraph per line."""

    lines: Tuple[str, ...]
    run_style: RunStyle
    shading_hex: str
    padding_pt: float


@dataclass(frozen=True, slots=True)
class Title:
    """Centered display line used on the cover and closing pages."""

    text: str
    run_style: RunStyle
    paragraph: ParagraphFormat


@dataclass(frozen=True, slots=True)
class Spacer:
    """Empty paragraph carrying only vertical space."""

    paragraph: ParagraphFormat


@dataclass(frozen=True, slots=True)
class PageBreak:
    pass


@dataclass(frozen=True, slots=True)
class CellMargins:
    """Cell padding in twips."""

    top: int
    bottom: int
    left: int
    right: int


@dataclass(frozen=True, slots=True)
class BorderSpec:
    """Single-line border drawn on every cell edge."""

    color_hex: str
    size: int = 1


@dataclass(frozen=True, slots=True)
class TableGrid:
    """Pure geometry of a table: widths, alignment and row parity."""

    column_count: int
    column_widths: Tuple[int, ...]
    alignments: Tuple[str, ...]
    row_shades: Tuple[str, ...]

    @property
    def total_width(self) -> int:
        return sum(self.column_widths)


@dataclass(frozen=True, slots=True)
class TableCellLayout:
    """Styled grid cell; ``row_index`` is ``None`` for header cells."""

    text: str
    row_index: Optional[int]
    column_index: int
    width: int
    alignment: str
    fill_hex: str
    run_style: RunStyle
    margins: CellMargins


@dataclass(frozen=True, slots=True)
class TableRowLayout:
    cells: Tuple[TableCellLayout, ...]
    is_header: bool
    shade: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TableLayout:
    """Render tree emitted by the table layout engine."""

    column_widths: Tuple[int, ...]
    header_row: TableRowLayout
    data_rows: Tuple[TableRowLayout, ...]
    border: BorderSpec

    @property
    def total_width(self) -> int:
        return sum(self.column_widths)

    @property
    def rows(self) -> Tuple[TableRowLayout, ...]:
        return (self.header_row, *self.data_rows)

    def cells(self) -> Tuple[TableCellLayout, ...]:
        return tuple(cell for row in self.rows for cell in row.cells)


@dataclass(frozen=True, slots=True)
class Table:
    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]
    layout: TableLayout


ContentNode = Header | SubHeader | Body | Bullet | CodeBlock | Table | PageBreak | Title | Spacer
