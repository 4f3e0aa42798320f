"""Common python-docx helpers shared by the renderer."""
from __future__ import annotations

from typing import Any

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor

from docx_composer.model.elements import ALIGN_CENTER, ALIGN_LEFT, BorderSpec, CellMargins, ParagraphFormat, RunStyle

ALIGNMENTS = {
    ALIGN_LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    ALIGN_CENTER: WD_ALIGN_PARAGRAPH.CENTER,
}


def _shading_element(fill_hex: str) -> Any:
    shading = OxmlElement("w:shd")
    shading.set(qn("w:val"), "clear")
    shading.set(qn("w:color"), "auto")
    shading.set(qn("w:fill"), fill_hex)
    return shading


def apply_paragraph_format(paragraph: Any, fmt: ParagraphFormat) -> None:
    """Apply spacing, alignment and shading to a python-docx paragraph."""
    # w:shd precedes w:spacing and w:jc inside w:pPr, so it goes in first.
    if fmt.shading_hex:
        paragraph._p.get_or_add_pPr().append(_shading_element(fmt.shading_hex))
    paragraph.paragraph_format.space_before = Pt(fmt.space_before_pt)
    paragraph.paragraph_format.space_after = Pt(fmt.space_after_pt)
    paragraph.alignment = ALIGNMENTS[fmt.alignment]


def add_styled_run(paragraph: Any, text: str, style: RunStyle) -> Any:
    run = paragraph.add_run(text)
    run.bold = style.bold
    run.italic = style.italic
    run.font.name = style.font
    run.font.size = Pt(style.size_pt)
    if style.color_hex:
        run.font.color.rgb = RGBColor.from_string(style.color_hex)
    return run


def set_cell_borders(cell: Any, border: BorderSpec) -> None:
    tc_borders = OxmlElement("w:tcBorders")
    for side in ("top", "left", "bottom", "right"):
        edge = OxmlElement(f"w:{side}")
        edge.set(qn("w:val"), "single")
        edge.set(qn("w:sz"), str(border.size))
        edge.set(qn("w:space"), "0")
        edge.set(qn("w:color"), border.color_hex)
        tc_borders.append(edge)
    cell._tc.get_or_add_tcPr().append(tc_borders)


def set_cell_shading(cell: Any, fill_hex: str) -> None:
    cell._tc.get_or_add_tcPr().append(_shading_element(fill_hex))


def set_cell_margins(cell: Any, margins: CellMargins) -> None:
    """Set cell padding in twips (dxa)."""
    tc_mar = OxmlElement("w:tcMar")
    for side, value in (
        ("top", margins.top),
        ("left", margins.left),
        ("bottom", margins.bottom),
        ("right", margins.right),
    ):
        edge = OxmlElement(f"w:{side}")
        edge.set(qn("w:w"), str(value))
        edge.set(qn("w:type"), "dxa")
        tc_mar.append(edge)
    cell._tc.get_or_add_tcPr().append(tc_mar)


def set_table_full_width(table: Any) -> None:
    """Stretch the table to 100% of the text column (``pct`` is in fiftieths of a percent)."""
    tbl_pr = table._tbl.tblPr
    tbl_w = tbl_pr.find(qn("w:tblW"))
    if tbl_w is None:
        tbl_w = OxmlElement("w:tblW")
        tbl_pr.append(tbl_w)
    tbl_w.set(qn("w:type"), "pct")
    tbl_w.set(qn("w:w"), "5000")
