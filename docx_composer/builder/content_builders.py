"""Pure builders mapping text and style references into content nodes.

Every builder resolves its styling from the registry up front, so the nodes it
returns are complete and the serializer never needs the registry.
"""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from docx_composer.builder.table_layout import layout_table, materialize_table
from docx_composer.config import DEFAULT_TABLE_WIDTH_TWIPS
from docx_composer.errors import ContentError
from docx_composer.model.elements import (
    ALIGN_CENTER,
    Body,
    Bullet,
    CodeBlock,
    Header,
    PageBreak,
    ParagraphFormat,
    RunStyle,
    Spacer,
    SubHeader,
    Table,
    Title,
)
from docx_composer.model.style_model import StyleRegistry

BULLET_MARKER = "✦"
HEADLINE_STYLE = "headline"
SUB_HEADER_STYLE = "title"
DEFAULT_BODY_COLOR = "text-primary"


def build_header(text: str, registry: StyleRegistry) -> Header:
    """Chapter heading: headline size, accent colour on a deep band, bold italic."""
    return Header(
        text=text,
        style_ref=HEADLINE_STYLE,
        run_style=RunStyle(
            font=registry.font("font-heading").family,
            size_pt=registry.size(HEADLINE_STYLE).size_pt,
            color_hex=registry.color("accent").color_hex,
            bold=True,
            italic=True,
        ),
        paragraph=ParagraphFormat(
            space_before_pt=registry.size("space-header-before").size_pt,
            space_after_pt=registry.size("space-header-after").size_pt,
            shading_hex=registry.color("deep").color_hex,
        ),
    )


def build_sub_header(text: str, registry: StyleRegistry) -> SubHeader:
    return SubHeader(
        text=text,
        style_ref=SUB_HEADER_STYLE,
        run_style=RunStyle(
            font=registry.font("font-heading").family,
            size_pt=registry.size(SUB_HEADER_STYLE).size_pt,
            color_hex=registry.color("glow").color_hex,
            bold=True,
        ),
        paragraph=ParagraphFormat(
            space_before_pt=registry.size("space-subheader-before").size_pt,
            space_after_pt=registry.size("space-subheader-after").size_pt,
        ),
    )


def build_body(text: str, registry: StyleRegistry, color_ref: Optional[str] = None) -> Body:
    color_ref = color_ref or DEFAULT_BODY_COLOR
    return Body(
        text=text,
        color_ref=color_ref,
        run_style=RunStyle(
            font=registry.font("font-body").family,
            size_pt=registry.size("body").size_pt,
            color_hex=registry.color(color_ref).effective_hex(),
            bold=True,
        ),
        paragraph=ParagraphFormat(space_after_pt=registry.size("space-body-after").size_pt),
    )


def build_bullet(label: str, description: str, registry: StyleRegistry) -> Bullet:
    """Marker glyph, then ``label:`` in bold italic, then the description."""
    if not isinstance(label, str) or not label.strip():
        raise ContentError("Bullet label must be a non-empty string")
    if not isinstance(description, str) or not description.strip():
        raise ContentError(f"Bullet {label!r} needs a non-empty description")

    body_font = registry.font("font-body").family
    bullet_size = registry.size("bullet").size_pt
    return Bullet(
        label=label,
        description=description,
        marker=BULLET_MARKER,
        marker_style=RunStyle(
            font=body_font,
            size_pt=bullet_size,
            color_hex=registry.color("accent").color_hex,
            bold=True,
        ),
        label_style=RunStyle(
            font=body_font,
            size_pt=bullet_size,
            color_hex=registry.color("glow").color_hex,
            bold=True,
            italic=True,
        ),
        description_style=RunStyle(font=body_font, size_pt=registry.size("body").size_pt, bold=True),
        paragraph=ParagraphFormat(space_after_pt=registry.size("space-bullet-after").size_pt),
    )


def build_code(lines: Sequence[str], registry: StyleRegistry) -> CodeBlock:
    """Listing rendered one fixed-width row per line, order preserved."""
    for number, line in enumerate(lines, start=1):
        if "\n" in line or "\r" in line:
            raise ContentError(f"Code line {number} contains a line break")
    return CodeBlock(
        lines=tuple(lines),
        run_style=RunStyle(
            font=registry.font("font-code").family,
            size_pt=registry.size("code").size_pt,
            color_hex=registry.color("white").color_hex,
            bold=True,
        ),
        shading_hex=registry.color("deep").color_hex,
        padding_pt=registry.size("space-code-edge").size_pt,
    )


def build_table(
    headers: Iterable[str],
    rows: Iterable[Sequence[str]],
    registry: StyleRegistry,
    total_width: int = DEFAULT_TABLE_WIDTH_TWIPS,
) -> Table:
    headers, rows = materialize_table(headers, rows)
    layout = layout_table(headers, rows, registry, total_width=total_width)
    return Table(headers=headers, rows=rows, layout=layout)


def build_title(
    text: str,
    registry: StyleRegistry,
    *,
    size_ref: str = "display",
    color_ref: str = "primary",
    italic: bool = True,
    space_before_pt: float = 0.0,
    space_after_pt: float = 0.0,
) -> Title:
    return Title(
        text=text,
        run_style=RunStyle(
            font=registry.font("font-heading").family,
            size_pt=registry.size(size_ref).size_pt,
            color_hex=registry.color(color_ref).effective_hex(),
            bold=True,
            italic=italic,
        ),
        paragraph=ParagraphFormat(
            space_before_pt=space_before_pt,
            space_after_pt=space_after_pt,
            alignment=ALIGN_CENTER,
        ),
    )


def build_spacer(space_before_pt: float) -> Spacer:
    return Spacer(paragraph=ParagraphFormat(space_before_pt=space_before_pt))


def build_page_break() -> PageBreak:
    return PageBreak()
