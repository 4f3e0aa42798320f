"""Render an assembled document into a WordprocessingML (.docx) package."""
from __future__ import annotations

import asyncio
import io
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Any, Tuple

from docx import Document as new_docx
from docx.shared import Twips

from docx_composer.errors import EncodingError
from docx_composer.model.document_model import Document, PageGeometry
from docx_composer.model.elements import (
    Body,
    Bullet,
    CodeBlock,
    ContentNode,
    Header,
    PageBreak,
    ParagraphFormat,
    Spacer,
    SubHeader,
    Table,
    Title,
)
from docx_composer.renderer.utils import (
    add_styled_run,
    apply_paragraph_format,
    set_cell_borders,
    set_cell_margins,
    set_cell_shading,
    set_table_full_width,
)
from docx_composer.utils.logger import get_logger
from docx_composer.utils.storage import write_bytes
from docx_composer.utils.xml_text import check_document_text

LOGGER = get_logger(__name__)

ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)


class DocxRenderer:
    """Produce a .docx package whose bytes depend only on the document value."""

    def __init__(self, output_path: Path | None = None) -> None:
        self._output_path = output_path

    async def serialize(self, document: Document) -> bytes:
        """Render the document to bytes in a worker thread."""
        check_document_text(document)
        return await asyncio.to_thread(self._render_bytes, document)

    async def render(self, document: Document) -> Path:
        """Serialize and persist to the configured output path."""
        if self._output_path is None:
            raise ValueError("DocxRenderer needs an output path to persist documents")
        data = await self.serialize(document)
        await write_bytes(self._output_path, data)
        LOGGER.info("Wrote %s (%d bytes)", self._output_path.name, len(data))
        return self._output_path

    # ------------------------------------------------------------------
    # Rendering
    def _render_bytes(self, document: Document) -> bytes:
        doc = new_docx()
        self._setup_page(doc, document.geometry)
        self._set_core_properties(doc, document)
        try:
            for node in document.body:
                self._render_node(doc, node)
        except ValueError as exc:
            # lxml rejects text that is not XML compatible.
            raise EncodingError(f"Content could not be encoded: {exc}") from exc

        buffer = io.BytesIO()
        doc.save(buffer)
        return normalize_archive(buffer.getvalue(), document.metadata.created)

    def _setup_page(self, doc: Any, geometry: PageGeometry) -> None:
        section = doc.sections[0]
        section.page_width = Twips(geometry.width)
        section.page_height = Twips(geometry.height)
        section.top_margin = Twips(geometry.margin_top)
        section.right_margin = Twips(geometry.margin_right)
        section.bottom_margin = Twips(geometry.margin_bottom)
        section.left_margin = Twips(geometry.margin_left)
        LOGGER.debug("Page: %dx%d twips, usable width %d", geometry.width, geometry.height, geometry.usable_width)

    def _set_core_properties(self, doc: Any, document: Document) -> None:
        metadata = document.metadata
        props = doc.core_properties
        props.title = metadata.title
        props.author = metadata.author
        props.last_modified_by = metadata.author
        props.created = metadata.created
        props.modified = metadata.created
        props.revision = 1

    def _render_node(self, doc: Any, node: ContentNode) -> None:
        if isinstance(node, (Header, SubHeader, Body, Title)):
            paragraph = doc.add_paragraph()
            apply_paragraph_format(paragraph, node.paragraph)
            add_styled_run(paragraph, node.text, node.run_style)
        elif isinstance(node, Bullet):
            self._render_bullet(doc, node)
        elif isinstance(node, CodeBlock):
            self._render_code(doc, node)
        elif isinstance(node, Table):
            self._render_table(doc, node)
        elif isinstance(node, Spacer):
            apply_paragraph_format(doc.add_paragraph(), node.paragraph)
        elif isinstance(node, PageBreak):
            doc.add_page_break()
        else:
            raise TypeError(f"Unsupported content node: {type(node).__name__}")

    def _render_bullet(self, doc: Any, bullet: Bullet) -> None:
        paragraph = doc.add_paragraph()
        apply_paragraph_format(paragraph, bullet.paragraph)
        add_styled_run(paragraph, f"{bullet.marker} ", bullet.marker_style)
        add_styled_run(paragraph, f"{bullet.label}: ", bullet.label_style)
        add_styled_run(paragraph, bullet.description, bullet.description_style)

    def _render_code(self, doc: Any, block: CodeBlock) -> None:
        last = len(block.lines) - 1
        for index, line in enumerate(block.lines):
            paragraph = doc.add_paragraph()
            apply_paragraph_format(
                paragraph,
                ParagraphFormat(
                    space_before_pt=block.padding_pt if index == 0 else 0.0,
                    space_after_pt=block.padding_pt if index == last else 0.0,
                    shading_hex=block.shading_hex,
                ),
            )
            add_styled_run(paragraph, line, block.run_style)

    def _render_table(self, doc: Any, table: Table) -> None:
        layout = table.layout
        docx_table = doc.add_table(rows=len(layout.rows), cols=len(layout.column_widths))
        docx_table.autofit = False
        set_table_full_width(docx_table)
        for column, width in zip(docx_table.columns, layout.column_widths):
            column.width = Twips(width)

        for docx_row, row in zip(docx_table.rows, layout.rows):
            for docx_cell, cell in zip(docx_row.cells, row.cells):
                docx_cell.width = Twips(cell.width)
                set_cell_borders(docx_cell, layout.border)
                set_cell_shading(docx_cell, cell.fill_hex)
                set_cell_margins(docx_cell, cell.margins)
                paragraph = docx_cell.paragraphs[0]
                apply_paragraph_format(paragraph, ParagraphFormat(alignment=cell.alignment))
                add_styled_run(paragraph, cell.text, cell.run_style)


def _zip_timestamp(created: datetime) -> Tuple[int, int, int, int, int, int]:
    stamp = (created.year, created.month, created.day, created.hour, created.minute, created.second)
    return max(stamp, ZIP_EPOCH)


def normalize_archive(data: bytes, created: datetime) -> bytes:
    """Rewrite every zip entry with the document timestamp so output is reproducible."""
    date_time = _zip_timestamp(created)
    output = io.BytesIO()
    with zipfile.ZipFile(io.BytesIO(data)) as source, zipfile.ZipFile(output, "w", zipfile.ZIP_DEFLATED) as target:
        for info in source.infolist():
            entry = zipfile.ZipInfo(info.filename, date_time=date_time)
            entry.compress_type = zipfile.ZIP_DEFLATED
            entry.external_attr = 0o644 << 16
            target.writestr(entry, source.read(info.filename))
    return output.getvalue()
