"""Tests for .docx serialization and persistence."""
import io
import tempfile
import unittest
import zipfile
from datetime import datetime, timezone
from pathlib import Path

from docx import Document as open_docx
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor, Twips

from docx_composer.builder.assembler import assemble
from docx_composer.builder.content_builders import (
    build_body,
    build_bullet,
    build_code,
    build_header,
    build_sub_header,
    build_table,
)
from docx_composer.builder.styles_loader import load_default_registry
from docx_composer.config import DEFAULT_PAGE_GEOMETRY
from docx_composer.errors import EncodingError
from docx_composer.model.document_model import DocumentMetadata, PageGeometry, Section
from docx_composer.renderer.docx_renderer import DocxRenderer, normalize_archive

CREATED = datetime(2024, 3, 15, 19, 30, 0, tzinfo=timezone.utc)


class DocxRendererTest(unittest.IsolatedAsyncioTestCase):
    """Serialize small documents and read them back with python-docx."""

    def setUp(self) -> None:
        self.registry = load_default_registry()
        self.geometry = PageGeometry.from_mapping(DEFAULT_PAGE_GEOMETRY)
        self.metadata = DocumentMetadata(title="Guide", author="Design", created=CREATED)

    def _document(self, *extra_nodes):
        first = Section(
            title="Philosophy",
            nodes=(
                build_header("1. DESIGN PHILOSOPHY", self.registry),
                build_body("Blue Aura aesthetic.", self.registry),
                build_bullet("Glass Layering", "Cards float on glass.", self.registry),
                *extra_nodes,
            ),
        )
        second = Section(
            title="Colors",
            nodes=(
                build_sub_header("Primary Colors", self.registry),
                build_table(["NAME", "HEX"], [["Primary", "#0066FF"], ["Glow", "#00A3FF"]], self.registry),
                build_code([".glass-card {", "  border-radius: 24px;", "}"], self.registry),
            ),
        )
        return assemble([first, second], self.geometry, self.metadata)

    async def test_serialize_is_byte_identical(self) -> None:
        renderer = DocxRenderer()
        document = self._document()

        first = await renderer.serialize(document)
        second = await renderer.serialize(document)

        self.assertEqual(first, second)
        self.assertTrue(zipfile.is_zipfile(io.BytesIO(first)))

    async def test_archive_entries_use_document_timestamp(self) -> None:
        data = await DocxRenderer().serialize(self._document())

        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            names = archive.namelist()
            stamps = {info.date_time for info in archive.infolist()}
        self.assertIn("word/document.xml", names)
        self.assertEqual(stamps, {(2024, 3, 15, 19, 30, 0)})

    async def test_page_geometry_and_core_properties(self) -> None:
        data = await DocxRenderer().serialize(self._document())
        doc = open_docx(io.BytesIO(data))

        section = doc.sections[0]
        self.assertEqual(section.page_width, Twips(12240))
        self.assertEqual(section.page_height, Twips(15840))
        self.assertEqual(section.left_margin, Twips(1080))
        self.assertEqual(section.top_margin, Twips(1080))
        self.assertEqual(doc.core_properties.title, "Guide")
        self.assertEqual(doc.core_properties.author, "Design")

    async def test_paragraph_runs_carry_styles(self) -> None:
        data = await DocxRenderer().serialize(self._document())
        doc = open_docx(io.BytesIO(data))
        paragraphs = {p.text: p for p in doc.paragraphs if p.text}

        header_run = paragraphs["1. DESIGN PHILOSOPHY"].runs[0]
        self.assertTrue(header_run.bold)
        self.assertTrue(header_run.italic)
        self.assertEqual(header_run.font.size, Pt(18))
        self.assertEqual(header_run.font.color.rgb, RGBColor.from_string("00D4FF"))
        self.assertEqual(header_run.font.name, "Arial")

        bullet = paragraphs["✦ Glass Layering: Cards float on glass."]
        self.assertEqual(len(bullet.runs), 3)
        self.assertTrue(bullet.runs[1].italic)

        code_line = paragraphs["  border-radius: 24px;"]
        self.assertEqual(code_line.runs[0].font.name, "Courier New")

    async def test_page_break_between_sections(self) -> None:
        data = await DocxRenderer().serialize(self._document())

        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            xml = archive.read("word/document.xml").decode("utf-8")
        self.assertEqual(xml.count('w:type="page"'), 1)

    async def test_table_shading_and_alignment(self) -> None:
        data = await DocxRenderer().serialize(self._document())
        doc = open_docx(io.BytesIO(data))
        table = doc.tables[0]

        def fill(row: int, col: int) -> str:
            tc_pr = table.cell(row, col)._tc.tcPr
            return tc_pr.find(qn("w:shd")).get(qn("w:fill"))

        self.assertEqual(len(table.rows), 3)
        self.assertEqual(table.cell(0, 0).text, "NAME")
        self.assertEqual(fill(0, 1), "0A1628")
        self.assertEqual(fill(1, 0), "E0F4FF")
        self.assertEqual(fill(2, 1), "FFFFFF")
        self.assertEqual(table.cell(1, 0).paragraphs[0].alignment, WD_ALIGN_PARAGRAPH.LEFT)
        self.assertEqual(table.cell(1, 1).paragraphs[0].alignment, WD_ALIGN_PARAGRAPH.CENTER)
        self.assertEqual(table.cell(1, 1).width, Twips(4680))

    async def test_unsupported_character_raises_encoding_error(self) -> None:
        document = self._document(build_body("bell\x07", self.registry))

        with self.assertRaises(EncodingError):
            await DocxRenderer().serialize(document)

    async def test_encoding_error_leaves_no_file(self) -> None:
        document = self._document(build_body("bad\x00text", self.registry))
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "guide.docx"
            with self.assertRaises(EncodingError):
                await DocxRenderer(target).render(document)
            self.assertFalse(target.exists())
            self.assertEqual(list(Path(tmp).iterdir()), [])

    async def test_render_persists_bytes(self) -> None:
        document = self._document()
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "out" / "guide.docx"
            written = await DocxRenderer(target).render(document)
            expected = await DocxRenderer().serialize(document)

            self.assertEqual(written, target)
            self.assertEqual(target.read_bytes(), expected)

    async def test_storage_failure_propagates_os_error(self) -> None:
        document = self._document()
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocker"
            blocker.write_text("not a directory")
            with self.assertRaises(OSError):
                await DocxRenderer(blocker / "guide.docx").render(document)


class NormalizeArchiveTest(unittest.TestCase):
    """Timestamps are rewritten, contents preserved."""

    def test_entries_rewritten_with_fixed_time(self) -> None:
        source = io.BytesIO()
        with zipfile.ZipFile(source, "w") as archive:
            archive.writestr("a.xml", "<a/>")
            archive.writestr("b.xml", "<b/>")

        data = normalize_archive(source.getvalue(), datetime(1970, 1, 1))

        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            self.assertEqual(archive.namelist(), ["a.xml", "b.xml"])
            self.assertEqual(archive.read("b.xml"), b"<b/>")
            self.assertEqual({i.date_time for i in archive.infolist()}, {(1980, 1, 1, 0, 0, 0)})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
