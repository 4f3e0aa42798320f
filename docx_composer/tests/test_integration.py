"""
Integration tests for the complete style guide pipeline.

Runs registry loading, content building, assembly and serialization end to end.
"""

import json
import tempfile
import unittest
import zipfile
from datetime import datetime, timezone
from pathlib import Path

from docx import Document as open_docx

from docx_composer.builder.styles_loader import load_default_registry
from docx_composer.content.style_guide import CONTENTS, DIVIDER, build_style_guide_sections
from docx_composer.main import build_document, main, run, write_document
from docx_composer.model.document_model import DocumentMetadata
from docx_composer.model.elements import CodeBlock, Header, PageBreak, Spacer, Table, Title


class StyleGuideContentTest(unittest.TestCase):
    """The static content builds cleanly against the default registry."""

    def setUp(self) -> None:
        self.registry = load_default_registry()

    def test_sections_build(self) -> None:
        sections = build_style_guide_sections(self.registry)

        self.assertEqual(sections[0].title, "Cover")
        self.assertEqual(sections[-1].title, "Closing")
        self.assertTrue(all(section.nodes for section in sections))

    def test_all_twenty_chapters_present(self) -> None:
        sections = build_style_guide_sections(self.registry)
        headers = [node.text for section in sections for node in section.nodes if isinstance(node, Header)]

        self.assertEqual(len(headers), 20)
        self.assertEqual([text.split(".")[0] for text in headers], [str(number) for number in range(1, 21)])
        self.assertEqual(headers[8], "9. HOME TAB STYLING")
        self.assertEqual(headers[-1], "20. CSS VARIABLES (COPY-PASTE)")

    def test_contents_lists_every_chapter(self) -> None:
        self.assertEqual(len(CONTENTS), 20)
        self.assertTrue(CONTENTS[2].endswith(" 6"))
        self.assertTrue(CONTENTS[-1].startswith("20. CSS Variables"))
        self.assertTrue(CONTENTS[-1].endswith(" 48"))

    def test_closing_opens_with_spacer_and_divider(self) -> None:
        closing = build_style_guide_sections(self.registry)[-1]

        self.assertIsInstance(closing.nodes[0], Spacer)
        self.assertEqual(closing.nodes[0].paragraph.space_before_pt, 100.0)
        self.assertIsInstance(closing.nodes[1], Title)
        self.assertEqual(closing.nodes[1].text, DIVIDER)
        self.assertEqual(closing.nodes[2].text, "HOTSTREAK")

    def test_one_break_per_section_boundary(self) -> None:
        document = build_document(self.registry)
        breaks = sum(isinstance(node, PageBreak) for node in document.body)
        self.assertEqual(breaks, len(document.sections) - 1)

    def test_tables_and_code_present(self) -> None:
        document = build_document(self.registry)
        tables = [node for node in document.body if isinstance(node, Table)]
        code = [node for node in document.body if isinstance(node, CodeBlock)]

        self.assertGreater(len(tables), 10)
        self.assertEqual(len(code), 5)
        for table in tables:
            self.assertTrue(all(len(row) == len(table.headers) for row in table.rows))


class PipelineTest(unittest.IsolatedAsyncioTestCase):
    """Serialize the full guide."""

    async def test_full_guide_round_trips_through_python_docx(self) -> None:
        metadata = DocumentMetadata(title="Guide", author="Design", created=datetime(2024, 1, 1, tzinfo=timezone.utc))
        document = build_document(load_default_registry(), metadata)

        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "guide.docx"
            await write_document(document, target)
            doc = open_docx(str(target))

        texts = [p.text for p in doc.paragraphs]
        self.assertIn("HOTSTREAK", texts)
        self.assertIn("1. DESIGN PHILOSOPHY", texts)
        self.assertEqual(len(doc.tables), sum(isinstance(node, Table) for node in document.body))


class MainEntryPointTest(unittest.TestCase):
    """Process boundary: exit status and reported errors."""

    def test_main_writes_document(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "guide.docx"
            status = main(str(target))

            self.assertEqual(status, 0)
            self.assertTrue(zipfile.is_zipfile(target))

    def test_main_dumps_debug_tree(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "guide.docx"
            debug_dir = Path(tmp) / "debug"
            status = main(str(target), debug_dir=str(debug_dir))

            payload = json.loads((debug_dir / "document.json").read_text(encoding="utf-8"))
        self.assertEqual(status, 0)
        self.assertEqual(payload["type"], "Document")
        self.assertEqual(payload["body"][0]["type"], "Spacer")

    def test_main_reports_style_errors(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            styles = Path(tmp) / "styles.json"
            styles.write_text(json.dumps({"colors": {"accent": "not-a-colour"}}))
            target = Path(tmp) / "guide.docx"

            with self.assertLogs("docx_composer.main", level="ERROR") as logs:
                status = main(str(target), styles_file=str(styles))

            self.assertEqual(status, 1)
            self.assertFalse(target.exists())
        self.assertIn("StyleConfigError", logs.output[0])

    def test_incomplete_styles_abort_build(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            styles = Path(tmp) / "styles.json"
            styles.write_text(json.dumps({"colors": {"accent": "00D4FF"}}))
            target = Path(tmp) / "guide.docx"

            with self.assertLogs("docx_composer.main", level="ERROR") as logs:
                status = run([str(target), "--styles", str(styles)])

            self.assertEqual(status, 1)
            self.assertFalse(target.exists())
        self.assertIn("UnknownStyleError", logs.output[0])

    def test_non_utf8_styles_file_reported(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            styles = Path(tmp) / "styles.json"
            styles.write_bytes(b'{"colors": {"accent": "\xff\xfe"}}')
            target = Path(tmp) / "guide.docx"

            with self.assertLogs("docx_composer.main", level="ERROR") as logs:
                status = run([str(target), "--styles", str(styles)])

            self.assertEqual(status, 1)
            self.assertFalse(target.exists())
        self.assertIn("StyleConfigError", logs.output[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
