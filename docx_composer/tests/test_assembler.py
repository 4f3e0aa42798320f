"""Tests for section concatenation and page break insertion."""
import unittest

from docx_composer.builder.assembler import DocumentAssembler, assemble
from docx_composer.builder.content_builders import build_body, build_header
from docx_composer.builder.styles_loader import load_default_registry
from docx_composer.config import DEFAULT_PAGE_GEOMETRY
from docx_composer.errors import AssemblyError
from docx_composer.model.document_model import DocumentMetadata, PageGeometry, Section
from docx_composer.model.elements import PageBreak


class DocumentAssemblerTest(unittest.TestCase):
    """Validate ordering, break insertion and freezing."""

    def setUp(self) -> None:
        self.registry = load_default_registry()
        self.geometry = PageGeometry.from_mapping(DEFAULT_PAGE_GEOMETRY)

    def _section(self, name: str, *extra) -> Section:
        return Section(
            title=name,
            nodes=(build_header(name, self.registry), build_body(f"{name} body", self.registry), *extra),
        )

    def test_breaks_inserted_between_sections(self) -> None:
        sections = [self._section("One"), self._section("Two"), self._section("Three")]
        document = assemble(sections, self.geometry)

        break_positions = [i for i, node in enumerate(document.body) if isinstance(node, PageBreak)]
        self.assertEqual(break_positions, [2, 5])
        self.assertEqual(len(document.body), 8)
        self.assertEqual(document.body[3].text, "Two")
        self.assertEqual(document.body[6].text, "Three")

    def test_sections_are_not_modified(self) -> None:
        sections = [self._section("One"), self._section("Two")]
        document = assemble(sections, self.geometry)

        self.assertEqual(document.sections, tuple(sections))
        self.assertEqual(document.body[:2], sections[0].nodes)
        self.assertEqual(document.body[3:], sections[1].nodes)

    def test_existing_trailing_break_is_respected(self) -> None:
        sections = [self._section("One", PageBreak()), self._section("Two")]
        document = assemble(sections, self.geometry)

        breaks = [node for node in document.body if isinstance(node, PageBreak)]
        self.assertEqual(len(breaks), 1)
        self.assertIsInstance(document.body[2], PageBreak)

    def test_existing_leading_break_is_respected(self) -> None:
        second = Section(title="Two", nodes=(PageBreak(), build_header("Two", self.registry)))
        document = assemble([self._section("One"), second], self.geometry)

        self.assertEqual(sum(isinstance(node, PageBreak) for node in document.body), 1)

    def test_single_section_has_no_breaks(self) -> None:
        document = assemble([self._section("Only")], self.geometry)
        self.assertFalse(any(isinstance(node, PageBreak) for node in document.body))

    def test_empty_sections_are_skipped(self) -> None:
        sections = [self._section("One"), Section(title="Empty", nodes=()), self._section("Two")]
        document = assemble(sections, self.geometry)

        self.assertEqual(sum(isinstance(node, PageBreak) for node in document.body), 1)
        self.assertEqual(len(document.sections), 3)

    def test_geometry_and_metadata_applied(self) -> None:
        metadata = DocumentMetadata(title="Guide", author="Design")
        document = assemble([self._section("One")], self.geometry, metadata)

        self.assertEqual(document.geometry.width, 12240)
        self.assertEqual(document.geometry.usable_width, 12240 - 2 * 1080)
        self.assertIs(document.metadata, metadata)

    def test_assembler_frozen_after_build(self) -> None:
        assembler = DocumentAssembler(self.geometry)
        assembler.add_section(self._section("One"))
        document = assembler.build()

        self.assertIs(assembler.build(), document)
        with self.assertRaises(AssemblyError):
            assembler.add_section(self._section("Two"))

    def test_document_is_immutable(self) -> None:
        document = assemble([self._section("One")], self.geometry)
        with self.assertRaises(AttributeError):
            document.body = ()  # type: ignore[misc]


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
