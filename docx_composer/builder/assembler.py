"""Concatenate sections into one document with page breaks between them."""
from __future__ import annotations

from typing import Iterable, List, Optional

from docx_composer.errors import AssemblyError
from docx_composer.model.document_model import Document, DocumentMetadata, PageGeometry, Section
from docx_composer.model.elements import ContentNode, PageBreak
from docx_composer.utils.logger import get_logger

LOGGER = get_logger(__name__)


class DocumentAssembler:
    """Append-only collector of sections; frozen once ``build`` runs."""

    def __init__(self, geometry: PageGeometry, metadata: Optional[DocumentMetadata] = None) -> None:
        self._geometry = geometry
        self._metadata = metadata or DocumentMetadata()
        self._sections: List[Section] = []
        self._document: Optional[Document] = None

    def add_section(self, section: Section) -> "DocumentAssembler":
        if self._document is not None:
            raise AssemblyError("Document already assembled; sections can no longer be added")
        self._sections.append(section)
        return self

    def build(self) -> Document:
        """Flatten sections in order, inserting a break at each boundary."""
        if self._document is not None:
            return self._document

        body: List[ContentNode] = []
        inserted = 0
        previous: Optional[Section] = None
        for section in self._sections:
            if not section.nodes:
                LOGGER.debug("Skipping empty section %r", section.title)
                continue
            if previous is not None and not (previous.ends_with_break or section.starts_with_break):
                body.append(PageBreak())
                inserted += 1
            body.extend(section.nodes)
            previous = section

        LOGGER.debug("Assembled %d sections with %d inserted page breaks", len(self._sections), inserted)
        self._document = Document(
            geometry=self._geometry,
            sections=tuple(self._sections),
            body=tuple(body),
            metadata=self._metadata,
        )
        return self._document


def assemble(
    sections: Iterable[Section],
    geometry: PageGeometry,
    metadata: Optional[DocumentMetadata] = None,
) -> Document:
    assembler = DocumentAssembler(geometry, metadata)
    for section in sections:
        assembler.add_section(section)
    return assembler.build()
