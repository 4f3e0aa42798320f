"""Checks that content text can be stored in WordprocessingML."""
from __future__ import annotations

import re
from typing import Iterator, Tuple

from docx_composer.errors import EncodingError
from docx_composer.model.document_model import Document
from docx_composer.model.elements import Body, Bullet, CodeBlock, ContentNode, Header, SubHeader, Table, Title

# Characters outside the XML 1.0 Char production; tab, newline and carriage return are allowed.
INVALID_XML_CHARS_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def find_invalid_char(text: str) -> int:
    """Return the index of the first character XML cannot carry, or -1."""
    match = INVALID_XML_CHARS_PATTERN.search(text)
    return match.start() if match else -1


def iter_node_text(node: ContentNode) -> Iterator[Tuple[str, str]]:
    """Yield ``(location, text)`` for every text run a node renders."""
    kind = type(node).__name__
    if isinstance(node, (Header, SubHeader, Body, Title)):
        yield kind, node.text
    elif isinstance(node, Bullet):
        yield f"{kind} marker", node.marker
        yield f"{kind} label", node.label
        yield f"{kind} description", node.description
    elif isinstance(node, CodeBlock):
        for number, line in enumerate(node.lines, start=1):
            yield f"{kind} line {number}", line
    elif isinstance(node, Table):
        for column, header in enumerate(node.headers):
            yield f"{kind} header {column}", header
        for row_index, row in enumerate(node.rows):
            for column, cell in enumerate(row):
                yield f"{kind} cell ({row_index}, {column})", cell


def check_document_text(document: Document) -> None:
    """Raise ``EncodingError`` for the first unsupported character in the document."""
    candidates = [("title", document.metadata.title), ("author", document.metadata.author)]
    for index, node in enumerate(document.body):
        candidates.extend((f"node {index} {location}", text) for location, text in iter_node_text(node))
    for location, text in candidates:
        position = find_invalid_char(text)
        if position >= 0:
            raise EncodingError(
                f"Unsupported character U+{ord(text[position]):04X} at offset {position} in {location}"
            )
