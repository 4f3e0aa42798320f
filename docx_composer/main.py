"""Entry-point for the style guide composition pipeline."""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from docx_composer.builder.assembler import assemble
from docx_composer.builder.styles_loader import StylesLoader
from docx_composer.config import DEFAULT_AUTHOR, DEFAULT_OUTPUT_NAME, DEFAULT_PAGE_GEOMETRY, DEFAULT_TITLE
from docx_composer.content.style_guide import build_style_guide_sections
from docx_composer.errors import ComposerError
from docx_composer.model.document_model import Document, DocumentMetadata, PageGeometry
from docx_composer.model.style_model import StyleRegistry
from docx_composer.renderer.docx_renderer import DocxRenderer
from docx_composer.utils.debug import DebugDumper
from docx_composer.utils.logger import get_logger, set_verbosity

LOGGER = get_logger(__name__)


def build_document(registry: StyleRegistry, metadata: Optional[DocumentMetadata] = None) -> Document:
    """Build every section from the static content and assemble them."""
    sections = build_style_guide_sections(registry)
    metadata = metadata or DocumentMetadata(title=DEFAULT_TITLE, author=DEFAULT_AUTHOR)
    return assemble(sections, PageGeometry.from_mapping(DEFAULT_PAGE_GEOMETRY), metadata)


async def write_document(document: Document, output_path: Path) -> Path:
    """Serialize the document and persist it at ``output_path``."""
    return await DocxRenderer(output_path).render(document)


def main(
    output_file: Optional[str] = None,
    styles_file: Optional[str] = None,
    debug_dir: Optional[str] = None,
) -> int:
    """Run the registry -> builders -> assembler -> serializer pipeline."""
    output_path = Path(output_file or DEFAULT_OUTPUT_NAME).resolve()
    try:
        loader = StylesLoader.from_json_file(Path(styles_file)) if styles_file else StylesLoader()
        registry = loader.load()
        LOGGER.info("Building document with %d style tokens", len(registry))
        document = build_document(registry)
        if debug_dir:
            dump_path = DebugDumper(Path(debug_dir)).dump(document)
            LOGGER.info("Dumped document tree to %s", dump_path)
        asyncio.run(write_document(document, output_path))
    except (ComposerError, OSError) as exc:
        LOGGER.error("%s: %s", type(exc).__name__, exc)
        return 1

    LOGGER.info("Style guide created successfully: %s", output_path)
    return 0


def run(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Render the HotStreak style guide into a .docx document")
    parser.add_argument("output", nargs="?", help=f"Path of the .docx to write (default: {DEFAULT_OUTPUT_NAME})")
    parser.add_argument("--styles", help="JSON file replacing the built-in style configuration")
    parser.add_argument("--debug-dir", help="Directory to dump the assembled document tree as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    set_verbosity(args.verbose)
    return main(args.output, styles_file=args.styles, debug_dir=args.debug_dir)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(run())
