"""Aggregate model combining page geometry, sections and metadata."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping, Optional, Tuple

from docx_composer.model.elements import ContentNode, PageBreak


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """Page size and margins in twips, shared by the whole document."""

    width: int
    height: int
    margin_top: int
    margin_right: int
    margin_bottom: int
    margin_left: int

    @classmethod
    def from_mapping(cls, values: Mapping[str, int]) -> "PageGeometry":
        return cls(
            width=int(values["width"]),
            height=int(values["height"]),
            margin_top=int(values["margin_top"]),
            margin_right=int(values["margin_right"]),
            margin_bottom=int(values["margin_bottom"]),
            margin_left=int(values["margin_left"]),
        )

    @property
    def usable_width(self) -> int:
        """Content width excluding left and right margins."""
        return self.width - self.margin_left - self.margin_right


@dataclass(frozen=True, slots=True)
class Section:
    """Ordered group of nodes treated as one page-breakable unit."""

    nodes: Tuple[ContentNode, ...]
    title: Optional[str] = None

    @property
    def starts_with_break(self) -> bool:
        return bool(self.nodes) and isinstance(self.nodes[0], PageBreak)

    @property
    def ends_with_break(self) -> bool:
        return bool(self.nodes) and isinstance(self.nodes[-1], PageBreak)


@dataclass(frozen=True, slots=True)
class DocumentMetadata:
    """Core properties written into the package."""

    title: str = ""
    author: str = ""
    created: datetime = field(default_factory=lambda: datetime.now(timezone.utc).replace(microsecond=0))


@dataclass(frozen=True, slots=True)
class Document:
    """Flattened document representation that the serializer consumes."""

    geometry: PageGeometry
    sections: Tuple[Section, ...]
    body: Tuple[ContentNode, ...]
    metadata: DocumentMetadata
