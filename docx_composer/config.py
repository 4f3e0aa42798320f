"""Fixed configuration: style tokens, page geometry and table width."""
from __future__ import annotations

from typing import Dict, Mapping

# Usable table width in twips; tables always span this width regardless of margins.
DEFAULT_TABLE_WIDTH_TWIPS = 9360

# US Letter with 0.75" margins.
DEFAULT_PAGE_GEOMETRY: Mapping[str, int] = {
    "width": 12240,
    "height": 15840,
    "margin_top": 1080,
    "margin_right": 1080,
    "margin_bottom": 1080,
    "margin_left": 1080,
}

DEFAULT_OUTPUT_NAME = "HotStreak_Comprehensive_Style_Guide.docx"
DEFAULT_TITLE = "HotStreak Comprehensive Style Guide"
DEFAULT_AUTHOR = "HotStreak Design"

DEFAULT_STYLE_CONFIG: Dict[str, Mapping[str, object]] = {
    "colors": {
        "primary": "0066FF",
        "deep": "0A1628",
        "glow": "00A3FF",
        "soft": "1A3A5C",
        "ice": "E0F4FF",
        "glass": "1E3A5F",
        "accent": "00D4FF",
        "white": "FFFFFF",
        "light-gray": "B8C5D9",
        "success": "00FF7F",
        "error": "FF3B30",
        "warning": "FFD700",
        "live": "FF416C",
        "table-shade-1": "E0F4FF",
        "table-shade-2": "FFFFFF",
        "table-border": "00A3FF",
    },
    # Text hierarchy on the light page: one hue at fixed opacities.
    "text_levels": {
        "text-primary": {"color": "0A1628", "opacity": 1.0},
        "text-secondary": {"color": "0A1628", "opacity": 0.7},
        "text-muted": {"color": "0A1628", "opacity": 0.5},
        "text-disabled": {"color": "0A1628", "opacity": 0.3},
    },
    "font_sizes": {
        "cover-title": 36.0,
        "display": 24.0,
        "cover-subtitle": 20.0,
        "headline": 18.0,
        "title": 14.0,
        "bullet": 12.0,
        "body": 11.0,
        "table-header": 10.0,
        "label": 10.0,
        "table-cell": 9.0,
        "code": 9.0,
    },
    "fonts": {
        "font-heading": "Arial",
        "font-body": "Arial",
        "font-code": "Courier New",
    },
    # Paragraph spacing in points.
    "spacing": {
        "space-header-before": 20.0,
        "space-header-after": 10.0,
        "space-subheader-before": 15.0,
        "space-subheader-after": 7.5,
        "space-body-after": 6.0,
        "space-bullet-after": 7.5,
        "space-code-edge": 5.0,
        "space-cover-top": 100.0,
    },
    "radius": {
        "radius-sm": 8.0,
        "radius-md": 16.0,
        "radius-lg": 24.0,
        "radius-xl": 32.0,
        "radius-full": 9999.0,
    },
}
