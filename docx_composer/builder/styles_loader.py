"""Turn a style configuration mapping into a frozen registry."""
from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Dict, Mapping, Optional

from docx_composer.config import DEFAULT_STYLE_CONFIG
from docx_composer.errors import StyleConfigError
from docx_composer.model.style_model import ColorToken, FontToken, SizeToken, StyleRegistry, StyleToken
from docx_composer.utils.logger import get_logger

LOGGER = get_logger(__name__)

HEX_COLOR_PATTERN = re.compile(r"[0-9A-Fa-f]{6}")
SIZE_GROUPS = ("font_sizes", "spacing", "radius")
KNOWN_GROUPS = frozenset({"colors", "text_levels", "fonts", *SIZE_GROUPS})


class StylesLoader:
    """Validate style options and produce a registry."""

    def __init__(self, config: Optional[Mapping[str, Mapping[str, object]]] = None) -> None:
        self._config = DEFAULT_STYLE_CONFIG if config is None else config

    @classmethod
    def from_json_file(cls, path: Path) -> "StylesLoader":
        """Read an alternative configuration with the same shape as the default."""
        try:
            payload = json.loads(Path(path).read_text(encoding="utf-8"))
        except UnicodeDecodeError as exc:
            raise StyleConfigError(f"Style configuration {path} is not UTF-8 text: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise StyleConfigError(f"Style configuration {path} is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise StyleConfigError(f"Style configuration {path} must be a JSON object")
        return cls(payload)

    def load(self) -> StyleRegistry:
        """Validate every option group and return the resolved registry."""
        unknown = set(self._config) - KNOWN_GROUPS
        if unknown:
            raise StyleConfigError(f"Unknown style option groups: {', '.join(sorted(unknown))}")

        tokens: Dict[str, StyleToken] = {}
        for name, value in self._group("colors").items():
            self._register(tokens, ColorToken(name=name, color_hex=self._hex(name, value)))
        for name, value in self._group("text_levels").items():
            self._register(tokens, self._text_level(name, value))
        for group in SIZE_GROUPS:
            for name, value in self._group(group).items():
                self._register(tokens, SizeToken(name=name, size_pt=self._size(name, value)))
        for name, value in self._group("fonts").items():
            if not isinstance(value, str) or not value.strip():
                raise StyleConfigError(f"Font {name!r} must name a font family")
            self._register(tokens, FontToken(name=name, family=value))

        LOGGER.debug("Loaded %d style tokens", len(tokens))
        return StyleRegistry(tokens)

    def _group(self, key: str) -> Mapping[str, object]:
        group = self._config.get(key, {})
        if not isinstance(group, Mapping):
            raise StyleConfigError(f"Style option group {key!r} must be a mapping")
        return group

    def _register(self, tokens: Dict[str, StyleToken], token: StyleToken) -> None:
        if token.name in tokens:
            raise StyleConfigError(f"Style token {token.name!r} defined more than once")
        tokens[token.name] = token

    def _text_level(self, name: str, value: object) -> ColorToken:
        if not isinstance(value, Mapping):
            raise StyleConfigError(f"Text level {name!r} needs 'color' and 'opacity'")
        opacity = value.get("opacity", 1.0)
        if not isinstance(opacity, (int, float)) or not 0.0 <= opacity <= 1.0:
            raise StyleConfigError(f"Text level {name!r} opacity must be within [0, 1]")
        return ColorToken(name=name, color_hex=self._hex(name, value.get("color")), opacity=float(opacity))

    def _hex(self, name: str, value: object) -> str:
        if not isinstance(value, str) or not HEX_COLOR_PATTERN.fullmatch(value):
            raise StyleConfigError(f"Colour {name!r} must be a 6-digit hex string, got {value!r}")
        return value.upper()

    def _size(self, name: str, value: object) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise StyleConfigError(f"Size {name!r} must be a positive number, got {value!r}")
        return float(value)


def load_default_registry() -> StyleRegistry:
    return StylesLoader().load()
