"""Style model captures named visual tokens in a normalized form."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Type, TypeVar, Union

from docx_composer.errors import UnknownStyleError


@dataclass(frozen=True, slots=True)
class ColorToken:
    """Named colour, optionally drawn at a fixed opacity."""

    name: str
    color_hex: str
    opacity: float = 1.0

    def effective_hex(self, background: str = "FFFFFF") -> str:
        """Return the colour blended over ``background`` at this token's opacity."""
        if self.opacity >= 1.0:
            return self.color_hex
        channels = []
        for offset in (0, 2, 4):
            fg = int(self.color_hex[offset : offset + 2], 16)
            bg = int(background[offset : offset + 2], 16)
            channels.append(round(fg * self.opacity + bg * (1.0 - self.opacity)))
        return "".join(f"{value:02X}" for value in channels)


@dataclass(frozen=True, slots=True)
class SizeToken:
    """Named measurement in points (font size, spacing or radius)."""

    name: str
    size_pt: float


@dataclass(frozen=True, slots=True)
class FontToken:
    """Font family bound to a semantic role."""

    name: str
    family: str


StyleToken = Union[ColorToken, SizeToken, FontToken]

_T = TypeVar("_T", ColorToken, SizeToken, FontToken)


class StyleRegistry:
    """Read-only collection of style tokens keyed by name."""

    def __init__(self, tokens: Mapping[str, StyleToken]):
        self._tokens = MappingProxyType(dict(tokens))

    def resolve(self, name: str) -> StyleToken:
        """Return the token registered under ``name``."""
        try:
            return self._tokens[name]
        except KeyError:
            raise UnknownStyleError(name) from None

    def color(self, name: str) -> ColorToken:
        return self._typed(name, ColorToken)

    def size(self, name: str) -> SizeToken:
        return self._typed(name, SizeToken)

    def font(self, name: str) -> FontToken:
        return self._typed(name, FontToken)

    def all(self) -> Mapping[str, StyleToken]:
        """Return read-only view of registered tokens."""
        return self._tokens

    def __contains__(self, name: object) -> bool:
        return name in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def _typed(self, name: str, kind: Type[_T]) -> _T:
        token = self.resolve(name)
        if not isinstance(token, kind):
            raise UnknownStyleError(name, f"expected {kind.__name__}, found {type(token).__name__}")
        return token
