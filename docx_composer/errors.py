"""Custom exceptions for docx-composer."""


class ComposerError(Exception):
    """Base exception for document composition."""


class UnknownStyleError(ComposerError, KeyError):
    """Style token is not present in the registry."""

    def __init__(self, name: str, detail: str = "not registered") -> None:
        super().__init__(name)
        self.name = name
        self.detail = detail

    def __str__(self) -> str:
        return f"Unknown style token {self.name!r}: {self.detail}"


class StyleConfigError(ComposerError, ValueError):
    """Style configuration is malformed."""


class ContentError(ComposerError, ValueError):
    """Builder received content it cannot turn into a node."""


class MalformedTableError(ContentError):
    """Table rows do not match the header shape."""


class AssemblyError(ComposerError):
    """Document assembly was used after it was frozen."""


class EncodingError(ComposerError):
    """Content cannot be encoded into the document container."""
