"""Exceptions raised while decoding or encoding symbol records.

Unknown input keys and unregistered mixins are never errors; they are
dropped by the dispatch layer.
"""

from __future__ import annotations


class SymbolDecodeError(Exception):
    """Raised when a symbol record cannot be decoded."""


class StructuralDecodeError(SymbolDecodeError):
    """A required core field is missing or has the wrong shape."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class MixinPayloadError(SymbolDecodeError):
    """A recognized mixin rejected its own payload."""

    def __init__(self, message: str, *, key: str) -> None:
        super().__init__(message)
        self.key = key


class SymbolEncodeError(Exception):
    """Raised when a symbol record cannot be serialized."""


__all__ = [
    "MixinPayloadError",
    "StructuralDecodeError",
    "SymbolDecodeError",
    "SymbolEncodeError",
]
