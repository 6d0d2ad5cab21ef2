"""Snippet mixin for symbols that stand for example code."""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from symbolgraph.mixins.base import Mixin
from symbolgraph.models import WireModel


class SliceRange(WireModel):
    """Half-open range of line indices into ``Snippet.lines``."""

    start: int
    end: int

    @model_validator(mode="after")
    def _check_order(self) -> SliceRange:
        if self.end < self.start:
            msg = f"slice end {self.end} precedes start {self.start}"
            raise ValueError(msg)
        return self


class Snippet(Mixin):
    mixin_key = "snippet"

    language: str | None = None
    lines: list[str]
    slices: dict[str, SliceRange] = Field(default_factory=dict)

    def to_payload(self) -> Any:
        payload: dict[str, Any] = {"lines": list(self.lines)}
        if self.language is not None:
            payload["language"] = self.language
        if self.slices:
            payload["slices"] = {
                name: self.slices[name].to_wire() for name in sorted(self.slices)
            }
        return payload

    def slice_lines(self, name: str) -> list[str]:
        """Return the lines of a named slice; raises KeyError for unknown names."""
        bounds = self.slices[name]
        return self.lines[bounds.start : bounds.end]


__all__ = ["SliceRange", "Snippet"]
