"""Declaration text and function signature mixins."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from symbolgraph.mixins.base import Mixin
from symbolgraph.models import DeclarationFragment, WireModel


class DeclarationFragments(Mixin):
    """The declaration of a symbol, split into syntax-highlightable tokens."""

    mixin_key = "declarationFragments"

    fragments: list[DeclarationFragment]

    @classmethod
    def from_payload(cls, payload: Any) -> DeclarationFragments:
        return cls.model_validate({"fragments": payload})

    def to_payload(self) -> Any:
        return [fragment.to_wire() for fragment in self.fragments]

    @property
    def text(self) -> str:
        return "".join(fragment.spelling for fragment in self.fragments)


class FunctionParameter(WireModel):
    """A parameter of a function, with closure parameters as children."""

    name: str
    internal_name: str | None = None
    declaration_fragments: list[DeclarationFragment] | None = None
    children: list[FunctionParameter] | None = None


class FunctionSignature(Mixin):
    """The parameters and return type of a function-like symbol."""

    mixin_key = "functionSignature"

    parameters: list[FunctionParameter] = Field(default_factory=list)
    returns: list[DeclarationFragment] = Field(default_factory=list)

    def to_payload(self) -> Any:
        payload: dict[str, Any] = {}
        if self.parameters:
            payload["parameters"] = [param.to_wire() for param in self.parameters]
        if self.returns:
            payload["returns"] = [fragment.to_wire() for fragment in self.returns]
        return payload


__all__ = ["DeclarationFragments", "FunctionParameter", "FunctionSignature"]
