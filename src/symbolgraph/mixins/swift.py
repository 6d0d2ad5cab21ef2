"""Swift-specific mixins: extension context and generics."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from symbolgraph.mixins.base import Mixin
from symbolgraph.models import WireModel

ConstraintKind = Literal["conformance", "superclass", "sameType", "sameShape"]


class GenericConstraint(WireModel):
    """A requirement such as ``T: Hashable`` or ``T == Int``."""

    kind: ConstraintKind
    lhs: str
    rhs: str


class GenericParameter(WireModel):
    name: str
    index: int
    depth: int


class SwiftExtension(Mixin):
    """The extension context in which a symbol was defined.

    ``extended_module`` is the module whose type was extended, which may
    differ from the module declaring the symbol.
    """

    mixin_key = "swiftExtension"

    extended_module: str
    type_kind: str | None = None
    constraints: list[GenericConstraint] = Field(default_factory=list)

    def to_payload(self) -> Any:
        payload: dict[str, Any] = {"extendedModule": self.extended_module}
        if self.type_kind is not None:
            payload["typeKind"] = self.type_kind
        if self.constraints:
            payload["constraints"] = [c.to_wire() for c in self.constraints]
        return payload


class SwiftGenerics(Mixin):
    """Generic parameters and constraints of a symbol."""

    mixin_key = "swiftGenerics"

    parameters: list[GenericParameter] = Field(default_factory=list)
    constraints: list[GenericConstraint] = Field(default_factory=list)

    def to_payload(self) -> Any:
        payload: dict[str, Any] = {}
        if self.parameters:
            payload["parameters"] = [p.to_wire() for p in self.parameters]
        if self.constraints:
            payload["constraints"] = [c.to_wire() for c in self.constraints]
        return payload


__all__ = [
    "ConstraintKind",
    "GenericConstraint",
    "GenericParameter",
    "SwiftExtension",
    "SwiftGenerics",
]
