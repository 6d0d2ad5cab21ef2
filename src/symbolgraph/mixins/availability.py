"""Availability of a symbol across platforms and language versions."""

from __future__ import annotations

from typing import Any

from symbolgraph.mixins.base import Mixin
from symbolgraph.models import WireModel


class SemanticVersion(WireModel):
    major: int
    minor: int | None = None
    patch: int | None = None

    def __str__(self) -> str:
        parts = [self.major, self.minor, self.patch]
        return ".".join(str(part) for part in parts if part is not None)


class AvailabilityItem(WireModel):
    """Availability on a single domain, such as a platform."""

    domain: str | None = None
    introduced: SemanticVersion | None = None
    deprecated: SemanticVersion | None = None
    obsoleted: SemanticVersion | None = None
    message: str | None = None
    renamed: str | None = None
    is_unconditionally_deprecated: bool | None = None
    is_unconditionally_unavailable: bool | None = None
    will_eventually_be_deprecated: bool | None = None


class Availability(Mixin):
    """A list of availability items; the payload is a JSON array."""

    mixin_key = "availability"

    items: list[AvailabilityItem]

    @classmethod
    def from_payload(cls, payload: Any) -> Availability:
        return cls.model_validate({"items": payload})

    def to_payload(self) -> Any:
        return [item.to_wire() for item in self.items]


__all__ = ["Availability", "AvailabilityItem", "SemanticVersion"]
