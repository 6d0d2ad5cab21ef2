"""Boolean mixins whose payload is a bare JSON boolean."""

from __future__ import annotations

from typing import Any

from pydantic import StrictBool

from symbolgraph.mixins.base import Mixin


class Mutability(Mixin):
    """Whether a variable or property is read-only."""

    mixin_key = "isReadOnly"

    is_read_only: StrictBool

    @classmethod
    def from_payload(cls, payload: Any) -> Mutability:
        return cls.model_validate({"is_read_only": payload})

    def to_payload(self) -> Any:
        return self.is_read_only


class SPI(Mixin):
    """Whether the symbol is published as a system programming interface."""

    mixin_key = "spi"

    is_spi: StrictBool

    @classmethod
    def from_payload(cls, payload: Any) -> SPI:
        return cls.model_validate({"is_spi": payload})

    def to_payload(self) -> Any:
        return self.is_spi


__all__ = ["SPI", "Mutability"]
