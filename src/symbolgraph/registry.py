"""Mixin lookup: the built-in descriptor table plus per-call extensions."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from symbolgraph.mixins import (
    SPI,
    Availability,
    DeclarationFragments,
    FunctionSignature,
    Location,
    Mutability,
    Snippet,
    SwiftExtension,
    SwiftGenerics,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from symbolgraph.mixins import Mixin, MixinDescriptor

BUILTIN_MIXIN_TYPES: tuple[type[Mixin], ...] = (
    Availability,
    DeclarationFragments,
    Mutability,
    SwiftExtension,
    SwiftGenerics,
    Location,
    FunctionSignature,
    SPI,
    Snippet,
)

# Mixins that appear on symbols in the standard format; these never need to
# be registered.
BUILTIN_MIXINS: Mapping[str, MixinDescriptor] = MappingProxyType(
    {
        mixin_type.mixin_key: mixin_type.descriptor()
        for mixin_type in BUILTIN_MIXIN_TYPES
    }
)


@dataclass(frozen=True)
class MixinRegistry:
    """Immutable snapshot of caller-registered descriptors for one call.

    Built-in descriptors always win over extensions registered under the
    same key.
    """

    extensions: Mapping[str, MixinDescriptor] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "extensions", MappingProxyType(dict(self.extensions))
        )

    @classmethod
    def from_descriptors(cls, descriptors: Iterable[MixinDescriptor]) -> MixinRegistry:
        return cls({descriptor.key: descriptor for descriptor in descriptors})

    def resolve(self, key: str) -> MixinDescriptor | None:
        descriptor = BUILTIN_MIXINS.get(key)
        if descriptor is None:
            descriptor = self.extensions.get(key)
        return descriptor

    def __contains__(self, key: object) -> bool:
        return key in BUILTIN_MIXINS or key in self.extensions


__all__ = [
    "BUILTIN_MIXINS",
    "BUILTIN_MIXIN_TYPES",
    "MixinRegistry",
]
