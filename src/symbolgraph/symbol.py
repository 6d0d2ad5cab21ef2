"""The symbol record: required core fields plus keyed mixins.

A symbol corresponds to one named declaration in a module. Information that
is not common to all symbols lives in ``Symbol.mixins``; consumers must be
able to handle or ignore extra top-level keys, so decoding drops keys it has
no descriptor for and encoding drops mixins it has no descriptor for.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import Field, ValidationError, field_validator

from symbolgraph.errors import StructuralDecodeError
from symbolgraph.kind import Kind
from symbolgraph.mixins.base import Mixin
from symbolgraph.models import Identifier, LineList, Names, WireModel
from symbolgraph.registry import MixinRegistry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from symbolgraph.mixins.base import MixinDecoder

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Mixin)

REQUIRED_FIELDS: tuple[str, ...] = (
    "identifier",
    "kind",
    "pathComponents",
    "names",
    "accessLevel",
)
OPTIONAL_FIELDS: tuple[str, ...] = ("type", "docComment")
CORE_FIELDS = frozenset(REQUIRED_FIELDS + OPTIONAL_FIELDS)

_EMPTY_REGISTRY = MixinRegistry()


class Symbol(WireModel):
    """A symbol from a module."""

    identifier: Identifier
    kind: Kind
    path_components: list[str]
    type: str | None = Field(
        default=None,
        description="Precise identifier of the symbol declaring this symbol's type",
    )
    names: Names
    doc_comment: LineList | None = None
    access_level: str
    mixins: dict[str, Mixin] = Field(default_factory=dict, exclude=True)

    @field_validator("mixins")
    @classmethod
    def validate_mixin_keys(cls, v: dict[str, Mixin]) -> dict[str, Mixin]:
        """Each entry must be stored under its own type's ``mixin_key``."""
        for key, mixin in v.items():
            if key != mixin.mixin_key:
                msg = (
                    f"{type(mixin).__name__} belongs under "
                    f"{mixin.mixin_key!r}, not {key!r}"
                )
                raise ValueError(msg)
        return v

    # -- typed mixin access -------------------------------------------------

    def get_mixin(self, mixin_type: type[M]) -> M | None:
        value = self.mixins.get(mixin_type.mixin_key)
        if isinstance(value, mixin_type):
            return value
        return None

    def set_mixin(self, mixin_type: type[M], value: M | None) -> None:
        """Attach, replace, or (with ``None``) remove the mixin of a given type."""
        key = mixin_type.mixin_key
        if value is None:
            self.mixins.pop(key, None)
            return
        if not isinstance(value, mixin_type):
            msg = (
                f"Mixin {key!r} expects {mixin_type.__name__}, "
                f"got {type(value).__name__}"
            )
            raise TypeError(msg)
        self.mixins[key] = value

    # -- derived values -----------------------------------------------------

    @property
    def absolute_path(self) -> str:
        """The path from the module to the symbol, joined with ``/``."""
        return "/".join(self.path_components)

    @property
    def doc_comment_from_same_module(self) -> bool | None:
        """Whether the doc comment was written in the symbol's own module.

        None without a doc comment or when it has no lines. Comments from the
        same module carry source ranges; inherited ones do not.
        """
        if self.doc_comment is None or not self.doc_comment.lines:
            return None
        return self.doc_comment.lines[0].range is not None

    def is_doc_comment_from_same_module(
        self, symbol_module_name: str | None = None
    ) -> bool | None:
        """Like ``doc_comment_from_same_module``, preferring module metadata.

        When both the symbol's module name and the doc comment's module are
        known, they are compared directly.
        """
        from_ranges = self.doc_comment_from_same_module
        if from_ranges is None or self.doc_comment is None:
            return None
        comment_module = self.doc_comment.module_name
        if symbol_module_name is not None and comment_module is not None:
            return comment_module == symbol_module_name
        return from_ranges

    # -- wire format --------------------------------------------------------

    @classmethod
    def decode(
        cls, obj: object, registry: MixinRegistry | None = None
    ) -> Symbol:
        """Decode a symbol from a parsed JSON object.

        Raises:
            StructuralDecodeError: If a required core field is missing or
                malformed.
            MixinPayloadError: If a recognized mixin rejects its payload.
        """
        if not isinstance(obj, Mapping):
            msg = f"Expected a JSON object for a symbol, got {type(obj).__name__}"
            raise StructuralDecodeError(msg)

        if registry is None:
            registry = _EMPTY_REGISTRY
        core = {key: obj[key] for key in CORE_FIELDS if key in obj}
        try:
            symbol = cls.model_validate(core)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else None
            msg = f"Invalid symbol field {field!r}: {error['msg']}"
            raise StructuralDecodeError(msg, field=field) from exc

        for key, decoder in _decodable_keys(obj, registry):
            mixin = decoder(key, obj)
            if mixin is not None:
                symbol.mixins[key] = mixin

        return symbol

    def encode(self, registry: MixinRegistry | None = None) -> dict[str, Any]:
        """Encode the symbol into a JSON-compatible object."""
        if registry is None:
            registry = _EMPTY_REGISTRY
        container: dict[str, Any] = {
            "identifier": self.identifier.to_wire(),
            "kind": self.kind.to_wire(),
            "pathComponents": list(self.path_components),
            "names": self.names.to_wire(),
            "accessLevel": self.access_level,
        }
        if self.type is not None:
            container["type"] = self.type
        if self.doc_comment is not None:
            container["docComment"] = self.doc_comment.to_wire()

        for key in sorted(self.mixins):
            descriptor = None if key in CORE_FIELDS else registry.resolve(key)
            if descriptor is None or descriptor.encoder is None:
                logger.debug("Omitting unregistered mixin %r", key)
                continue
            descriptor.encoder(key, self.mixins[key], container)

        return container


def _decodable_keys(
    obj: Mapping[str, Any], registry: MixinRegistry
) -> Iterator[tuple[str, MixinDecoder]]:
    for key in sorted(obj):
        if key in CORE_FIELDS:
            continue
        descriptor = registry.resolve(key)
        if descriptor is None or descriptor.decoder is None:
            logger.debug("Skipping unrecognized symbol key %r", key)
            continue
        yield key, descriptor.decoder


def unrecognized_keys(
    obj: Mapping[str, Any], registry: MixinRegistry | None = None
) -> list[str]:
    """Return the top-level keys that decoding ``obj`` would drop, sorted."""
    if registry is None:
        registry = _EMPTY_REGISTRY
    decodable = {key for key, _ in _decodable_keys(obj, registry)}
    return [
        key for key in sorted(obj) if key not in CORE_FIELDS and key not in decodable
    ]


__all__ = [
    "CORE_FIELDS",
    "OPTIONAL_FIELDS",
    "REQUIRED_FIELDS",
    "Symbol",
    "unrecognized_keys",
]
