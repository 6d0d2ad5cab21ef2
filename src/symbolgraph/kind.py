"""Symbol kind identifiers.

Symbol records may carry their kind either as a bare token (``"func"``) or
prefixed with a language identifier (``"swift.func"``, ``"objc.method"``).
``KindIdentifier.parse`` treats both spellings as the same well-known kind and
keeps anything it does not recognize verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from symbolgraph.models import WireModel


@dataclass(frozen=True)
class KindIdentifier:
    """A unique identifier of a symbol's kind, such as a structure or protocol."""

    identifier: str

    ASSOCIATED_TYPE: ClassVar[KindIdentifier]
    CLASS: ClassVar[KindIdentifier]
    DEINIT: ClassVar[KindIdentifier]
    ENUM: ClassVar[KindIdentifier]
    CASE: ClassVar[KindIdentifier]
    FUNC: ClassVar[KindIdentifier]
    OPERATOR: ClassVar[KindIdentifier]
    INIT: ClassVar[KindIdentifier]
    IVAR: ClassVar[KindIdentifier]
    MACRO: ClassVar[KindIdentifier]
    METHOD: ClassVar[KindIdentifier]
    PROPERTY: ClassVar[KindIdentifier]
    PROTOCOL: ClassVar[KindIdentifier]
    SNIPPET: ClassVar[KindIdentifier]
    SNIPPET_GROUP: ClassVar[KindIdentifier]
    STRUCT: ClassVar[KindIdentifier]
    SUBSCRIPT: ClassVar[KindIdentifier]
    TYPE_METHOD: ClassVar[KindIdentifier]
    TYPE_PROPERTY: ClassVar[KindIdentifier]
    TYPE_SUBSCRIPT: ClassVar[KindIdentifier]
    TYPEALIAS: ClassVar[KindIdentifier]
    VAR: ClassVar[KindIdentifier]
    MODULE: ClassVar[KindIdentifier]
    EXTENSION: ClassVar[KindIdentifier]

    def __str__(self) -> str:
        return self.identifier

    @property
    def is_custom(self) -> bool:
        """True when the identifier is not one of the well-known kinds."""
        return self.identifier not in _KNOWN_IDENTIFIERS

    @classmethod
    def parse(cls, raw: str) -> KindIdentifier:
        """Parse a kind token, never failing.

        The token is looked up as-is, then again without its first dotted
        component. When neither matches, the result wraps ``raw`` unchanged
        (not the stripped remainder), so ``"a.b.c"`` stays ``"a.b.c"``.
        """
        known = _lookup_identifier(raw)
        if known is not None:
            return known
        return cls(raw)

    @staticmethod
    def is_known_identifier(raw: str) -> bool:
        """Return whether ``raw`` names a well-known kind, prefixed or not."""
        return _lookup_identifier(raw) is not None

    @staticmethod
    def all_cases() -> tuple[KindIdentifier, ...]:
        return _ALL_CASES

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.parse),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda kind: kind.identifier
            ),
        )


KindIdentifier.ASSOCIATED_TYPE = KindIdentifier("associatedtype")
KindIdentifier.CLASS = KindIdentifier("class")
KindIdentifier.DEINIT = KindIdentifier("deinit")
KindIdentifier.ENUM = KindIdentifier("enum")
KindIdentifier.CASE = KindIdentifier("enum.case")
KindIdentifier.FUNC = KindIdentifier("func")
KindIdentifier.OPERATOR = KindIdentifier("func.op")
KindIdentifier.INIT = KindIdentifier("init")
KindIdentifier.IVAR = KindIdentifier("ivar")
KindIdentifier.MACRO = KindIdentifier("macro")
KindIdentifier.METHOD = KindIdentifier("method")
KindIdentifier.PROPERTY = KindIdentifier("property")
KindIdentifier.PROTOCOL = KindIdentifier("protocol")
KindIdentifier.SNIPPET = KindIdentifier("snippet")
KindIdentifier.SNIPPET_GROUP = KindIdentifier("snippetGroup")
KindIdentifier.STRUCT = KindIdentifier("struct")
KindIdentifier.SUBSCRIPT = KindIdentifier("subscript")
KindIdentifier.TYPE_METHOD = KindIdentifier("type.method")
KindIdentifier.TYPE_PROPERTY = KindIdentifier("type.property")
KindIdentifier.TYPE_SUBSCRIPT = KindIdentifier("type.subscript")
KindIdentifier.TYPEALIAS = KindIdentifier("typealias")
KindIdentifier.VAR = KindIdentifier("var")
KindIdentifier.MODULE = KindIdentifier("module")
KindIdentifier.EXTENSION = KindIdentifier("extension")

_ALL_CASES: tuple[KindIdentifier, ...] = (
    KindIdentifier.ASSOCIATED_TYPE,
    KindIdentifier.CLASS,
    KindIdentifier.DEINIT,
    KindIdentifier.ENUM,
    KindIdentifier.CASE,
    KindIdentifier.FUNC,
    KindIdentifier.OPERATOR,
    KindIdentifier.INIT,
    KindIdentifier.IVAR,
    KindIdentifier.MACRO,
    KindIdentifier.METHOD,
    KindIdentifier.PROPERTY,
    KindIdentifier.PROTOCOL,
    KindIdentifier.SNIPPET,
    KindIdentifier.SNIPPET_GROUP,
    KindIdentifier.STRUCT,
    KindIdentifier.SUBSCRIPT,
    KindIdentifier.TYPE_METHOD,
    KindIdentifier.TYPE_PROPERTY,
    KindIdentifier.TYPE_SUBSCRIPT,
    KindIdentifier.TYPEALIAS,
    KindIdentifier.VAR,
    KindIdentifier.MODULE,
    KindIdentifier.EXTENSION,
)

_KNOWN_IDENTIFIERS: dict[str, KindIdentifier] = {
    kind.identifier: kind for kind in _ALL_CASES
}


def _lookup_identifier(identifier: str) -> KindIdentifier | None:
    """Look up a token directly, then without its first dotted component."""
    known = _KNOWN_IDENTIFIERS.get(identifier)
    if known is not None:
        return known

    _, dot, remainder = identifier.partition(".")
    if not dot:
        return None
    return _KNOWN_IDENTIFIERS.get(remainder)


class Kind(WireModel):
    """The kind of a symbol along with its human-readable name."""

    identifier: KindIdentifier
    display_name: str = ""


__all__ = ["Kind", "KindIdentifier"]
