"""Symbol records with an extensible set of keyed mixins."""

from symbolgraph.coder import SymbolCoder, register_symbol_mixins
from symbolgraph.errors import (
    MixinPayloadError,
    StructuralDecodeError,
    SymbolDecodeError,
    SymbolEncodeError,
)
from symbolgraph.kind import Kind, KindIdentifier
from symbolgraph.mixins import Mixin, MixinDescriptor
from symbolgraph.models import (
    DeclarationFragment,
    Identifier,
    Line,
    LineList,
    Names,
    Position,
    SourceRange,
)
from symbolgraph.registry import BUILTIN_MIXINS, MixinRegistry
from symbolgraph.symbol import CORE_FIELDS, Symbol

__all__ = [
    "BUILTIN_MIXINS",
    "CORE_FIELDS",
    "DeclarationFragment",
    "Identifier",
    "Kind",
    "KindIdentifier",
    "Line",
    "LineList",
    "Mixin",
    "MixinDescriptor",
    "MixinPayloadError",
    "MixinRegistry",
    "Names",
    "Position",
    "SourceRange",
    "StructuralDecodeError",
    "Symbol",
    "SymbolCoder",
    "SymbolDecodeError",
    "SymbolEncodeError",
    "register_symbol_mixins",
]
