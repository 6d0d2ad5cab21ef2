"""JSON coder for symbol records with caller-registered mixins.

Built-in mixins are always understood. Other ``Mixin`` types must be
registered on the coder that encodes or decodes them, otherwise their data is
skipped:

    coder = SymbolCoder()
    register_symbol_mixins(coder, MyMixin)
    symbol = coder.decode(raw)
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import orjson

from symbolgraph.errors import StructuralDecodeError, SymbolEncodeError
from symbolgraph.mixins.base import Mixin, MixinDescriptor
from symbolgraph.registry import BUILTIN_MIXINS, MixinRegistry
from symbolgraph.symbol import Symbol

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)


class SymbolCoder:
    """Encodes and decodes symbols, carrying the caller's mixin registrations.

    Every call works from its own immutable snapshot of the registrations, so
    a coder can be shared by concurrent calls as long as nobody registers
    while they run.
    """

    def __init__(self, *, indent: bool = False) -> None:
        self.indent = indent
        self._registered: dict[str, MixinDescriptor] = {}

    @property
    def registered_mixins(self) -> Mapping[str, MixinDescriptor]:
        return MappingProxyType(self._registered)

    def register(self, *mixins: type[Mixin] | MixinDescriptor) -> None:
        for mixin in mixins:
            if isinstance(mixin, MixinDescriptor):
                descriptor = mixin
            else:
                descriptor = mixin.descriptor()
            if descriptor.key in BUILTIN_MIXINS:
                logger.debug(
                    "Mixin key %r is built in; the built-in descriptor wins",
                    descriptor.key,
                )
            self._registered[descriptor.key] = descriptor

    def snapshot(self) -> MixinRegistry:
        return MixinRegistry(self._registered)

    # -- objects ------------------------------------------------------------

    def decode_object(
        self, obj: object, registry: MixinRegistry | None = None
    ) -> Symbol:
        if registry is None:
            registry = self.snapshot()
        return Symbol.decode(obj, registry)

    def encode_object(
        self, symbol: Symbol, registry: MixinRegistry | None = None
    ) -> dict[str, Any]:
        if registry is None:
            registry = self.snapshot()
        return symbol.encode(registry)

    # -- bytes --------------------------------------------------------------

    def decode(self, data: bytes | str) -> Symbol:
        """Decode one symbol from a JSON document."""
        return self.decode_object(_loads(data))

    def encode(self, symbol: Symbol) -> bytes:
        """Encode one symbol as a JSON document with sorted keys."""
        option = orjson.OPT_SORT_KEYS
        if self.indent:
            option |= orjson.OPT_INDENT_2
        return _dumps(self.encode_object(symbol), option)

    def decode_document(self, data: bytes | str) -> Symbol | list[Symbol]:
        """Decode a JSON document holding one symbol or an array of symbols."""
        document = _loads(data)
        if not isinstance(document, list):
            return self.decode_object(document)
        registry = self.snapshot()
        return [self.decode_object(item, registry) for item in document]

    def encode_array(self, symbols: Iterable[Symbol]) -> bytes:
        """Encode symbols as one JSON array with sorted keys."""
        option = orjson.OPT_SORT_KEYS
        if self.indent:
            option |= orjson.OPT_INDENT_2
        registry = self.snapshot()
        return _dumps(
            [self.encode_object(symbol, registry) for symbol in symbols], option
        )

    def decode_lines(self, data: bytes | str) -> list[Symbol]:
        """Decode a JSON Lines document, one symbol per non-blank line."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        registry = self.snapshot()
        symbols: list[Symbol] = []
        for raw_line in data.splitlines():
            line = raw_line.strip()
            if line:
                symbols.append(self.decode_object(_loads(line), registry))
        return symbols

    def encode_lines(self, symbols: Iterable[Symbol]) -> bytes:
        """Encode symbols as JSON Lines; ``indent`` does not apply."""
        registry = self.snapshot()
        chunks: list[bytes] = []
        for symbol in symbols:
            chunks.append(
                _dumps(self.encode_object(symbol, registry), orjson.OPT_SORT_KEYS)
            )
            chunks.append(b"\n")
        return b"".join(chunks)


def register_symbol_mixins(
    coder: SymbolCoder, *mixin_types: type[Mixin] | MixinDescriptor
) -> None:
    """Register mixin types so ``coder`` can encode and decode them.

    Mixins that occur on symbols in the standard format do not need to be
    registered.
    """
    coder.register(*mixin_types)


def _loads(data: bytes | str) -> Any:
    try:
        return orjson.loads(data)
    except orjson.JSONDecodeError as exc:
        msg = f"Invalid JSON: {exc}"
        raise StructuralDecodeError(msg) from exc


def _dumps(payload: Any, option: int) -> bytes:
    try:
        return orjson.dumps(payload, option=option)
    except orjson.JSONEncodeError as exc:
        msg = f"Failed to serialize symbol: {exc}"
        raise SymbolEncodeError(msg) from exc


__all__ = ["SymbolCoder", "register_symbol_mixins"]
