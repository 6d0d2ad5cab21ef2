"""Mixin base type and the descriptor used to dispatch it.

A mixin is an optional, independently typed attribute of a symbol. It is
stored in ``Symbol.mixins`` under its ``mixin_key`` and serialized as a
top-level field of the symbol record with that same name.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import ValidationError

from symbolgraph.errors import MixinPayloadError
from symbolgraph.models import WireModel

MixinDecoder = Callable[[str, Mapping[str, Any]], "Mixin | None"]
MixinEncoder = Callable[[str, "Mixin", MutableMapping[str, Any]], None]


@dataclass(frozen=True)
class MixinDescriptor:
    """How to read and write one mixin type.

    A descriptor without a decoder makes its key non-decodable; one without
    an encoder makes it non-encodable. Both cases drop the data silently.
    """

    key: str
    encoder: MixinEncoder | None = None
    decoder: MixinDecoder | None = None


class Mixin(WireModel):
    """Base class for symbol mixins.

    Subclasses set ``mixin_key``. Object-shaped payloads work out of the box;
    mixins whose payload is a list or a scalar override ``from_payload`` and
    ``to_payload``.
    """

    mixin_key: ClassVar[str]

    @classmethod
    def from_payload(cls, payload: Any) -> Mixin | None:
        """Build the mixin from its wire payload.

        Raises ``pydantic.ValidationError`` on a malformed payload. Mixins
        that treat malformed data as absent return ``None`` instead.
        """
        return cls.model_validate(payload)

    def to_payload(self) -> Any:
        return self.to_wire()

    @classmethod
    def descriptor(cls) -> MixinDescriptor:
        """Return the default descriptor for this mixin type."""
        return MixinDescriptor(
            key=cls.mixin_key,
            encoder=_encode_mixin,
            decoder=cls._decode_from_container,
        )

    @classmethod
    def _decode_from_container(
        cls, key: str, container: Mapping[str, Any]
    ) -> Mixin | None:
        try:
            return cls.from_payload(container[key])
        except ValidationError as exc:
            msg = f"Invalid {key!r} mixin: {exc}"
            raise MixinPayloadError(msg, key=key) from exc


def _encode_mixin(
    key: str, mixin: Mixin, container: MutableMapping[str, Any]
) -> None:
    container[key] = mixin.to_payload()


__all__ = ["Mixin", "MixinDecoder", "MixinDescriptor", "MixinEncoder"]
