"""Source location mixin."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from symbolgraph.mixins.base import Mixin
from symbolgraph.models import Position, escape_uri, uri_path

logger = logging.getLogger(__name__)


class Location(Mixin):
    """The file and position where a symbol is declared.

    ``uri`` is kept exactly as written in the record, which is not always a
    valid URL (unescaped spaces are common). A malformed payload, such as one
    without a position, leaves the symbol without a location instead of
    failing the whole record.
    """

    mixin_key = "location"

    uri: str
    position: Position

    @classmethod
    def from_payload(cls, payload: Any) -> Location | None:
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            logger.debug(
                "Dropping malformed location mixin (%d errors)", exc.error_count()
            )
            return None

    @property
    def url(self) -> str:
        return escape_uri(self.uri)

    @property
    def file_path(self) -> str:
        return uri_path(self.uri)


__all__ = ["Location"]
