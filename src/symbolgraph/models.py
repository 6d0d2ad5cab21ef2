"""Core record models shared by symbols and mixins.

Wire names are camelCase; Python attributes are snake_case. Every model
accepts either spelling on input.
"""

from __future__ import annotations

from urllib.parse import unquote, urlsplit

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for models that round-trip through the camelCase wire format."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def escape_uri(uri: str) -> str:
    """Percent-escape spaces in a URI, leaving every other character alone.

    Full percent-encoding would also escape the ``file://`` prefix, and
    already-escaped sequences must not be escaped twice.
    """
    return uri.replace(" ", "%20")


def uri_path(uri: str) -> str:
    """Return the decoded path component of a URI."""
    return unquote(urlsplit(escape_uri(uri)).path)


class Identifier(WireModel):
    """The unique identifier of a symbol."""

    precise: str
    interface_language: str | None = None


class DeclarationFragment(WireModel):
    """One token of a declaration, such as a keyword or an identifier."""

    kind: str
    spelling: str
    precise_identifier: str | None = None


class Names(WireModel):
    """The context-specific names of a symbol."""

    title: str
    navigator: list[DeclarationFragment] | None = None
    sub_heading: list[DeclarationFragment] | None = None
    prose: str | None = None


class Position(WireModel):
    line: int
    character: int


class SourceRange(WireModel):
    start: Position
    end: Position


class Line(WireModel):
    """A line of text with an optional source range."""

    text: str
    range: SourceRange | None = None


class LineList(WireModel):
    """A documentation comment, as a list of lines.

    Comments written in the symbol's own module carry source ranges;
    comments inherited from another module do not.
    """

    lines: list[Line] = Field(default_factory=list)
    uri: str | None = None
    module_name: str | None = Field(default=None, alias="module")

    @property
    def url(self) -> str | None:
        """The comment's URI with spaces escaped, or None without a URI."""
        if self.uri is None:
            return None
        return escape_uri(self.uri)

    @property
    def file_path(self) -> str | None:
        if self.uri is None:
            return None
        return uri_path(self.uri)


__all__ = [
    "DeclarationFragment",
    "Identifier",
    "Line",
    "LineList",
    "Names",
    "Position",
    "SourceRange",
    "WireModel",
    "escape_uri",
    "uri_path",
]
