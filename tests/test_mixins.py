from __future__ import annotations

from typing import Any

import orjson
import pytest
from pydantic import ValidationError

from symbolgraph.coder import SymbolCoder
from symbolgraph.errors import MixinPayloadError
from symbolgraph.kind import Kind, KindIdentifier
from symbolgraph.mixins import (
    SPI,
    Availability,
    AvailabilityItem,
    DeclarationFragments,
    FunctionParameter,
    FunctionSignature,
    GenericConstraint,
    GenericParameter,
    Location,
    Mixin,
    Mutability,
    SemanticVersion,
    SliceRange,
    Snippet,
    SwiftExtension,
    SwiftGenerics,
)
from symbolgraph.models import (
    DeclarationFragment,
    Identifier,
    Line,
    LineList,
    Names,
    Position,
    SourceRange,
)
from symbolgraph.registry import BUILTIN_MIXINS
from symbolgraph.symbol import Symbol


def _fragments(*spellings: tuple[str, str]) -> list[DeclarationFragment]:
    return [DeclarationFragment(kind=kind, spelling=text) for kind, text in spellings]


def _builtin_mixins() -> list[Mixin]:
    return [
        Availability(
            items=[
                AvailabilityItem(
                    domain="macOS",
                    introduced=SemanticVersion(major=10, minor=15),
                    deprecated=SemanticVersion(major=12, minor=0, patch=1),
                    message="Use something else",
                ),
                AvailabilityItem(domain="iOS", is_unconditionally_unavailable=True),
            ]
        ),
        DeclarationFragments(
            fragments=_fragments(
                ("keyword", "func"), ("text", " "), ("identifier", "f")
            )
        ),
        Mutability(is_read_only=True),
        SwiftExtension(
            extended_module="Swift",
            type_kind="swift.struct",
            constraints=[
                GenericConstraint(kind="conformance", lhs="Self", rhs="Equatable")
            ],
        ),
        SwiftGenerics(
            parameters=[GenericParameter(name="T", index=0, depth=0)],
            constraints=[GenericConstraint(kind="sameType", lhs="T", rhs="Int")],
        ),
        Location(uri="file:///src/a b.swift", position=Position(line=3, character=4)),
        FunctionSignature(
            parameters=[
                FunctionParameter(
                    name="body",
                    internal_name="work",
                    declaration_fragments=_fragments(("identifier", "body")),
                    children=[FunctionParameter(name="value")],
                )
            ],
            returns=_fragments(("typeIdentifier", "Int")),
        ),
        SPI(is_spi=False),
        Snippet(
            language="swift",
            lines=["let a = 1", "print(a)"],
            slices={"setup": SliceRange(start=0, end=1)},
        ),
    ]


def _symbol(*mixins: Mixin) -> Symbol:
    return Symbol(
        identifier=Identifier(precise="s:4main1fyyF", interface_language="swift"),
        kind=Kind(identifier=KindIdentifier.FUNC, display_name="Function"),
        path_components=["f()"],
        type="s:Si",
        names=Names(title="f()", sub_heading=_fragments(("identifier", "f"))),
        doc_comment=LineList(
            lines=[
                Line(
                    text="Does things.",
                    range=SourceRange(
                        start=Position(line=1, character=4),
                        end=Position(line=1, character=16),
                    ),
                )
            ],
            module_name="main",
        ),
        access_level="public",
        mixins={mixin.mixin_key: mixin for mixin in mixins},
    )


def _record(**extra: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "accessLevel": "public",
        "kind": {"displayName": "Function", "identifier": "swift.func"},
        "pathComponents": ["f()"],
        "identifier": {"precise": "s:4main1fyyF", "interfaceLanguage": "swift"},
        "names": {"title": "f()"},
    }
    record.update(extra)
    return record


# Group 1: round trips


def test_builtin_table_covers_every_builtin_mixin() -> None:
    assert set(BUILTIN_MIXINS) == {mixin.mixin_key for mixin in _builtin_mixins()}


def test_symbol_with_all_builtin_mixins_round_trips() -> None:
    coder = SymbolCoder()
    symbol = _symbol(*_builtin_mixins())

    decoded = coder.decode(coder.encode(symbol))

    assert decoded == symbol
    assert decoded.mixins == symbol.mixins
    assert type(decoded.mixins["location"]) is Location


def test_symbol_without_optional_fields_round_trips() -> None:
    coder = SymbolCoder()
    symbol = _symbol()
    symbol.type = None
    symbol.doc_comment = None

    decoded = coder.decode(coder.encode(symbol))

    assert decoded == symbol
    assert decoded.mixins == {}


def test_encoded_mixins_are_top_level_fields() -> None:
    encoded = _symbol(Mutability(is_read_only=False), SPI(is_spi=True)).encode()

    assert encoded["isReadOnly"] is False
    assert encoded["spi"] is True
    assert "mixins" not in encoded


def test_encoding_is_deterministic_regardless_of_insertion_order() -> None:
    coder = SymbolCoder()
    mixins = _builtin_mixins()

    forward = coder.encode(_symbol(*mixins))
    backward = coder.encode(_symbol(*reversed(mixins)))

    assert forward == backward
    keys = list(orjson.loads(forward))
    assert keys == sorted(keys)


def test_optional_payload_parts_are_omitted_when_empty() -> None:
    encoded = _symbol(
        SwiftExtension(extended_module="Swift"),
        SwiftGenerics(),
        FunctionSignature(),
        Snippet(lines=[]),
    ).encode()

    assert encoded["swiftExtension"] == {"extendedModule": "Swift"}
    assert encoded["swiftGenerics"] == {}
    assert encoded["functionSignature"] == {}
    assert encoded["snippet"] == {"lines": []}


def test_availability_decodes_from_array_payload() -> None:
    symbol = Symbol.decode(
        _record(
            availability=[
                {"domain": "macOS", "introduced": {"major": 10, "minor": 15}},
                {"domain": "*", "isUnconditionallyDeprecated": True},
            ]
        )
    )

    availability = symbol.get_mixin(Availability)
    assert availability is not None
    assert str(availability.items[0].introduced) == "10.15"
    assert availability.items[1].is_unconditionally_deprecated is True


def test_declaration_fragments_text() -> None:
    symbol = Symbol.decode(
        _record(
            declarationFragments=[
                {"kind": "keyword", "spelling": "func"},
                {"kind": "text", "spelling": " "},
                {"kind": "identifier", "spelling": "f", "preciseIdentifier": "s:f"},
                {"kind": "text", "spelling": "()"},
            ]
        )
    )

    fragments = symbol.get_mixin(DeclarationFragments)
    assert fragments is not None
    assert fragments.text == "func f()"
    assert fragments.fragments[2].precise_identifier == "s:f"


def test_snippet_slice_lines() -> None:
    snippet = Snippet(
        lines=["a", "b", "c"], slices={"middle": SliceRange(start=1, end=2)}
    )

    assert snippet.slice_lines("middle") == ["b"]
    with pytest.raises(KeyError):
        snippet.slice_lines("missing")


# Group 2: malformed payload policy, pinned per mixin


@pytest.mark.parametrize(
    ("key", "payload"),
    [
        ("availability", {"domain": "macOS"}),
        ("availability", [{"introduced": {"minor": 1}}]),
        ("declarationFragments", [{"kind": "keyword"}]),
        ("isReadOnly", "yes"),
        ("swiftExtension", {"constraints": []}),
        (
            "swiftExtension",
            {
                "extendedModule": "Swift",
                "constraints": [{"kind": "bogus", "lhs": "A", "rhs": "B"}],
            },
        ),
        ("swiftGenerics", {"parameters": [{"name": "T"}]}),
        ("functionSignature", {"parameters": [{"internalName": "x"}]}),
        ("spi", 1),
        ("snippet", {"language": "swift"}),
        ("snippet", {"lines": [], "slices": {"s": {"start": 3, "end": 1}}}),
    ],
)
def test_malformed_payload_raises_for_strict_mixins(key: str, payload: Any) -> None:
    with pytest.raises(MixinPayloadError) as excinfo:
        Symbol.decode(_record(**{key: payload}))

    assert excinfo.value.key == key


@pytest.mark.parametrize(
    "payload",
    [
        {"uri": "file:///a.swift"},
        {"position": {"line": 1, "character": 2}},
        {"uri": "file:///a.swift", "position": {"line": "one"}},
        "file:///a.swift",
        None,
    ],
)
def test_malformed_location_is_dropped(payload: Any) -> None:
    symbol = Symbol.decode(_record(location=payload))

    assert symbol.get_mixin(Location) is None
    assert "location" not in symbol.mixins


# Group 3: typed accessor


def test_set_mixin_attaches_replaces_and_removes() -> None:
    symbol = _symbol()

    symbol.set_mixin(Mutability, Mutability(is_read_only=True))
    assert symbol.mixins["isReadOnly"] == Mutability(is_read_only=True)

    symbol.set_mixin(Mutability, Mutability(is_read_only=False))
    mutability = symbol.get_mixin(Mutability)
    assert mutability is not None
    assert mutability.is_read_only is False

    symbol.set_mixin(Mutability, None)
    assert symbol.get_mixin(Mutability) is None
    assert "isReadOnly" not in symbol.mixins


def test_set_mixin_rejects_value_of_another_type() -> None:
    symbol = _symbol()

    with pytest.raises(TypeError, match="expects Mutability"):
        symbol.set_mixin(Mutability, SPI(is_spi=True))  # type: ignore[arg-type]


def test_constructor_rejects_mixin_under_another_key() -> None:
    template = _symbol()

    with pytest.raises(ValidationError, match="belongs under 'isReadOnly'"):
        Symbol(
            identifier=template.identifier,
            kind=template.kind,
            path_components=template.path_components,
            names=template.names,
            access_level=template.access_level,
            mixins={"spi": Mutability(is_read_only=True)},
        )


def test_model_validate_rejects_mixin_under_another_key() -> None:
    fields = dict(_symbol())
    fields["mixins"] = {"spi": Mutability(is_read_only=True)}

    with pytest.raises(ValidationError):
        Symbol.model_validate(fields)


def test_remove_missing_mixin_is_a_no_op() -> None:
    symbol = _symbol()
    symbol.set_mixin(Location, None)
    assert symbol.mixins == {}


def test_get_mixin_ignores_entry_of_another_type() -> None:
    symbol = _symbol()
    symbol.mixins["spi"] = Mutability(is_read_only=True)

    assert symbol.get_mixin(SPI) is None
