"""Built-in symbol mixins."""

from symbolgraph.mixins.availability import (
    Availability,
    AvailabilityItem,
    SemanticVersion,
)
from symbolgraph.mixins.base import Mixin, MixinDescriptor
from symbolgraph.mixins.declarations import (
    DeclarationFragments,
    FunctionParameter,
    FunctionSignature,
)
from symbolgraph.mixins.flags import SPI, Mutability
from symbolgraph.mixins.location import Location
from symbolgraph.mixins.snippet import SliceRange, Snippet
from symbolgraph.mixins.swift import (
    GenericConstraint,
    GenericParameter,
    SwiftExtension,
    SwiftGenerics,
)

__all__ = [
    "SPI",
    "Availability",
    "AvailabilityItem",
    "DeclarationFragments",
    "FunctionParameter",
    "FunctionSignature",
    "GenericConstraint",
    "GenericParameter",
    "Location",
    "Mixin",
    "MixinDescriptor",
    "Mutability",
    "SemanticVersion",
    "SliceRange",
    "Snippet",
    "SwiftExtension",
    "SwiftGenerics",
]
