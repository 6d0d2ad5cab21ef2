"""Shared utilities for symbolgraph tooling."""

from __future__ import annotations

import importlib


def import_object(reference: str) -> object:
    """Import an object from a ``module:attribute`` reference.

    Args:
        reference: Import reference (e.g., "mypkg.mixins:Deprecation")

    Returns:
        The referenced object.

    Raises:
        ValueError: If the reference is not of the form ``module:attribute``.
        ImportError: If the module or attribute cannot be found.

    Examples:
        >>> import_object("symbolgraph.mixins:Location").__name__
        'Location'
        >>> import_object("symbolgraph.mixins.swift:SwiftGenerics").mixin_key
        'swiftGenerics'
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        msg = f"Expected 'module:attribute', got {reference!r}"
        raise ValueError(msg)

    obj: object = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            msg = f"{module_name!r} has no attribute {attr_path!r}"
            raise ImportError(msg) from exc
    return obj
