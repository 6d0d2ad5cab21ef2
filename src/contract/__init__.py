"""Stable validation surface for symbol record files."""


def __getattr__(name: str) -> object:
    if name in {"ValidationMessage", "ValidationResult", "validate_symbols"}:
        from contract.validation import (
            ValidationMessage,
            ValidationResult,
            validate_symbols,
        )

        return {
            "ValidationMessage": ValidationMessage,
            "ValidationResult": ValidationResult,
            "validate_symbols": validate_symbols,
        }[name]

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "ValidationMessage",
    "ValidationResult",
    "validate_symbols",
]
