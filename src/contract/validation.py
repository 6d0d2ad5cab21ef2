"""Validation helpers for symbol record files.

Validation decodes every record exactly as a consumer would and reports what
went wrong; it adds no schema rules of its own.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import orjson

from symbolgraph.coder import SymbolCoder
from symbolgraph.errors import (
    MixinPayloadError,
    StructuralDecodeError,
    SymbolDecodeError,
)
from symbolgraph.symbol import Symbol, unrecognized_keys

if TYPE_CHECKING:
    from pathlib import Path

    from symbolgraph.registry import MixinRegistry

JSONL_SUFFIX = ".jsonl"


@dataclass(frozen=True)
class ValidationMessage:
    path: Path
    message: str
    line: int | None = None
    key: str | None = None
    index: int | None = None

    def location(self) -> str:
        if self.line is not None:
            return f"{self.path}:{self.line}"
        if self.index is not None:
            return f"{self.path}[{self.index}]"
        return str(self.path)

    def to_dict(self) -> dict[str, object]:
        return {
            "path": str(self.path),
            "line": self.line,
            "key": self.key,
            "index": self.index,
            "message": self.message,
        }


@dataclass
class ValidationResult:
    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)
    symbol_count: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_symbols(
    path: Path, coder: SymbolCoder | None = None, *, strict: bool = False
) -> ValidationResult:
    """Decode every symbol in ``path`` and collect problems.

    ``*.jsonl`` files hold one symbol per line; any other file holds a single
    JSON document that is either one symbol or an array of symbols. Keys that
    decoding drops are warnings, or errors when ``strict`` is set.
    """
    result = ValidationResult()

    if not path.exists():
        result.errors.append(
            ValidationMessage(path=path, message="Symbol file does not exist.")
        )
        return result

    if not path.is_file():
        result.errors.append(
            ValidationMessage(path=path, message="Symbol path is not a file.")
        )
        return result

    if coder is None:
        coder = SymbolCoder()
    registry = coder.snapshot()

    if path.suffix == JSONL_SUFFIX:
        _validate_jsonl(path, registry, result, strict=strict)
    else:
        _validate_json(path, registry, result, strict=strict)

    return result


def _validate_jsonl(
    path: Path, registry: MixinRegistry, result: ValidationResult, *, strict: bool
) -> None:
    try:
        handle = path.open("rb")
    except OSError as exc:
        result.errors.append(
            ValidationMessage(path=path, message=f"Failed to read file: {exc}.")
        )
        return

    with handle:
        for line_number, raw_line in enumerate(handle, 1):
            line = raw_line.strip()
            if not line:
                continue
            try:
                data = orjson.loads(line)
            except orjson.JSONDecodeError as exc:
                result.errors.append(
                    ValidationMessage(
                        path=path, line=line_number, message=f"Invalid JSON: {exc}."
                    )
                )
                continue
            _check_record(
                data, path, registry, result, strict=strict, line=line_number
            )


def _validate_json(
    path: Path, registry: MixinRegistry, result: ValidationResult, *, strict: bool
) -> None:
    try:
        data = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as exc:
        result.errors.append(
            ValidationMessage(path=path, message=f"Invalid JSON: {exc}.")
        )
        return

    if not isinstance(data, list):
        _check_record(data, path, registry, result, strict=strict)
        return
    for index, record in enumerate(data):
        _check_record(record, path, registry, result, strict=strict, index=index)


def _check_record(
    data: object,
    path: Path,
    registry: MixinRegistry,
    result: ValidationResult,
    *,
    strict: bool,
    line: int | None = None,
    index: int | None = None,
) -> None:
    if not isinstance(data, Mapping):
        message = f"Expected a JSON object for a symbol, got {type(data).__name__}."
        result.errors.append(
            ValidationMessage(path=path, line=line, index=index, message=message)
        )
        return

    try:
        Symbol.decode(data, registry)
    except SymbolDecodeError as exc:
        key: str | None = None
        if isinstance(exc, MixinPayloadError):
            key = exc.key
        elif isinstance(exc, StructuralDecodeError):
            key = exc.field
        result.errors.append(
            ValidationMessage(
                path=path, line=line, index=index, key=key, message=f"{exc}."
            )
        )
        return

    result.symbol_count += 1
    bucket = result.errors if strict else result.warnings
    for key in unrecognized_keys(data, registry):
        bucket.append(
            ValidationMessage(
                path=path,
                line=line,
                index=index,
                key=key,
                message=f"Unrecognized key {key!r} dropped.",
            )
        )


__all__ = [
    "ValidationMessage",
    "ValidationResult",
    "validate_symbols",
]
