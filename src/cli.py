"""Command-line interface for symbolgraph."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from contract.validation import validate_symbols
from symbolgraph.coder import SymbolCoder
from symbolgraph.config import ConfigError, load_config, load_mixin_types
from symbolgraph.errors import SymbolDecodeError, SymbolEncodeError
from symbolgraph.kind import KindIdentifier


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="symbolgraph")
    parser.add_argument(
        "--root",
        default=".",
        help="Directory containing symbolgraph.toml (default: .)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log dropped keys and mixins",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate", help="Decode a symbol file and report problems"
    )
    validate_parser.add_argument("path", help="Symbol file (.json or .jsonl)")
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Treat dropped top-level keys as errors",
    )

    normalize_parser = subparsers.add_parser(
        "normalize", help="Decode and re-encode symbols deterministically"
    )
    normalize_parser.add_argument("path", help="Symbol file (.json or .jsonl)")
    normalize_parser.add_argument(
        "--out",
        default=None,
        help="Output file (default: stdout)",
    )
    normalize_parser.add_argument(
        "--indent",
        action="store_true",
        default=None,
        help="Pretty-print a .json document",
    )

    kind_parser = subparsers.add_parser(
        "kind", help="Show how kind tokens are normalized"
    )
    kind_parser.add_argument("tokens", nargs="+", help="Kind tokens to parse")

    return parser


def _build_coder(
    root: Path, *, indent: bool | None = None
) -> tuple[SymbolCoder, bool]:
    config = load_config(root)
    coder = SymbolCoder(indent=config.indent if indent is None else indent)
    coder.register(*load_mixin_types(config))
    return coder, config.strict


def _handle_validate(root: Path, path: str, strict: bool | None) -> int:
    coder, config_strict = _build_coder(root)
    result = validate_symbols(
        Path(path).expanduser().resolve(),
        coder,
        strict=config_strict if strict is None else strict,
    )
    for warning in result.warnings:
        sys.stderr.write(f"{warning.location()}: warning: {warning.message}\n")
    if result.errors:
        for error in result.errors:
            sys.stderr.write(f"{error.location()}: {error.message}\n")
        return 1
    sys.stdout.write(f"{result.symbol_count} symbols OK\n")
    return 0


def _handle_normalize(
    root: Path, path: str, out: str | None, indent: bool | None
) -> int:
    coder, _ = _build_coder(root, indent=indent)
    source = Path(path).expanduser().resolve()
    data = source.read_bytes()

    if source.suffix == ".jsonl":
        payload = coder.encode_lines(coder.decode_lines(data))
    else:
        document = coder.decode_document(data)
        if isinstance(document, list):
            payload = coder.encode_array(document) + b"\n"
        else:
            payload = coder.encode(document) + b"\n"

    if out is None:
        sys.stdout.buffer.write(payload)
    else:
        Path(out).expanduser().write_bytes(payload)
    return 0


def _handle_kind(tokens: list[str]) -> int:
    for token in tokens:
        kind = KindIdentifier.parse(token)
        status = "custom" if kind.is_custom else "known"
        sys.stdout.write(f"{token}\t{kind.identifier}\t{status}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    root = Path(args.root).expanduser().resolve()

    try:
        if args.command == "validate":
            return _handle_validate(root, args.path, args.strict)

        if args.command == "normalize":
            return _handle_normalize(root, args.path, args.out, args.indent)

        if args.command == "kind":
            return _handle_kind(args.tokens)
    except ConfigError as exc:
        sys.stderr.write(f"config: {exc}\n")
        return 2
    except (OSError, SymbolDecodeError, SymbolEncodeError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
