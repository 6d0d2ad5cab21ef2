from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from symbolgraph.mixins.base import Mixin
from utils import import_object

CONFIG_FILENAME = "symbolgraph.toml"


class SymbolGraphConfig(BaseModel):
    """Configuration for the symbolgraph command-line tools."""

    model_config = ConfigDict(extra="forbid")

    mixins: list[str] = Field(
        default_factory=list,
        description="Extra Mixin types to register, as 'module:Attribute' references",
    )
    indent: bool = Field(
        default=False,
        description="Pretty-print normalized output",
    )
    strict: bool = Field(
        default=False,
        description="Report top-level keys dropped during decoding as errors",
    )

    @field_validator("mixins", mode="before")
    @classmethod
    def validate_mixin_references(cls, v: Any) -> Any:
        """Check reference syntax early so errors point at the config file.

        Importing happens later, in ``load_mixin_types``.
        """
        if v is None:
            return []

        if not isinstance(v, list):
            msg = "mixins must be a list of 'module:Attribute' strings"
            raise TypeError(msg)

        for reference in v:
            if not isinstance(reference, str) or reference.count(":") != 1:
                msg = (
                    f"Invalid mixin reference {reference!r}; "
                    "expected 'module:Attribute'"
                )
                raise ValueError(msg)

        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path) -> SymbolGraphConfig:
    """Load configuration from symbolgraph.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return SymbolGraphConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return SymbolGraphConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e


def load_mixin_types(config: SymbolGraphConfig) -> list[type[Mixin]]:
    """Import the mixin types named by ``config.mixins``."""
    mixin_types: list[type[Mixin]] = []
    for reference in config.mixins:
        try:
            obj = import_object(reference)
        except (ImportError, ValueError) as e:
            msg = f"Cannot import mixin {reference!r}: {e}"
            raise ConfigError(msg) from e

        if not (isinstance(obj, type) and issubclass(obj, Mixin)):
            msg = f"{reference!r} is not a Mixin subclass"
            raise ConfigError(msg)
        if not isinstance(getattr(obj, "mixin_key", None), str):
            msg = f"{reference!r} does not declare a mixin_key"
            raise ConfigError(msg)
        mixin_types.append(obj)
    return mixin_types


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "SymbolGraphConfig",
    "load_config",
    "load_mixin_types",
]
