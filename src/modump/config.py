# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the catalog dump command."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import StrEnum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PROG_NAME: Final[str] = "mo-dump"
ENV_PREFIX: Final[str] = "MODUMP_"
_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class DumpAction(StrEnum):
    """Enumerate the listings the dump command can print."""

    KEYS = "keys"
    PAIRS = "pairs"

    @classmethod
    def from_raw(cls, raw: str) -> DumpAction | None:
        """Return the action matching ``raw`` or ``None`` when unrecognised."""

        try:
            return cls(raw)
        except ValueError:
            return None


class OutputConfig(BaseModel):
    """Configuration for console diagnostics."""

    model_config = ConfigDict(validate_assignment=True)

    color: bool = True
    emoji: bool = False
    verbose: bool = False
    prog_name: str = DEFAULT_PROG_NAME


class DumpConfig(BaseModel):
    """Top-level configuration for a catalog dump run."""

    model_config = ConfigDict(validate_assignment=True)

    output: OutputConfig = Field(default_factory=OutputConfig)
    strict: bool = False


def load_config(env: Mapping[str, str] | None = None) -> DumpConfig:
    """Build a :class:`DumpConfig` from ``MODUMP_*`` environment variables.

    Args:
        env: Environment mapping to read; defaults to :data:`os.environ`.

    Returns:
        DumpConfig: Configuration with recognised overrides applied.

    Raises:
        ConfigError: If an override value is not a recognised boolean.
    """

    source = os.environ if env is None else env
    config = DumpConfig()
    for name, section, attribute in (
        ("COLOR", "output", "color"),
        ("EMOJI", "output", "emoji"),
        ("VERBOSE", "output", "verbose"),
        ("STRICT", None, "strict"),
    ):
        raw = source.get(f"{ENV_PREFIX}{name}")
        if raw is None:
            continue
        target = config.output if section == "output" else config
        setattr(target, attribute, _parse_bool(f"{ENV_PREFIX}{name}", raw))
    return config


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean value, got {raw!r}")


__all__ = [
    "ConfigError",
    "DEFAULT_PROG_NAME",
    "DumpAction",
    "DumpConfig",
    "OutputConfig",
    "load_config",
]
