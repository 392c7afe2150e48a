# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration loading and CLI overrides."""

from __future__ import annotations

import pytest

from modump.cli._dump_cli_models import build_dump_options
from modump.config import ConfigError, DumpAction, DumpConfig, load_config


def test_defaults() -> None:
    config = load_config({})

    assert config == DumpConfig()
    assert config.strict is False
    assert config.output.color is True
    assert config.output.emoji is False
    assert config.output.prog_name == "mo-dump"


def test_environment_overrides() -> None:
    config = load_config({"MODUMP_STRICT": "yes", "MODUMP_COLOR": "0", "MODUMP_EMOJI": "On"})

    assert config.strict is True
    assert config.output.color is False
    assert config.output.emoji is True


def test_invalid_environment_value() -> None:
    with pytest.raises(ConfigError, match="MODUMP_STRICT"):
        load_config({"MODUMP_STRICT": "maybe"})


def test_cli_flags_layer_over_config() -> None:
    options = build_dump_options("fr.mo", "pairs", strict=True, no_color=True, verbose=True)

    config = options.apply(DumpConfig(), prog_name="dump-mo")

    assert config.strict is True
    assert config.output.color is False
    assert config.output.verbose is True
    assert config.output.prog_name == "dump-mo"
    assert str(options.path) == "fr.mo"


def test_cli_flags_keep_config_values() -> None:
    base = load_config({"MODUMP_STRICT": "1"})

    config = build_dump_options(None, None).apply(base, prog_name=None)

    assert config.strict is True
    assert config.output.prog_name == "mo-dump"


def test_dump_action_from_raw() -> None:
    assert DumpAction.from_raw("keys") is DumpAction.KEYS
    assert DumpAction.from_raw("pairs") is DumpAction.PAIRS
    assert DumpAction.from_raw("values") is None
