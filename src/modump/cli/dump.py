# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command for listing the contents of a compiled message catalog."""

from __future__ import annotations

import logging

import typer

from ..catalog import ParseResult, can_open, load_catalog
from ..config import ConfigError, DumpAction, DumpConfig, OutputConfig, load_config
from ..logging import enable_verbose_logging, fail, plain, warn
from ..reporting import render_listing
from ._dump_cli_models import (
    ACTION_ARGUMENT,
    EMOJI_OPTION,
    FILENAME_ARGUMENT,
    NO_COLOR_OPTION,
    STRICT_OPTION,
    VERBOSE_OPTION,
    build_dump_options,
)

LOGGER = logging.getLogger(__name__)


def print_usage(prog_name: str) -> None:
    """Write the command synopsis for ``prog_name`` to stderr."""

    plain(f"Usage:\n  {prog_name} mo-filename keys\n  {prog_name} mo-filename pairs\n")


def dump_catalog(
    ctx: typer.Context,
    filename: FILENAME_ARGUMENT = None,
    action: ACTION_ARGUMENT = None,
    strict: STRICT_OPTION = False,
    verbose: VERBOSE_OPTION = False,
    no_color: NO_COLOR_OPTION = False,
    emoji: EMOJI_OPTION = False,
) -> None:
    """Print the message ids (keys) or id/translation pairs (pairs) of a catalog."""

    options = build_dump_options(
        filename,
        action,
        strict=strict,
        verbose=verbose,
        no_color=no_color,
        emoji=emoji,
    )
    try:
        config = options.apply(load_config(), prog_name=ctx.find_root().info_name)
    except ConfigError as exc:
        fail(str(exc), use_emoji=emoji, use_color=not no_color)
        raise typer.Exit(code=1) from exc
    output = config.output
    if output.verbose:
        enable_verbose_logging()

    path = options.path
    if path is None or options.action is None:
        print_usage(output.prog_name)
        raise typer.Exit(code=1)
    if not can_open(path):
        print_usage(output.prog_name)
        plain(f"Could not open file '{options.filename}'")
        raise typer.Exit(code=1)

    result = load_catalog(path)
    _report_parse_error(result, config)

    catalog = result.catalog
    typer.echo(f"Read {len(catalog)} entries:")
    selected = DumpAction.from_raw(options.action)
    if selected is None:
        print_usage(output.prog_name)
        typer.echo("")
        raise typer.Exit(code=1)
    for line in render_listing(catalog, selected):
        typer.echo(line)
    typer.echo("")


def _report_parse_error(result: ParseResult, config: DumpConfig) -> None:
    """Explain a failed parse on stderr, aborting the run in strict mode."""

    error = result.error
    if error is None:
        LOGGER.debug("parsed %d entries", len(result.catalog))
        return
    output: OutputConfig = config.output
    fail(str(error), use_emoji=output.emoji, use_color=output.color)
    if config.strict:
        raise typer.Exit(code=1)
    if result.catalog:
        warn(
            f"listing the {len(result.catalog)} entries read before the error",
            use_emoji=output.emoji,
            use_color=output.color,
        )


__all__ = ["dump_catalog", "print_usage"]
