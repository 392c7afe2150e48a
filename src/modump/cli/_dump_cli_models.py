# SPDX-License-Identifier: MIT
"""Data structures for the catalog dump CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import DEFAULT_PROG_NAME, DumpConfig

FILENAME_ARGUMENT = Annotated[
    str | None,
    typer.Argument(metavar="MO-FILENAME", help="Compiled gettext catalog to read.", show_default=False),
]
ACTION_ARGUMENT = Annotated[
    str | None,
    typer.Argument(metavar="keys|pairs", help="Print message ids only, or ids with translations.", show_default=False),
]
STRICT_OPTION = Annotated[
    bool,
    typer.Option("--strict", help="Exit with an error instead of listing a damaged catalog."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log parser progress to stderr."),
]
NO_COLOR_OPTION = Annotated[
    bool,
    typer.Option("--no-color", help="Disable coloured diagnostics."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji", help="Prefix diagnostics with emoji."),
]


@dataclass(slots=True)
class DumpCLIOptions:
    """Normalised CLI inputs for the catalog dump command."""

    filename: str | None
    action: str | None
    strict: bool
    verbose: bool
    no_color: bool
    emoji: bool

    @property
    def path(self) -> Path | None:
        """Return the catalog path, or ``None`` when no filename was given."""

        return Path(self.filename) if self.filename is not None else None

    def apply(self, config: DumpConfig, *, prog_name: str | None) -> DumpConfig:
        """Return a copy of ``config`` with command-line flags layered on top.

        Args:
            config: Configuration loaded from the environment.
            prog_name: Program name the CLI was invoked as.

        Returns:
            DumpConfig: Configuration reflecting both sources.
        """

        output = config.output.model_copy(
            update={
                "color": config.output.color and not self.no_color,
                "emoji": config.output.emoji or self.emoji,
                "verbose": config.output.verbose or self.verbose,
                "prog_name": prog_name or DEFAULT_PROG_NAME,
            },
        )
        return config.model_copy(update={"output": output, "strict": config.strict or self.strict})


def build_dump_options(
    filename: str | None,
    action: str | None,
    *,
    strict: bool = False,
    verbose: bool = False,
    no_color: bool = False,
    emoji: bool = False,
) -> DumpCLIOptions:
    """Construct ``DumpCLIOptions`` from Typer parameters."""

    return DumpCLIOptions(
        filename=filename,
        action=action,
        strict=strict,
        verbose=verbose,
        no_color=no_color,
        emoji=emoji,
    )


__all__ = [
    "ACTION_ARGUMENT",
    "DumpCLIOptions",
    "EMOJI_OPTION",
    "FILENAME_ARGUMENT",
    "NO_COLOR_OPTION",
    "STRICT_OPTION",
    "VERBOSE_OPTION",
    "build_dump_options",
]
