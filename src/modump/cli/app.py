# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

import typer

from .dump import dump_catalog

app = typer.Typer(
    name="mo-dump",
    help="Dump the entries of a compiled gettext catalog.",
    add_completion=False,
)
# Trailing arguments after the action are ignored rather than rejected.
app.command(context_settings={"allow_extra_args": True})(dump_catalog)


def main() -> None:
    """Run the ``mo-dump`` console script."""

    app()


__all__ = ["app", "main"]
