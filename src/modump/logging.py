# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing diagnostics on stderr with optional colour and emoji support."""

from __future__ import annotations

import logging
import sys

from rich.text import Text

from .runtime.console.manager import get_console_manager

_PACKAGE_LOGGER = "modump"


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(msg: str, *, style: str, use_emoji: bool, use_color: bool) -> None:
    """Render ``msg`` to the stderr console.

    Args:
        msg: Message text to print.
        style: Rich style applied when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Flag indicating whether colour output is desired.
    """

    console = get_console_manager().get(color=use_color, emoji=use_emoji)
    text = Text(msg)
    if use_color:
        text.stylize(style)
    console.print(text)


def plain(msg: str) -> None:
    """Emit ``msg`` without any decoration."""

    get_console_manager().get(color=False, emoji=False).print(Text(msg))


def warn(msg: str, *, use_emoji: bool, use_color: bool = True) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool = True) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


def enable_verbose_logging() -> None:
    """Stream ``modump`` debug records to stderr."""

    logger = logging.getLogger(_PACKAGE_LOGGER)
    if getattr(logger, "_modump_verbose_configured", False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, "_modump_verbose_configured", True)


__all__ = ["emoji", "enable_verbose_logging", "fail", "plain", "warn"]
