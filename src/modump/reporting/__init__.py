# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rendering helpers for catalog listings."""

from __future__ import annotations

from .formatters import format_key_line, format_pair_line, quote_escape, render_listing

__all__ = ["format_key_line", "format_pair_line", "quote_escape", "render_listing"]
