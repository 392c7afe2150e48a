# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading compiled message catalogs from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import CatalogFileError, CatalogFileNotFoundError, CatalogFileUnreadableError
from .model_catalog import ParseResult
from .parser import parse_catalog

LOGGER = logging.getLogger(__name__)


def read_catalog_bytes(path: Path) -> bytes:
    """Read the whole catalog file at ``path``.

    Args:
        path: Filesystem path to the ``.mo`` file.

    Returns:
        bytes: Raw file contents.

    Raises:
        CatalogFileNotFoundError: If ``path`` does not exist.
        CatalogFileUnreadableError: If ``path`` cannot be opened or read.
    """
    if not path.exists():
        raise CatalogFileNotFoundError(path)
    try:
        with path.open("rb") as stream:
            return stream.read()
    except OSError as exc:
        raise CatalogFileUnreadableError(path, exc.strerror or str(exc)) from exc


def can_open(path: Path) -> bool:
    """Return ``True`` when ``path`` names a file that can be opened for reading."""

    try:
        with path.open("rb"):
            return True
    except OSError:
        return False


def load_catalog(path: Path) -> ParseResult:
    """Load and parse the catalog at ``path``.

    A file that cannot be opened yields an empty, successful result rather
    than an error; callers that need to tell the cases apart should check
    :func:`can_open` or use :func:`read_catalog_bytes` directly.

    Args:
        path: Filesystem path to the ``.mo`` file.

    Returns:
        ParseResult: Parsed catalog together with any validation error.
    """
    try:
        content = read_catalog_bytes(path)
    except CatalogFileError as exc:
        LOGGER.debug("skipping catalog parse: %s", exc)
        return ParseResult()
    return parse_catalog(content)


__all__ = ["can_open", "load_catalog", "read_catalog_bytes"]
