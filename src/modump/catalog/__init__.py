# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reading and parsing of compiled gettext message catalogs."""

from __future__ import annotations

from .errors import (
    BadMagicError,
    CatalogError,
    CatalogFileError,
    CatalogFileNotFoundError,
    CatalogFileUnreadableError,
    CatalogParseError,
    ParseErrorKind,
    TooSmallError,
    TruncatedStringError,
    TruncatedTableHeaderError,
    UnsupportedVersionError,
)
from .io import can_open, load_catalog, read_catalog_bytes
from .model_catalog import Catalog, ParseResult
from .parser import DESCRIPTOR_SIZE, HEADER_SIZE, MO_MAGIC, parse_catalog

__all__ = [
    "BadMagicError",
    "Catalog",
    "CatalogError",
    "CatalogFileError",
    "CatalogFileNotFoundError",
    "CatalogFileUnreadableError",
    "CatalogParseError",
    "DESCRIPTOR_SIZE",
    "HEADER_SIZE",
    "MO_MAGIC",
    "ParseErrorKind",
    "ParseResult",
    "TooSmallError",
    "TruncatedStringError",
    "TruncatedTableHeaderError",
    "UnsupportedVersionError",
    "can_open",
    "load_catalog",
    "parse_catalog",
    "read_catalog_bytes",
]
