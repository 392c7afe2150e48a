# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while loading and parsing message catalogs."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path


class ParseErrorKind(StrEnum):
    """Enumerate the validation gates a catalog parse can fail at."""

    TOO_SMALL = "too_small"
    BAD_MAGIC = "bad_magic"
    UNSUPPORTED_VERSION = "unsupported_version"
    TRUNCATED_TABLE_HEADER = "truncated_table_header"
    TRUNCATED_STRING = "truncated_string"


class CatalogError(RuntimeError):
    """Base class for every catalog related failure."""


class CatalogParseError(CatalogError):
    """Raised when a catalog buffer violates the binary layout."""

    kind: ParseErrorKind


class TooSmallError(CatalogParseError):
    """Raised when the buffer cannot even hold the fixed header."""

    kind = ParseErrorKind.TOO_SMALL

    def __init__(self, size: int, required: int) -> None:
        """Record the observed ``size`` and the ``required`` header size."""

        super().__init__(f"content too small: {size} bytes found, expected {required} at least")
        self.size = size
        self.required = required


class BadMagicError(CatalogParseError):
    """Raised when the leading signature does not identify a catalog."""

    kind = ParseErrorKind.BAD_MAGIC

    def __init__(self, magic: int) -> None:
        super().__init__(f"magic number mismatch: found 0x{magic:08x}")
        self.magic = magic


class UnsupportedVersionError(CatalogParseError):
    """Raised when the header carries a revision other than 0 or 1."""

    kind = ParseErrorKind.UNSUPPORTED_VERSION

    def __init__(self, version: int) -> None:
        super().__init__(f"header version is wrong (not 0 or 1): {version}")
        self.version = version


class TruncatedTableHeaderError(CatalogParseError):
    """Raised when a descriptor table extends beyond the end of the buffer."""

    kind = ParseErrorKind.TRUNCATED_TABLE_HEADER

    def __init__(self, *, count: int, original_offset: int, translated_offset: int, size: int) -> None:
        """Capture the header numbers that failed the table bounds check.

        Args:
            count: Number of entries announced by the header.
            original_offset: Offset of the original string table.
            translated_offset: Offset of the translated string table.
            size: Total buffer size in bytes.
        """

        super().__init__(
            f"header indicates more messages than file has space for: {count} entries, "
            f"tables at {original_offset} and {translated_offset}, file size {size}",
        )
        self.count = count
        self.original_offset = original_offset
        self.translated_offset = translated_offset
        self.size = size


class TruncatedStringError(CatalogParseError):
    """Raised when an entry's string range ends past the buffer."""

    kind = ParseErrorKind.TRUNCATED_STRING

    def __init__(self, index: int, *, offset: int, length: int, size: int) -> None:
        """Capture the failing entry ``index`` and its descriptor."""

        super().__init__(
            f"file ended prematurely: entry {index} spans {offset}+{length} bytes, file size {size}",
        )
        self.index = index
        self.offset = offset
        self.length = length
        self.size = size


class CatalogFileError(CatalogError):
    """Raised when a catalog file cannot be read from disk."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class CatalogFileNotFoundError(CatalogFileError):
    """Raised when the catalog path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, "file not found")


class CatalogFileUnreadableError(CatalogFileError):
    """Raised when the catalog path exists but cannot be read."""


__all__ = (
    "BadMagicError",
    "CatalogError",
    "CatalogFileError",
    "CatalogFileNotFoundError",
    "CatalogFileUnreadableError",
    "CatalogParseError",
    "ParseErrorKind",
    "TooSmallError",
    "TruncatedStringError",
    "TruncatedTableHeaderError",
    "UnsupportedVersionError",
)
