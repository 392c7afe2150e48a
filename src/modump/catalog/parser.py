# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Parser for compiled gettext message catalogs (``.mo`` files).

The layout is described in the GNU gettext manual: a fixed header of five
little-endian 32-bit words followed, at the offsets it names, by two parallel
tables of ``(length, offset)`` descriptors. Descriptor ``i`` of the original
table and descriptor ``i`` of the translated table form one catalog entry.

Every integer is decoded with :func:`struct.unpack_from` at an offset that has
already been checked against the buffer length, so a corrupt or hostile file
can never cause a read past its end.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Final

from .errors import (
    BadMagicError,
    CatalogParseError,
    TooSmallError,
    TruncatedStringError,
    TruncatedTableHeaderError,
    UnsupportedVersionError,
)
from .model_catalog import Catalog, ParseResult

LOGGER = logging.getLogger(__name__)

MO_MAGIC: Final[int] = 0x950412DE
SUPPORTED_VERSIONS: Final[frozenset[int]] = frozenset({0, 1})

_HEADER: Final[struct.Struct] = struct.Struct("<5I")
_DESCRIPTOR: Final[struct.Struct] = struct.Struct("<2I")
HEADER_SIZE: Final[int] = _HEADER.size
DESCRIPTOR_SIZE: Final[int] = _DESCRIPTOR.size

Buffer = bytes | bytearray | memoryview


@dataclass(frozen=True, slots=True)
class _Header:
    magic: int
    version: int
    count: int
    original_offset: int
    translated_offset: int


def parse_catalog(buffer: Buffer) -> ParseResult:
    """Parse ``buffer`` into a catalog of message ids and translations.

    Args:
        buffer: Complete contents of a compiled message catalog.

    Returns:
        ParseResult: The parsed catalog and, when a validation gate failed,
        the error describing it. Entries read before a truncated string are
        retained in the returned catalog.
    """

    view = memoryview(buffer).cast("B")
    entries: dict[bytes, bytes] = {}
    try:
        header = _read_header(view)
        _check_tables(header, len(view))
        for index in range(header.count):
            msgid = _read_string(view, header.original_offset, index)
            msgstr = _read_string(view, header.translated_offset, index)
            entries.setdefault(msgid, msgstr)
    except CatalogParseError as exc:
        LOGGER.debug("catalog parse stopped (%s) after %d entries: %s", exc.kind, len(entries), exc)
        return ParseResult(catalog=Catalog(entries), error=exc)
    return ParseResult(catalog=Catalog(entries))


def _read_header(view: memoryview) -> _Header:
    """Decode and validate the fixed-size header at the start of ``view``."""

    size = len(view)
    if size < HEADER_SIZE:
        raise TooSmallError(size, HEADER_SIZE)
    header = _Header(*_HEADER.unpack_from(view, 0))
    if header.magic != MO_MAGIC:
        raise BadMagicError(header.magic)
    if header.version not in SUPPORTED_VERSIONS:
        raise UnsupportedVersionError(header.version)
    return header


def _check_tables(header: _Header, size: int) -> None:
    table_size = DESCRIPTOR_SIZE * header.count
    if header.original_offset + table_size > size or header.translated_offset + table_size > size:
        raise TruncatedTableHeaderError(
            count=header.count,
            original_offset=header.original_offset,
            translated_offset=header.translated_offset,
            size=size,
        )


def _read_string(view: memoryview, table_offset: int, index: int) -> bytes:
    """Return a copy of the string located by descriptor ``index`` of a table.

    Args:
        view: Byte view over the whole catalog.
        table_offset: Offset of the descriptor table, already bounds checked.
        index: Entry index within the table.

    Returns:
        bytes: The referenced byte range.

    Raises:
        TruncatedStringError: If the range ends past the buffer.
    """

    length, offset = _DESCRIPTOR.unpack_from(view, table_offset + DESCRIPTOR_SIZE * index)
    size = len(view)
    if offset + length > size:
        raise TruncatedStringError(index, offset=offset, length=length, size=size)
    return view[offset : offset + length].tobytes()


__all__ = [
    "DESCRIPTOR_SIZE",
    "HEADER_SIZE",
    "MO_MAGIC",
    "SUPPORTED_VERSIONS",
    "parse_catalog",
]
