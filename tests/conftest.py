# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import logging
import struct
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest

from modump.catalog import HEADER_SIZE, MO_MAGIC

CatalogBuilder = Callable[..., bytes]


def build_catalog_bytes(
    pairs: Sequence[tuple[bytes, bytes]],
    *,
    magic: int = MO_MAGIC,
    version: int = 0,
    terminate: bool = True,
) -> bytes:
    """Lay out ``pairs`` as a little-endian ``.mo`` image.

    Both descriptor tables follow the header; all message ids are stored
    before all translations. With ``terminate`` every string is followed by
    a NUL byte, as ``msgfmt`` writes them.
    """
    count = len(pairs)
    original_offset = HEADER_SIZE
    translated_offset = original_offset + 8 * count
    cursor = translated_offset + 8 * count
    suffix = b"\0" if terminate else b""

    descriptors: list[list[tuple[int, int]]] = [[], []]
    strings = bytearray()
    for column in (0, 1):
        for pair in pairs:
            text = pair[column]
            descriptors[column].append((len(text), cursor + len(strings)))
            strings += text + suffix

    image = bytearray(struct.pack("<5I", magic, version, count, original_offset, translated_offset))
    for column in (0, 1):
        for length, offset in descriptors[column]:
            image += struct.pack("<2I", length, offset)
    image += strings
    return bytes(image)


@pytest.fixture
def catalog_builder() -> CatalogBuilder:
    """Return the ``.mo`` image builder used across catalog tests."""
    return build_catalog_bytes


@pytest.fixture
def hello_catalog(tmp_path: Path) -> Path:
    """Write a one-entry catalog mapping ``hello`` to ``bonjour``."""
    path = tmp_path / "fr.mo"
    path.write_bytes(build_catalog_bytes([(b"hello", b"bonjour")]))
    return path


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Yield the ``modump`` logger and undo any verbose configuration afterwards."""
    logger = logging.getLogger("modump")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    if hasattr(logger, "_modump_verbose_configured"):
        delattr(logger, "_modump_verbose_configured")
