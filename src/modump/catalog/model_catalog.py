# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog aggregate models produced by the message catalog parser."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import CatalogParseError


@dataclass(frozen=True, slots=True, eq=False)
class Catalog(Mapping[bytes, bytes]):
    """Immutable message-id to translation mapping in table order."""

    _entries: Mapping[bytes, bytes] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze a private copy of the supplied entries."""

        object.__setattr__(self, "_entries", MappingProxyType(dict(self._entries)))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[bytes, bytes]]) -> Catalog:
        """Build a catalog from ``pairs``, keeping the first value of a repeated key.

        Args:
            pairs: Message-id/translation pairs in table order.

        Returns:
            Catalog: Catalog holding one entry per distinct message id.
        """

        entries: dict[bytes, bytes] = {}
        for key, value in pairs:
            entries.setdefault(bytes(key), bytes(value))
        return cls(entries)

    def __getitem__(self, key: bytes) -> bytes:
        return self._entries[key]

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({dict(self._entries)!r})"


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of a catalog parse: the entries read plus the gate that failed, if any.

    A failed parse may still carry entries. When an entry's string range is
    truncated, every entry before it has already been committed and is kept.
    """

    catalog: Catalog = field(default_factory=Catalog)
    error: CatalogParseError | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when every validation gate passed."""

        return self.error is None

    def unwrap(self) -> Catalog:
        """Return the catalog, raising the recorded parse error if there is one.

        Returns:
            Catalog: The fully parsed catalog.

        Raises:
            CatalogParseError: If the parse stopped at a validation gate.
        """

        if self.error is not None:
            raise self.error
        return self.catalog


__all__ = [
    "Catalog",
    "ParseResult",
]
