"""Binary encoding for grouped spell collections.

The format is versioned and length-prefixed so that a file written by one
release can be checked, rather than guessed at, by another. Version 1:

    magic        b"MGCT"
    version      u8
    group count  u32
    per group:   category name (str), spell count (u32, > 0)
    per spell:   name (str), rank (int)

Every ``str`` is a u32 byte length followed by UTF-8 bytes. Every ``int``
is a u32 byte length (> 0) followed by a signed two's-complement integer of
that many bytes, so ranks of any size are stored exactly. Fixed-width
integers are big-endian.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence

from magic_catalog.exceptions import DeserializationError
from magic_catalog.models import Category, Spell

MAGIC = b"MGCT"
FORMAT_VERSION = 1

_U8 = struct.Struct(">B")
_U32 = struct.Struct(">I")


def encode_groups(groups: Iterable[tuple[Category, Sequence[Spell]]]) -> bytes:
    """Encode category groups, preserving group and spell order.

    Groups without spells are skipped.
    """

    groups = [(category, spells) for category, spells in groups if spells]

    parts = [MAGIC, _U8.pack(FORMAT_VERSION), _U32.pack(len(groups))]
    for category, spells in groups:
        parts.append(_pack_str(category.name))
        parts.append(_U32.pack(len(spells)))
        for spell in spells:
            parts.append(_pack_str(spell.name))
            parts.append(_pack_int(spell.rank))
    return b"".join(parts)


def decode_groups(data: bytes, category_type: type[Category]) -> dict[Category, list[Spell]]:
    """Decode bytes produced by :func:`encode_groups`.

    Args:
        data: Encoded catalog.
        category_type: Enumeration that category names are resolved against.

    Returns:
        Mapping of category to spells, in stored order.

    Raises:
        DeserializationError: If the data is corrupt, of an unsupported
            version, or names a category outside ``category_type``.
    """

    reader = _Reader(data)

    if reader.take(len(MAGIC)) != MAGIC:
        raise DeserializationError("Not a catalog file (bad magic)")

    (version,) = reader.unpack(_U8)
    if version != FORMAT_VERSION:
        raise DeserializationError(
            f"Unsupported format version {version}; expected {FORMAT_VERSION}"
        )

    groups: dict[Category, list[Spell]] = {}
    (group_count,) = reader.unpack(_U32)
    for _ in range(group_count):
        category_name = reader.read_str()
        try:
            category = category_type[category_name]
        except KeyError:
            raise DeserializationError(
                f"Unknown category {category_name!r} for {category_type.__name__}"
            ) from None
        if category in groups:
            raise DeserializationError(f"Duplicate group for category {category_name!r}")

        (spell_count,) = reader.unpack(_U32)
        if spell_count == 0:
            raise DeserializationError(f"Empty group for category {category_name!r}")

        spells = []
        for _ in range(spell_count):
            name = reader.read_str()
            rank = reader.read_int()
            spells.append(Spell(name=name, category=category, rank=rank))
        groups[category] = spells

    if not reader.at_end():
        raise DeserializationError(f"{reader.remaining} trailing bytes after catalog data")

    return groups


def _pack_str(value: str) -> bytes:
    raw = value.encode("utf-8")
    return _U32.pack(len(raw)) + raw


def _pack_int(value: int) -> bytes:
    # One spare bit for the sign; zero still takes one byte.
    raw = value.to_bytes(value.bit_length() // 8 + 1, "big", signed=True)
    return _U32.pack(len(raw)) + raw


class _Reader:
    """Cursor over an encoded buffer that fails on truncation."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def at_end(self) -> bool:
        return self.remaining == 0

    def take(self, size: int) -> bytes:
        if size > self.remaining:
            raise DeserializationError(
                f"Truncated data: needed {size} bytes at offset {self._offset}, "
                f"{self.remaining} left"
            )
        chunk = self._data[self._offset : self._offset + size]
        self._offset += size
        return chunk

    def unpack(self, fmt: struct.Struct) -> tuple[int, ...]:
        return fmt.unpack(self.take(fmt.size))

    def read_str(self) -> str:
        (length,) = self.unpack(_U32)
        raw = self.take(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DeserializationError(f"Invalid UTF-8 string: {exc}") from exc

    def read_int(self) -> int:
        (length,) = self.unpack(_U32)
        if length == 0:
            raise DeserializationError(f"Empty integer at offset {self._offset}")
        return int.from_bytes(self.take(length), "big", signed=True)
