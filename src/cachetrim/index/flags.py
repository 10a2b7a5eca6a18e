"""Packing of the record flags word: a 24-bit size plus eight booleans."""

from __future__ import annotations

from cachetrim.constants.index import FILE_SIZE_BITS, FILE_SIZE_MASK, FLAG_FIELDS


def unpack_flags(flags: int) -> dict[str, int | bool]:
    """Split a flags word into ``file_size`` and the named boolean fields."""
    unpacked: dict[str, int | bool] = {"file_size": flags & FILE_SIZE_MASK}
    for offset, name in enumerate(FLAG_FIELDS):
        unpacked[name] = bool((flags >> (FILE_SIZE_BITS + offset)) & 1)
    return unpacked


def pack_flags(file_size: int, **bits: bool) -> int:
    """Build a flags word from a 24-bit size and named booleans.

    Names missing from ``bits`` are packed as unset.
    """
    unknown = set(bits) - set(FLAG_FIELDS)
    if unknown:
        raise ValueError(f"unknown flag(s): {', '.join(sorted(unknown))}")
    if not 0 <= file_size <= FILE_SIZE_MASK:
        raise ValueError(f"file_size must fit in {FILE_SIZE_BITS} bits, got {file_size}")
    flags = file_size
    for offset, name in enumerate(FLAG_FIELDS):
        if bits.get(name, False):
            flags |= 1 << (FILE_SIZE_BITS + offset)
    return flags
