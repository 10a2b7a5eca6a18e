"""Big-endian codec for the cache2 index header and records."""

from __future__ import annotations

import logging
import struct
from collections.abc import Iterator
from typing import BinaryIO

from cachetrim.constants.index import (
    FLAG_FIELDS,
    HEADER_FORMAT,
    HEADER_SIZE,
    RECORD_FORMAT,
    RECORD_SIZE,
)
from cachetrim.exceptions import IndexTruncatedError
from cachetrim.index.flags import pack_flags, unpack_flags
from cachetrim.model import CacheIndexHeader, CacheIndexRecord

logger = logging.getLogger(__name__)

_HEADER = struct.Struct(HEADER_FORMAT)
_RECORD = struct.Struct(RECORD_FORMAT)

assert _HEADER.size == HEADER_SIZE
assert _RECORD.size == RECORD_SIZE


def _read_exact(stream: BinaryIO, size: int, structure: str) -> bytes:
    """Read exactly ``size`` bytes or raise :class:`IndexTruncatedError`."""
    chunks: list[bytes] = []
    remaining = size
    while remaining:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    data = b"".join(chunks)
    if len(data) != size:
        raise IndexTruncatedError(structure, size, len(data))
    return data


def decode_header(stream: BinaryIO) -> CacheIndexHeader:
    """Decode ``version, time_stamp, is_dirty`` from the stream."""
    version, time_stamp, is_dirty = _HEADER.unpack(_read_exact(stream, HEADER_SIZE, "header"))
    return CacheIndexHeader(version=version, time_stamp=time_stamp, is_dirty=is_dirty)


def encode_header(header: CacheIndexHeader) -> bytes:
    return _HEADER.pack(header.version, header.time_stamp, header.is_dirty)


def write_header(stream: BinaryIO, header: CacheIndexHeader) -> None:
    stream.write(encode_header(header))


def decode_record_bytes(data: bytes) -> CacheIndexRecord:
    """Decode one record from exactly :data:`RECORD_SIZE` bytes."""
    if len(data) != RECORD_SIZE:
        raise IndexTruncatedError("record", RECORD_SIZE, len(data))
    (
        hash_,
        frecency,
        origin_attrs_hash,
        on_start_time,
        on_stop_time,
        content_type,
        base_domain_access_count,
        flags,
    ) = _RECORD.unpack(data)
    return CacheIndexRecord(
        hash=hash_,
        frecency=frecency,
        origin_attrs_hash=origin_attrs_hash,
        on_start_time=on_start_time,
        on_stop_time=on_stop_time,
        content_type=content_type,
        base_domain_access_count=base_domain_access_count,
        **unpack_flags(flags),  # type: ignore[arg-type]
    )


def decode_record(stream: BinaryIO) -> CacheIndexRecord:
    """Decode the next record, raising if the stream ends partway through."""
    return decode_record_bytes(_read_exact(stream, RECORD_SIZE, "record"))


def encode_record(record: CacheIndexRecord) -> bytes:
    flags = pack_flags(
        record.file_size,
        **{name: getattr(record, name) for name in FLAG_FIELDS},
    )
    return _RECORD.pack(
        record.hash,
        record.frecency,
        record.origin_attrs_hash,
        record.on_start_time,
        record.on_stop_time,
        record.content_type,
        record.base_domain_access_count,
        flags,
    )


def write_record(stream: BinaryIO, record: CacheIndexRecord) -> None:
    stream.write(encode_record(record))


def iter_records(stream: BinaryIO, *, strict: bool = False) -> Iterator[CacheIndexRecord]:
    """Yield records until the stream is exhausted.

    The record count is implicit in the stream length. A clean end of stream
    ends iteration. A partial trailing record also ends iteration and is
    dropped, unless ``strict`` is set, in which case it is raised.
    """
    while True:
        data = stream.read(RECORD_SIZE)
        if not data:
            return
        while len(data) < RECORD_SIZE:
            more = stream.read(RECORD_SIZE - len(data))
            if not more:
                break
            data += more
        if len(data) < RECORD_SIZE:
            if strict:
                raise IndexTruncatedError("record", RECORD_SIZE, len(data))
            logger.warning("Dropping %d trailing bytes that do not form a full index record", len(data))
            return
        yield decode_record_bytes(data)
