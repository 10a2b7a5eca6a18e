"""Binary cache2 index codec and file helpers."""

from .codec import (
    decode_header,
    decode_record,
    encode_header,
    encode_record,
    iter_records,
    write_header,
    write_record,
)
from .flags import pack_flags, unpack_flags
from .store import read_index, write_index

__all__ = [
    "decode_header",
    "decode_record",
    "encode_header",
    "encode_record",
    "iter_records",
    "pack_flags",
    "read_index",
    "unpack_flags",
    "write_header",
    "write_index",
    "write_record",
]
