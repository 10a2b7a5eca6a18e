"""Reading and writing whole index files."""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import suppress
from collections.abc import Callable
from pathlib import Path

from cachetrim.constants.layout import INDEX_TEMP_PREFIX, INDEX_TEMP_SUFFIX
from cachetrim.exceptions import IndexFormatError, IndexWriteError
from cachetrim.index.codec import decode_header, iter_records, write_header, write_record
from cachetrim.model import CacheIndex, CacheIndexHeader

logger = logging.getLogger(__name__)


def read_index(
    path: Path,
    *,
    strict: bool = False,
    check_header: Callable[[CacheIndexHeader], None] | None = None,
) -> CacheIndex:
    """Load the header and every decodable record from an index file.

    ``check_header`` runs on the decoded header before any record is read,
    so a rejected header is reported even when the records are damaged.
    """
    try:
        with path.open("rb") as handle:
            header = decode_header(handle)
            if check_header is not None:
                check_header(header)
            records = tuple(iter_records(handle, strict=strict))
    except OSError as exc:
        raise IndexFormatError(f"cannot read cache index {path}: {exc}") from exc
    logger.debug("Read index %s: version %d, %d records", path, header.version, len(records))
    return CacheIndex(header=header, records=records)


def write_index(path: Path, index: CacheIndex) -> None:
    """Persist an index by writing a temp file then renaming it over ``path``."""
    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=INDEX_TEMP_PREFIX,
            suffix=INDEX_TEMP_SUFFIX,
            delete=False,
        ) as handle:
            temp_name = handle.name
            write_header(handle, index.header)
            for record in index.records:
                write_record(handle, record)
        os.replace(temp_name, path)
    except OSError as exc:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise IndexWriteError(f"cannot write cache index {path}: {exc}") from exc
    logger.debug("Wrote index %s with %d records", path, len(index.records))
