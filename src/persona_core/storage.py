"""Record storage: byte sinks, byte sources and record files.

The codec never touches storage; this module is the collaborator that
hands it complete byte sequences and persists what it produces.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import BinaryIO, Union
from warnings import warn

from .codec import decode, decode_from, encode
from .errors import TruncatedInput
from .record import Record

PathLike = Union[str, os.PathLike]


def _sync(f: BinaryIO) -> None:
    f.flush()
    os.fdatasync(f.fileno()) if hasattr(os, "fdatasync") else os.fsync(f.fileno())


def write_to(sink: BinaryIO, record: Record) -> int:
    """Write one encoded record to any object with ``write(bytes)``."""
    blob = encode(record)
    sink.write(blob)
    return len(blob)


def read_from(source: BinaryIO) -> Record:
    """Read ``source`` to the end and decode exactly one record."""
    return decode(source.read())


def save_record(path: PathLike, record: Record) -> int:
    """Persist a single record, replacing ``path`` atomically."""
    path = Path(path)
    blob = encode(record)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(blob)
            _sync(f)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
    return len(blob)


def load_record(path: PathLike) -> Record:
    with open(path, "rb") as f:
        return read_from(f)


def append_record(path: PathLike, record: Record) -> int:
    """Append one record to a record stream file; returns its byte offset."""
    with open(path, "ab") as f:
        offset = f.tell()
        write_to(f, record)
        _sync(f)
    return offset


def scan_records(path: PathLike) -> list[Record]:
    """Read every record of a record stream file.

    A torn final record (crash during append) is reported and dropped.
    Any other corruption raises.
    """
    raw = Path(path).read_bytes()
    records: list[Record] = []
    cur = 0
    while cur < len(raw):
        try:
            record, cur = decode_from(raw, cur)
        except TruncatedInput:
            warn(f"Torn record at offset {cur} in {path} ({len(raw) - cur} bytes). Stopping scan.")
            break
        records.append(record)
    return records
