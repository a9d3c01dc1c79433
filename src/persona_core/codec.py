"""Persona record codec.

Layout (big-endian):

    [Magic(4) | Ver(2) | NameLen(2) | Name(NameLen, UTF-8) | Age(4, signed)]

Decoding is a single pass with a cursor. Every read checks the remaining
length first, so bad input produces a DecodeError instead of an over-read.
The codec performs no I/O and never logs.
"""
from __future__ import annotations

import struct
from typing import Iterator, Union

from .errors import (
    FieldOverrun,
    MalformedField,
    TruncatedInput,
    UnknownFormat,
    UnsupportedVersion,
)
from .protocol import (
    AGE_FMT,
    AGE_LEN,
    HEADER_FMT,
    HEADER_LEN,
    MAGIC_LEN,
    MAGIC_RECORD,
    MAX_VERSION,
    MIN_VERSION,
    VERSION,
)
from .record import Record

Buffer = Union[bytes, bytearray, memoryview]


def encode(record: Record) -> bytes:
    """Encode a Record. Deterministic: equal records give equal bytes."""
    name = record.name_bytes()
    header = struct.pack(HEADER_FMT, MAGIC_RECORD, VERSION, len(name))
    return header + name + struct.pack(AGE_FMT, record.age)


def decode_from(data: Buffer, offset: int = 0) -> tuple[Record, int]:
    """Decode one record starting at ``offset``.

    Returns the record and the offset just past it. Bytes after the record
    are left alone.
    """
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")
    buf = bytes(data)
    end = len(buf)
    cur = offset

    # 1. Format tag, checked as soon as it is readable
    tag = buf[cur:cur + MAGIC_LEN]
    if len(tag) < MAGIC_LEN:
        if tag != MAGIC_RECORD[:len(tag)]:
            raise UnknownFormat(f"Bad format tag {tag!r}", offset=cur)
        raise TruncatedInput(f"Input ends inside format tag ({len(tag)} of {MAGIC_LEN} bytes)", offset=cur)
    if tag != MAGIC_RECORD:
        raise UnknownFormat(f"Bad format tag {tag!r}", offset=cur)

    # 2. Header
    if end - cur < HEADER_LEN:
        raise TruncatedInput(f"Input ends inside header ({end - cur} of {HEADER_LEN} bytes)", offset=cur)
    _, ver, name_len = struct.unpack_from(HEADER_FMT, buf, cur)
    if not MIN_VERSION <= ver <= MAX_VERSION:
        raise UnsupportedVersion(
            f"Schema version {ver} not in supported range {MIN_VERSION}..{MAX_VERSION}",
            offset=cur + MAGIC_LEN,
            version=ver,
        )
    cur += HEADER_LEN

    # 3. Name
    if name_len > end - cur:
        raise FieldOverrun(
            f"Name length {name_len} exceeds remaining {end - cur} bytes",
            offset=cur,
            field="name",
        )
    try:
        name = buf[cur:cur + name_len].decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedField(f"Name is not valid UTF-8: {e.reason}", offset=cur + e.start, field="name") from e
    cur += name_len

    # 4. Age
    if end - cur < AGE_LEN:
        raise TruncatedInput(f"Input ends inside age field ({end - cur} of {AGE_LEN} bytes)", offset=cur)
    (age,) = struct.unpack_from(AGE_FMT, buf, cur)
    cur += AGE_LEN

    return Record(name, age), cur


def decode(data: Buffer) -> Record:
    """Decode exactly one record; trailing bytes are a MalformedField."""
    buf = bytes(data)
    record, cur = decode_from(buf)
    extra = len(buf) - cur
    if extra:
        raise MalformedField(f"{extra} trailing bytes after record", offset=cur)
    return record


def iter_decode(data: Buffer) -> Iterator[Record]:
    """Yield every record in a buffer of back-to-back encodings."""
    buf = bytes(data)
    cur = 0
    while cur < len(buf):
        record, cur = decode_from(buf, cur)
        yield record
