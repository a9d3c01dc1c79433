"""Persona Core - record type, versioned codec and record storage."""
from .codec import decode, decode_from, encode, iter_decode
from .errors import (
    ERRORS,
    DecodeError,
    FieldOverrun,
    MalformedField,
    PersonaError,
    RecordValueError,
    TruncatedInput,
    UnknownFormat,
    UnsupportedVersion,
)
from .record import FIELDS, Record
from .storage import append_record, load_record, read_from, save_record, scan_records, write_to

__all__ = [
    "Record", "FIELDS",
    "encode", "decode", "decode_from", "iter_decode",
    "write_to", "read_from", "save_record", "load_record", "append_record", "scan_records",
    "ERRORS", "PersonaError", "RecordValueError", "DecodeError",
    "TruncatedInput", "UnknownFormat", "UnsupportedVersion", "MalformedField", "FieldOverrun",
]
