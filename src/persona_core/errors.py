"""Persona error taxonomy.

Decode errors are recoverable and carry a stable ``code`` so callers can
report them without parsing messages.
"""
from __future__ import annotations

from typing import Optional

ERRORS = {
    "E_TRUNCATED": "Input ends before a declared field is complete",
    "E_UNKNOWN_FORMAT": "Format tag does not identify a persona record",
    "E_UNSUPPORTED_VERSION": "Schema version is not supported by this reader",
    "E_MALFORMED_FIELD": "Record field cannot be parsed",
    "E_FIELD_OVERRUN": "Length prefix runs past the end of input",
    "E_IO": "Record storage could not be read",
}


class PersonaError(Exception):
    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.message = message
        self.context = kwargs


class RecordValueError(PersonaError, ValueError):
    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class DecodeError(PersonaError):
    code = "E_MALFORMED_FIELD"

    def __init__(self, message: str, offset: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.offset = offset

    def as_dict(self) -> dict:
        out = {"code": self.code, "message": ERRORS[self.code], "detail": self.message}
        if self.offset is not None:
            out["offset"] = self.offset
        return out


class TruncatedInput(DecodeError):
    code = "E_TRUNCATED"


class UnknownFormat(DecodeError):
    code = "E_UNKNOWN_FORMAT"


class UnsupportedVersion(DecodeError):
    code = "E_UNSUPPORTED_VERSION"

    def __init__(self, message: str, version: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.version = version


class MalformedField(DecodeError):
    code = "E_MALFORMED_FIELD"

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class FieldOverrun(MalformedField, TruncatedInput):
    """A length prefix claims more bytes than the input holds.

    From the bytes alone this cannot be told apart from a record that was
    cut short, so it is both a MalformedField and a TruncatedInput.
    """

    code = "E_FIELD_OVERRUN"
