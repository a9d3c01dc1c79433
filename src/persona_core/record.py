"""Persona record - the value persisted by the writer and read back by the reader."""
from __future__ import annotations

from dataclasses import dataclass

from .errors import RecordValueError
from .protocol import AGE_MAX, AGE_MIN, MAX_NAME_BYTES, RECORD_OVERHEAD

# Fields that participate in the encoded layout, in wire order.
FIELDS = ("name", "age")


@dataclass(frozen=True)
class Record:
    """Immutable (name, age) pair.

    Construction rejects only what the byte layout cannot represent:
    non-text names, names over 65535 UTF-8 bytes, and ages outside the
    signed 32-bit range. Negative ages are allowed.
    """

    name: str
    age: int

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise RecordValueError(f"name must be str, got {type(self.name).__name__}", field="name")
        try:
            raw = self.name.encode("utf-8")
        except UnicodeEncodeError as e:
            raise RecordValueError(f"name is not UTF-8 encodable: {e.reason}", field="name") from e
        if len(raw) > MAX_NAME_BYTES:
            raise RecordValueError(
                f"name is {len(raw)} bytes in UTF-8, limit is {MAX_NAME_BYTES}", field="name"
            )

        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise RecordValueError(f"age must be int, got {type(self.age).__name__}", field="age")
        if not AGE_MIN <= self.age <= AGE_MAX:
            raise RecordValueError(f"age {self.age} outside signed 32-bit range", field="age")

    def name_bytes(self) -> bytes:
        return self.name.encode("utf-8")

    def encoded_size(self) -> int:
        return RECORD_OVERHEAD + len(self.name_bytes())

    def as_dict(self) -> dict:
        return {f: getattr(self, f) for f in FIELDS}
