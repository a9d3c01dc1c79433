import hashlib
import struct
from pathlib import Path

from persona_core.codec import decode
from persona_core.errors import ERRORS, DecodeError
from persona_core.protocol import HEADER_FMT, VERSION


def _fail(*errors: dict) -> dict:
    return {"status": "FAIL", "error_count": len(errors), "errors": list(errors)}


def inspect_file(path: Path) -> dict:
    """Check a single-record file and describe what it holds."""
    path = Path(path)
    if not path.is_file():
        return _fail({"code": "E_IO", "message": ERRORS["E_IO"], "path": str(path)})

    try:
        raw = path.read_bytes()
    except OSError as e:
        return _fail({"code": "E_IO", "message": ERRORS["E_IO"], "path": str(path), "detail": str(e)})

    try:
        record = decode(raw)
    except DecodeError as e:
        return _fail(dict(e.as_dict(), path=str(path)))

    _, ver, _ = struct.unpack_from(HEADER_FMT, raw)
    return {
        "status": "PASS",
        "error_count": 0,
        "errors": [],
        "path": str(path),
        "version": ver,
        "reader_version": VERSION,
        "size": len(raw),
        "sha256": hashlib.sha256(raw).hexdigest(),
        "record": record.as_dict(),
    }
