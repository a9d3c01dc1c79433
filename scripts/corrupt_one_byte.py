import sys
from pathlib import Path

from persona_core.protocol import MAGIC_LEN, RECORD_OVERHEAD


def main():
    if len(sys.argv) not in (2, 3):
        print("Usage: corrupt_one_byte.py <file> [offset]")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())
    if len(b) < RECORD_OVERHEAD:
        print("File too small to be a record.")
        raise SystemExit(2)

    # Default: flip the last byte of the format tag so the reader reports
    # E_UNKNOWN_FORMAT.
    idx = int(sys.argv[2]) if len(sys.argv) == 3 else MAGIC_LEN - 1
    if not 0 <= idx < len(b):
        print(f"Offset {idx} outside file of {len(b)} bytes.")
        raise SystemExit(2)
    b[idx] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")


if __name__ == "__main__":
    main()
