"""Persona record protocol constants.

Single source of truth for the on-disk format tag and record layout.
Keep this file stable. Writer and Reader must remain synchronized.
"""

# Format tag identifying the record schema family
MAGIC_RECORD = b"PRSN"

VERSION = 1
MIN_VERSION = 1
MAX_VERSION = VERSION  # Highest schema version decode() understands

# Header: [Magic(4) | Ver(2) | NameLen(2)] = 8 bytes, big-endian
HEADER_FMT = ">4sHH"
HEADER_LEN = 8
MAGIC_LEN = 4

# Trailer: [Age(4)] signed, big-endian
AGE_FMT = ">i"
AGE_LEN = 4

RECORD_OVERHEAD = HEADER_LEN + AGE_LEN  # 12 bytes + name bytes

# Representable ranges
MAX_NAME_BYTES = 0xFFFF
AGE_MIN = -(2 ** 31)
AGE_MAX = 2 ** 31 - 1

# Reference-scenario storage location
DEFAULT_RECORD_FILE = "persona.rec"
