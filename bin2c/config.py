import os

VERSION = "2.0"

# Longest path or symbol, counting a terminator.
PATH_MAX = 65535

# Range of a C long long.
COUNT_MAX = 2**63 - 1

CHUNKSIZE = int(os.getenv("BIN2C_CHUNKSIZE", 4096 * 4))
assert CHUNKSIZE >= 512 and (
    CHUNKSIZE & (CHUNKSIZE - 1) == 0
), f"BIN2C_CHUNKSIZE must be a power of two of at least 512, not {CHUNKSIZE}"

ELEMENT_TYPE = "unsigned char const"
HEADER_EXT = "h"
SOURCE_EXT = "c"
