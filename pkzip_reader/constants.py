LOCAL_FILE_HEADER_SIGNATURE = 0x04034B50
CD_HEADER_SIGNATURE = 0x02014B50
EOCD_SIGNATURE = 0x06054B50

LOCAL_FILE_HEADER_SIZE = 30
CD_HEADER_SIZE = 46
EOCD_RECORD_SIZE = 22

# The comment length is a 16-bit field, so the EOCD can start no further back than this from the end.
MAX_COMMENT_LENGTH = 0xFFFF
EOCD_SEARCH_LIMIT = MAX_COMMENT_LENGTH + EOCD_RECORD_SIZE

# Distance from the start of the EOCD signature to its comment length field.
EOCD_COMMENT_LENGTH_OFFSET = EOCD_RECORD_SIZE - 2

# General purpose bit flags
FLAG_ENCRYPTED = 0x0001
FLAG_DATA_DESCRIPTOR = 0x0008

COMPRESSION_STORED = 0

DEFAULT_ENCODING = "cp437"
