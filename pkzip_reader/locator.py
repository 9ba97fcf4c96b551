from __future__ import annotations

import logging

from pkzip_reader.constants import (
    DEFAULT_ENCODING,
    EOCD_COMMENT_LENGTH_OFFSET,
    EOCD_RECORD_SIZE,
    EOCD_SEARCH_LIMIT,
)
from pkzip_reader.cursor import BinaryCursor
from pkzip_reader.decoders import decode_eocd_record
from pkzip_reader.exceptions import EOCDNotFoundError, SignatureMismatchError
from pkzip_reader.models import EOCDRecord

logger = logging.getLogger(__name__)


def find_eocd_record(
    cursor: BinaryCursor, search_limit: int = EOCD_SEARCH_LIMIT, encoding: str = DEFAULT_ENCODING
) -> EOCDRecord:
    """
    Find the End of Central Directory (EOCD) record by scanning backward from the end of the source.

    The EOCD ends with a variable length comment, so its start can only be recovered from the
    comment length stored right before that comment. Each position `p` is tried as that field: it
    is accepted when the value read there accounts exactly for the bytes between `p + 2` and the
    end, and confirmed when an EOCD signature sits where the record would then have to start.
    Positions that pass the first check but not the second are coincidences and are skipped.
    """

    end = cursor.length

    if end < EOCD_RECORD_SIZE:
        raise EOCDNotFoundError(search_limit)

    # The record can't start before `end - search_limit`, nor before the start of the source.
    lowest = max(end - search_limit, 0) + EOCD_COMMENT_LENGTH_OFFSET
    position = end - 2

    while position >= lowest:
        cursor.position = position
        comment_length = cursor.read_uint16()

        if comment_length == end - position - 2:
            start = position - EOCD_COMMENT_LENGTH_OFFSET

            try:
                eocd = decode_eocd_record(cursor, offset=start, encoding=encoding)
            except SignatureMismatchError as e:
                logger.debug(f"Comment length matched at {position:#x} but no EOCD follows: {e}")
            else:
                logger.debug(f"Found EOCD at offset {start:#x} with a {comment_length} byte comment")
                return eocd

        position -= 1

    raise EOCDNotFoundError(search_limit)
