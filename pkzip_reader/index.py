from __future__ import annotations

import logging

from typing_extensions import List

from pkzip_reader.constants import DEFAULT_ENCODING
from pkzip_reader.cursor import BinaryCursor
from pkzip_reader.decoders import decode_central_directory_record
from pkzip_reader.exceptions import SignatureMismatchError, TruncatedCentralDirectoryError
from pkzip_reader.models import CentralDirectoryRecord, EOCDRecord

logger = logging.getLogger(__name__)


def read_central_directory(
    cursor: BinaryCursor, eocd: EOCDRecord, encoding: str = DEFAULT_ENCODING
) -> List[CentralDirectoryRecord]:
    """Read all the central directory records the EOCD declares, in on-disk order."""

    count = eocd.central_directory_count
    records = []

    cursor.position = eocd.central_directory_offset

    for index in range(count):
        offset = cursor.position

        try:
            records.append(decode_central_directory_record(cursor, encoding=encoding))
        except SignatureMismatchError as e:
            raise TruncatedCentralDirectoryError(index=index, count=count, offset=offset) from e

    logger.debug(f"Read {count} central directory record(s) at offset {eocd.central_directory_offset:#x}")

    return records
