from __future__ import annotations

import logging

from pkzip_reader.constants import DEFAULT_ENCODING
from pkzip_reader.cursor import BinaryCursor
from pkzip_reader.decoders import decode_local_file_header
from pkzip_reader.models import CentralDirectoryRecord, LocalFileHeader

logger = logging.getLogger(__name__)


def read_local_file_header(
    cursor: BinaryCursor, record: CentralDirectoryRecord, encoding: str = DEFAULT_ENCODING
) -> LocalFileHeader:
    """Decode the Local File Header a central directory record points to."""

    return decode_local_file_header(cursor, offset=record.file_offset, encoding=encoding)


def read_stored_bytes(cursor: BinaryCursor, record: CentralDirectoryRecord, encoding: str = DEFAULT_ENCODING) -> bytes:
    """
    Return the payload of an entry exactly as it is stored in the archive.

    The size comes from the central directory record, the local header is only used to find where
    the payload starts. Nothing is decompressed or decrypted: callers have to check
    `record.compression` and `record.is_encrypted` before treating the result as file content.
    """

    local_header = read_local_file_header(cursor, record, encoding=encoding)

    logger.debug(
        f"Reading {record.compressed_size} stored byte(s) of {record.file_name} at offset {local_header.data_offset:#x}"
    )

    return cursor.read_bytes(record.compressed_size)
