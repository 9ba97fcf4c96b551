from __future__ import annotations

from typing_extensions import Optional

from pkzip_reader.constants import (
    CD_HEADER_SIGNATURE,
    DEFAULT_ENCODING,
    EOCD_SIGNATURE,
    LOCAL_FILE_HEADER_SIGNATURE,
)
from pkzip_reader.cursor import BinaryCursor
from pkzip_reader.exceptions import SignatureMismatchError
from pkzip_reader.models import CentralDirectoryRecord, EOCDRecord, LocalFileHeader


def _expect_signature(cursor: BinaryCursor, expected: int, offset: Optional[int]) -> int:
    """Seek to `offset` (when given) and consume the record signature, returning the record's start."""

    if offset is not None:
        cursor.position = offset

    start = cursor.position
    signature = cursor.read_uint32()

    if signature != expected:
        raise SignatureMismatchError(expected=expected, actual=signature, offset=start)

    return start


def decode_local_file_header(
    cursor: BinaryCursor, offset: Optional[int] = None, encoding: str = DEFAULT_ENCODING
) -> LocalFileHeader:
    """Decode a Local File Header, leaving the cursor on the first payload byte."""

    start = _expect_signature(cursor, LOCAL_FILE_HEADER_SIGNATURE, offset)

    version_needed = cursor.read_uint16()
    flags = cursor.read_uint16()
    compression = cursor.read_uint16()
    modified_time = cursor.read_uint16()
    modified_date = cursor.read_uint16()
    crc32 = cursor.read_uint32()
    compressed_size = cursor.read_uint32()
    uncompressed_size = cursor.read_uint32()
    file_name_length = cursor.read_uint16()
    extra_field_length = cursor.read_uint16()
    file_name = cursor.read_text(file_name_length, encoding)
    extra_field = cursor.read_bytes(extra_field_length)

    return LocalFileHeader(
        version_needed=version_needed,
        flags=flags,
        compression=compression,
        modified_time=modified_time,
        modified_date=modified_date,
        crc32=crc32,
        compressed_size=compressed_size,
        uncompressed_size=uncompressed_size,
        file_name=file_name,
        extra_field=extra_field,
        offset=start,
        file_name_length=file_name_length,
    )


def decode_central_directory_record(
    cursor: BinaryCursor, offset: Optional[int] = None, encoding: str = DEFAULT_ENCODING
) -> CentralDirectoryRecord:
    """Decode one Central Directory record, leaving the cursor at the start of the next one."""

    _expect_signature(cursor, CD_HEADER_SIGNATURE, offset)

    version_made_by = cursor.read_uint16()
    version_needed = cursor.read_uint16()
    flags = cursor.read_uint16()
    compression = cursor.read_uint16()
    modified_time = cursor.read_uint16()
    modified_date = cursor.read_uint16()
    crc32 = cursor.read_uint32()
    compressed_size = cursor.read_uint32()
    uncompressed_size = cursor.read_uint32()
    file_name_length = cursor.read_uint16()
    extra_field_length = cursor.read_uint16()
    comment_length = cursor.read_uint16()
    disk_number_start = cursor.read_uint16()
    internal_attributes = cursor.read_uint16()
    external_attributes = cursor.read_uint32()
    file_offset = cursor.read_uint32()
    file_name = cursor.read_text(file_name_length, encoding)
    extra_field = cursor.read_bytes(extra_field_length)
    comment = cursor.read_text(comment_length, encoding)

    return CentralDirectoryRecord(
        version_made_by=version_made_by,
        version_needed=version_needed,
        flags=flags,
        compression=compression,
        modified_time=modified_time,
        modified_date=modified_date,
        crc32=crc32,
        compressed_size=compressed_size,
        uncompressed_size=uncompressed_size,
        disk_number_start=disk_number_start,
        internal_attributes=internal_attributes,
        external_attributes=external_attributes,
        file_offset=file_offset,
        file_name=file_name,
        extra_field=extra_field,
        comment=comment,
        file_name_length=file_name_length,
        comment_length=comment_length,
    )


def decode_eocd_record(
    cursor: BinaryCursor, offset: Optional[int] = None, encoding: str = DEFAULT_ENCODING
) -> EOCDRecord:
    """Decode the End of Central Directory record, comment included."""

    start = _expect_signature(cursor, EOCD_SIGNATURE, offset)

    disk_count = cursor.read_uint16()
    central_directory_disk = cursor.read_uint16()
    central_directory_disk_count = cursor.read_uint16()
    central_directory_count = cursor.read_uint16()
    central_directory_size = cursor.read_uint32()
    central_directory_offset = cursor.read_uint32()
    comment_length = cursor.read_uint16()
    comment = cursor.read_text(comment_length, encoding)

    return EOCDRecord(
        disk_count=disk_count,
        central_directory_disk=central_directory_disk,
        central_directory_disk_count=central_directory_disk_count,
        central_directory_count=central_directory_count,
        central_directory_size=central_directory_size,
        central_directory_offset=central_directory_offset,
        comment=comment,
        offset=start,
        comment_length=comment_length,
    )
