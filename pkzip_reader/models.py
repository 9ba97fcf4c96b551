from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from typing_extensions import Optional

from pkzip_reader.constants import (
    CD_HEADER_SIZE,
    COMPRESSION_STORED,
    DEFAULT_ENCODING,
    EOCD_RECORD_SIZE,
    FLAG_DATA_DESCRIPTOR,
    FLAG_ENCRYPTED,
    LOCAL_FILE_HEADER_SIZE,
)


def dos_datetime(date: int, time: int) -> Optional[datetime]:
    """Convert a packed MS-DOS date/time pair to a naive datetime, None when the fields are out of range."""

    try:
        return datetime(
            year=1980 + (date >> 9),
            month=(date >> 5) & 0x0F,
            day=date & 0x1F,
            hour=time >> 11,
            minute=(time >> 5) & 0x3F,
            second=(time & 0x1F) * 2,
        )
    except ValueError:
        return None


def encoded_length(text: str) -> int:
    """Length of `text` once written to an archive, for records that were not decoded from one."""

    return len(text.encode(DEFAULT_ENCODING, errors="replace"))


@dataclass
class LocalFileHeader:
    """
    Header written immediately before an entry's payload.

    Only used to locate the payload: its sizes may be zero when a data descriptor follows the
    data, so the central directory record stays the authority for them.
    """

    version_needed: int
    flags: int
    compression: int
    modified_time: int
    modified_date: int
    crc32: int
    compressed_size: int
    uncompressed_size: int
    file_name: str
    extra_field: bytes = field(repr=False)
    offset: int = 0
    file_name_length: Optional[int] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self.file_name_length is None:
            self.file_name_length = encoded_length(self.file_name)

    @property
    def total_size(self) -> int:
        return LOCAL_FILE_HEADER_SIZE + self.file_name_length + len(self.extra_field)

    @property
    def data_offset(self) -> int:
        """Offset of the first payload byte following this header."""

        return self.offset + self.total_size

    @property
    def is_encrypted(self) -> bool:
        return bool(self.flags & FLAG_ENCRYPTED)

    @property
    def has_data_descriptor(self) -> bool:
        return bool(self.flags & FLAG_DATA_DESCRIPTOR)

    @property
    def is_stored(self) -> bool:
        return self.compression == COMPRESSION_STORED


@dataclass
class CentralDirectoryRecord:
    """Authoritative metadata for one archive entry, as listed in the central directory."""

    version_made_by: int
    version_needed: int
    flags: int
    compression: int
    modified_time: int
    modified_date: int
    crc32: int
    compressed_size: int
    uncompressed_size: int
    disk_number_start: int
    internal_attributes: int
    external_attributes: int
    file_offset: int
    file_name: str
    extra_field: bytes = field(repr=False)
    comment: str = ""
    file_name_length: Optional[int] = field(default=None, repr=False, compare=False)
    comment_length: Optional[int] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self.file_name_length is None:
            self.file_name_length = encoded_length(self.file_name)
        if self.comment_length is None:
            self.comment_length = encoded_length(self.comment)

    @property
    def total_size(self) -> int:
        return CD_HEADER_SIZE + self.file_name_length + len(self.extra_field) + self.comment_length

    @property
    def is_encrypted(self) -> bool:
        return bool(self.flags & FLAG_ENCRYPTED)

    @property
    def has_data_descriptor(self) -> bool:
        return bool(self.flags & FLAG_DATA_DESCRIPTOR)

    @property
    def is_stored(self) -> bool:
        return self.compression == COMPRESSION_STORED

    @property
    def is_directory(self) -> bool:
        return self.file_name.endswith("/")

    @property
    def modified(self) -> Optional[datetime]:
        return dos_datetime(self.modified_date, self.modified_time)


@dataclass
class EOCDRecord:
    """
    Archive level summary found at the end of the archive.

    Attributes:
        disk_count (int): Number of this disk.
        central_directory_disk (int): Disk where the central directory starts.
        central_directory_disk_count (int): Central directory records on this disk.
        central_directory_count (int): Central directory records in total.
        central_directory_size (int): Size of the central directory in bytes.
        central_directory_offset (int): Offset of the first central directory record.
        comment (str): Archive comment.
        offset (int): Offset of the EOCD signature within the source.
    """

    disk_count: int
    central_directory_disk: int
    central_directory_disk_count: int
    central_directory_count: int
    central_directory_size: int
    central_directory_offset: int
    comment: str = ""
    offset: int = 0
    comment_length: Optional[int] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self.comment_length is None:
            self.comment_length = encoded_length(self.comment)

    @property
    def total_size(self) -> int:
        return EOCD_RECORD_SIZE + self.comment_length
