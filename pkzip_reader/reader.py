from __future__ import annotations

from typing_extensions import Generator, List, Optional, Self, Union

from pkzip_reader.constants import DEFAULT_ENCODING, EOCD_SEARCH_LIMIT
from pkzip_reader.cursor import BinaryCursor, ByteSource
from pkzip_reader.exceptions import EntryNotFoundError
from pkzip_reader.extractor import read_local_file_header, read_stored_bytes
from pkzip_reader.index import read_central_directory
from pkzip_reader.locator import find_eocd_record
from pkzip_reader.models import CentralDirectoryRecord, EOCDRecord, LocalFileHeader


class ZipReader:
    """
    Reads the metadata and stored payloads of a ZIP archive from a seekable byte source.

    The source is borrowed: opening and closing it stays with the caller, and leaving the
    `with` block of a reader does not close it. A reader keeps a single read position, so
    it must not be shared between threads.
    """

    def __init__(
        self,
        source: ByteSource,
        encoding: str = DEFAULT_ENCODING,
        search_limit: int = EOCD_SEARCH_LIMIT,
    ):
        self.cursor = BinaryCursor(source)
        self.encoding = encoding
        self.search_limit = search_limit
        self._eocd: Optional[EOCDRecord] = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info) -> None:
        pass

    def get_eocd_record(self) -> EOCDRecord:
        """Locates the End of Central Directory record, only scanning for it on the first call."""

        if self._eocd is None:
            self._eocd = find_eocd_record(self.cursor, search_limit=self.search_limit, encoding=self.encoding)

        return self._eocd

    def get_central_directory_records(self, eocd: Optional[EOCDRecord] = None) -> List[CentralDirectoryRecord]:
        """Reads every central directory record, using the archive's own EOCD unless one is given."""

        return read_central_directory(self.cursor, eocd or self.get_eocd_record(), encoding=self.encoding)

    def get_local_file_header(self, record: CentralDirectoryRecord) -> LocalFileHeader:
        return read_local_file_header(self.cursor, record, encoding=self.encoding)

    def get_stored_bytes(self, record: CentralDirectoryRecord) -> bytes:
        """Returns the entry's payload as stored, still compressed or encrypted when the record says so."""

        return read_stored_bytes(self.cursor, record, encoding=self.encoding)

    def iter_records(self) -> Generator[CentralDirectoryRecord, None, None]:
        yield from self.get_central_directory_records()

    def namelist(self) -> List[str]:
        return [record.file_name for record in self.iter_records()]

    def get_record(self, name: str, records: Optional[List[CentralDirectoryRecord]] = None) -> CentralDirectoryRecord:
        """
        Looks up a central directory record by file name.

        Without `records` the whole central directory is read again on every call; pass the list
        from `get_central_directory_records()` when looking up many names.
        """

        record = self._find_record(name, records)

        if record is None:
            raise EntryNotFoundError(name)

        return record

    def read_stored(
        self,
        name_or_record: Union[str, CentralDirectoryRecord],
        records: Optional[List[CentralDirectoryRecord]] = None,
    ) -> bytes:
        """Returns the stored payload of an entry given by name or by its central directory record."""

        if isinstance(name_or_record, CentralDirectoryRecord):
            return self.get_stored_bytes(name_or_record)

        return self.get_stored_bytes(self.get_record(name_or_record, records))

    def _find_record(
        self, name: str, records: Optional[List[CentralDirectoryRecord]] = None
    ) -> Union[CentralDirectoryRecord, None]:
        if records is None:
            records = self.get_central_directory_records()

        matches = [record for record in records if record.file_name == name]

        # Duplicate names are allowed, the last one written wins
        return matches[-1] if matches else None
