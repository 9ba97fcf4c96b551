__version__ = "0.1.0"

from pkzip_reader.cursor import BinaryCursor, ByteSource  # noqa: E402
from pkzip_reader.exceptions import (  # noqa: E402
    EndOfSourceError,
    EntryNotFoundError,
    EOCDNotFoundError,
    SignatureMismatchError,
    TextDecodeError,
    TruncatedCentralDirectoryError,
    ZipReaderException,
)
from pkzip_reader.models import CentralDirectoryRecord, EOCDRecord, LocalFileHeader  # noqa: E402
from pkzip_reader.reader import ZipReader  # noqa: E402

__all__ = [
    "BinaryCursor",
    "ByteSource",
    "CentralDirectoryRecord",
    "EOCDRecord",
    "EndOfSourceError",
    "EntryNotFoundError",
    "EOCDNotFoundError",
    "LocalFileHeader",
    "SignatureMismatchError",
    "TextDecodeError",
    "TruncatedCentralDirectoryError",
    "ZipReader",
    "ZipReaderException",
]
