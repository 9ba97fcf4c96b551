class ZipReaderException(Exception):
    """Base class for every error raised while reading an archive."""

    pass


class EndOfSourceError(ZipReaderException, EOFError):
    """Raised when a read or seek goes beyond the bounds of the byte source."""

    def __init__(self, offset: int, size: int, length: int):
        self.offset = offset
        self.size = size
        self.length = length
        super().__init__(f"Cannot access {size} byte(s) at offset {offset:#x}, source is {length} byte(s) long")


class SignatureMismatchError(ZipReaderException, ValueError):
    """Raised when the magic number at a position does not match the expected record signature."""

    def __init__(self, expected: int, actual: int, offset: int):
        self.expected = expected
        self.actual = actual
        self.offset = offset
        super().__init__(f"Expected signature {expected:#010x} at offset {offset:#x}, found {actual:#010x}")


class TextDecodeError(ZipReaderException, ValueError):
    """Raised when a name or comment can't be decoded with the configured encoding."""

    def __init__(self, offset: int, size: int, encoding: str):
        self.offset = offset
        self.size = size
        self.encoding = encoding
        super().__init__(f"Cannot decode {size} byte(s) of text at offset {offset:#x} as {encoding}")


class EOCDNotFoundError(ZipReaderException):
    """Indicates the End of Central Directory record could not be found, the archive is unreadable."""

    def __init__(self, search_limit: int):
        self.search_limit = search_limit
        super().__init__(f"EOCD not found in the last {search_limit} bytes of the source")


class TruncatedCentralDirectoryError(ZipReaderException):
    """Raised when the central directory holds fewer valid records than the EOCD declares."""

    def __init__(self, index: int, count: int, offset: int):
        self.index = index
        self.count = count
        self.offset = offset
        super().__init__(f"Record {index}/{count} is not valid at offset {offset:#x}")


class EntryNotFoundError(ZipReaderException, KeyError):
    """Raised when no central directory record carries the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"File {name} not found in ZIP archive")

    def __str__(self):
        return self.args[0]
