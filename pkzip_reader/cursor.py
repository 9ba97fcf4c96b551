from __future__ import annotations

import io
import struct

from typing_extensions import Protocol

from pkzip_reader.constants import DEFAULT_ENCODING
from pkzip_reader.exceptions import EndOfSourceError, TextDecodeError

UINT16 = struct.Struct("<H")
UINT32 = struct.Struct("<I")
INT32 = struct.Struct("<i")


class ByteSource(Protocol):
    """Anything seekable and readable in binary mode, like an open file or a `BytesIO`."""

    def seek(self, offset: int, whence: int = ...) -> int:
        ...

    def tell(self) -> int:
        ...

    def read(self, size: int = ...) -> bytes:
        ...


class BinaryCursor:
    """
    Sequential little-endian reader over a seekable byte source.

    The cursor borrows the source: it seeks and reads, but never closes it. All reads advance the
    position by their width and raise `EndOfSourceError` instead of returning short data.
    """

    def __init__(self, source: ByteSource):
        self.source = source
        self.length = self._get_length()

    def _get_length(self) -> int:
        current = self.source.tell()
        # Some sources, like mmap, return None from seek()
        self.source.seek(0, io.SEEK_END)
        length = self.source.tell()
        self.source.seek(current)
        return length

    @property
    def position(self) -> int:
        return self.source.tell()

    @position.setter
    def position(self, offset: int) -> None:
        if not 0 <= offset <= self.length:
            raise EndOfSourceError(offset=offset, size=0, length=self.length)

        self.source.seek(offset)

    def read_bytes(self, size: int) -> bytes:
        offset = self.position

        if size < 0 or offset + size > self.length:
            raise EndOfSourceError(offset=offset, size=size, length=self.length)

        data = self.source.read(size)

        # The source may have shrunk since its length was taken.
        if len(data) != size:
            raise EndOfSourceError(offset=offset, size=size, length=offset + len(data))

        return data

    def read_text(self, size: int, encoding: str = DEFAULT_ENCODING) -> str:
        offset = self.position
        data = self.read_bytes(size)

        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            raise TextDecodeError(offset=offset, size=size, encoding=encoding) from e

    def read_uint16(self) -> int:
        return UINT16.unpack(self.read_bytes(UINT16.size))[0]

    def read_uint32(self) -> int:
        return UINT32.unpack(self.read_bytes(UINT32.size))[0]

    def read_int32(self) -> int:
        return INT32.unpack(self.read_bytes(INT32.size))[0]
