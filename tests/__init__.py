import struct

from pkzip_reader.constants import CD_HEADER_SIGNATURE, EOCD_SIGNATURE, LOCAL_FILE_HEADER_SIGNATURE

FIXED_CRC32 = 0x3A5B1C2D


def build_local_file_header(
    name: bytes,
    compressed_size: int,
    uncompressed_size: int = None,
    compression: int = 0,
    flags: int = 0,
    crc32: int = FIXED_CRC32,
    extra: bytes = b"",
) -> bytes:
    """Return a Local File Header followed by its name and extra field."""

    if uncompressed_size is None:
        uncompressed_size = compressed_size

    return (
        struct.pack("<I", LOCAL_FILE_HEADER_SIGNATURE)
        + struct.pack("<H", 20)                 # Version needed to extract
        + struct.pack("<H", flags)              # General purpose bit flag
        + struct.pack("<H", compression)        # Compression method
        + struct.pack("<H", 0x6000)             # File modification time (12:00:00)
        + struct.pack("<H", 0x5A21)             # File modification date (2025-01-01)
        + struct.pack("<I", crc32)              # CRC-32
        + struct.pack("<I", compressed_size)    # Compressed size
        + struct.pack("<I", uncompressed_size)  # Uncompressed size
        + struct.pack("<H", len(name))          # Filename length
        + struct.pack("<H", len(extra))         # Extra field length
        + name
        + extra
    )


def build_central_directory_record(
    name: bytes,
    offset: int,
    compressed_size: int,
    uncompressed_size: int = None,
    compression: int = 0,
    flags: int = 0,
    crc32: int = FIXED_CRC32,
    extra: bytes = b"",
    comment: bytes = b"",
) -> bytes:
    """Return a Central Directory record followed by its name, extra field and comment."""

    if uncompressed_size is None:
        uncompressed_size = compressed_size

    return (
        struct.pack("<I", CD_HEADER_SIGNATURE)
        + struct.pack("<H", 20)                 # Version made by
        + struct.pack("<H", 20)                 # Version needed to extract
        + struct.pack("<H", flags)              # General purpose bit flag
        + struct.pack("<H", compression)        # Compression method
        + struct.pack("<H", 0x6000)             # File modification time
        + struct.pack("<H", 0x5A21)             # File modification date
        + struct.pack("<I", crc32)              # CRC-32
        + struct.pack("<I", compressed_size)    # Compressed size
        + struct.pack("<I", uncompressed_size)  # Uncompressed size
        + struct.pack("<H", len(name))          # Filename length
        + struct.pack("<H", len(extra))         # Extra field length
        + struct.pack("<H", len(comment))       # File comment length
        + struct.pack("<H", 0)                  # Disk number start
        + struct.pack("<H", 0)                  # Internal file attributes
        + struct.pack("<I", 0)                  # External file attributes
        + struct.pack("<I", offset)             # Relative offset of local header
        + name
        + extra
        + comment
    )


def build_eocd_record(count: int, cd_size: int, cd_offset: int, comment: bytes = b"") -> bytes:
    """Return an End of Central Directory record followed by its comment."""

    return (
        struct.pack("<I", EOCD_SIGNATURE)
        + struct.pack("<H", 0)             # Number of this disk
        + struct.pack("<H", 0)             # Disk where central directory starts
        + struct.pack("<H", count)         # Central directory records on this disk
        + struct.pack("<H", count)         # Total central directory records
        + struct.pack("<I", cd_size)       # Size of central directory
        + struct.pack("<I", cd_offset)     # Offset of start of central directory
        + struct.pack("<H", len(comment))  # Comment length
        + comment
    )


def build_archive(entries, comment: bytes = b"") -> bytes:
    """
    Build a stored ZIP archive by hand from `(name, data)` pairs.

    Each pair may carry a third item, a dict of keyword arguments passed to both header builders
    (like `flags` or `compression`). `data` is written as is, whatever the compression says.
    """

    body = b""
    central_directory = b""

    for entry in entries:
        name, data = entry[0], entry[1]
        kwargs = entry[2] if len(entry) > 2 else {}
        offset = len(body)
        body += build_local_file_header(name, len(data), **kwargs) + data
        central_directory += build_central_directory_record(name, offset, len(data), **kwargs)

    return body + central_directory + build_eocd_record(len(entries), len(central_directory), len(body), comment)
