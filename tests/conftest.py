import zipfile
from io import BytesIO

import pytest

from tests import build_archive


@pytest.fixture
def minimal_archive():
    """One stored entry named a.txt holding `hi`, no comments anywhere."""

    return build_archive([(b"a.txt", b"hi")])


@pytest.fixture
def zipfile_archive():
    """Archive written by the standard library, mixing stored, deflated and directory entries."""

    buffer = BytesIO()

    with zipfile.ZipFile(buffer, "w") as zip_file:
        zip_file.writestr("readme.txt", b"Hello, world!\n", compress_type=zipfile.ZIP_STORED)
        zip_file.writestr("data/", b"")
        zip_file.writestr("data/numbers.csv", b"1,2,3\n" * 200, compress_type=zipfile.ZIP_DEFLATED)
        zip_file.comment = b"written by zipfile"

    return buffer.getvalue()
