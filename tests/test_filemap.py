import mmap
import os

import pytest

from zipkit.filemap import FileMap, MapAdvice

_CONTENT = bytes(range(256)) * 64


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "blob.bin"
    path.write_bytes(_CONTENT)
    return path


def test_unaligned_region(data_file):
    offset = mmap.ALLOCATIONGRANULARITY + 5 if len(_CONTENT) > mmap.ALLOCATIONGRANULARITY + 105 else 5
    with open(data_file, "rb") as fp:
        with FileMap.create(str(data_file), fp.fileno(), offset, 100, True) as fmap:
            assert bytes(fmap.data()) == _CONTENT[offset:offset + 100]
            assert fmap.data_offset == offset
            assert fmap.data_length == 100
            assert fmap.file_name == str(data_file)


def test_write_through(data_file):
    with open(data_file, "r+b") as fp:
        fmap = FileMap.create(None, fp.fileno(), 10, 4, False)
        fmap.data()[:] = b"ABCD"
        fmap.close()
    assert data_file.read_bytes()[10:14] == b"ABCD"


def test_read_only_rejects_writes(data_file):
    with open(data_file, "rb") as fp:
        with FileMap.create(None, fp.fileno(), 0, 8, True) as fmap:
            with pytest.raises(TypeError):
                fmap.data()[0] = 1


def test_advise_keeps_data(data_file):
    with open(data_file, "rb") as fp:
        with FileMap.create(None, fp.fileno(), 0, 64, True) as fmap:
            fmap.advise(MapAdvice.SEQUENTIAL)
            assert bytes(fmap.data()) == _CONTENT[:64]


def test_region_past_end(data_file):
    with open(data_file, "rb") as fp:
        with pytest.raises(ValueError):
            FileMap.create(None, fp.fileno(), 0, len(_CONTENT) + 1, True)


def test_bad_arguments(data_file):
    fd = os.open(data_file, os.O_RDONLY)
    try:
        with pytest.raises(ValueError):
            FileMap.create(None, fd, -1, 4, True)
        with pytest.raises(ValueError):
            FileMap.create(None, fd, 0, 0, True)
    finally:
        os.close(fd)


def test_closed_map(data_file):
    with open(data_file, "rb") as fp:
        fmap = FileMap.create(None, fp.fileno(), 0, 4, True)
    fmap.close()
    assert fmap.closed
    with pytest.raises(ValueError):
        fmap.data()