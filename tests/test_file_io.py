import pytest

from cutil.file_io import read_file, write_file


def test_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    data = bytes(range(256)) * 3
    write_file(path, data)
    assert read_file(path) == data


def test_write_truncates(tmp_path):
    path = tmp_path / "data.bin"
    write_file(path, b"a long first content")
    write_file(path, b"short")
    assert read_file(path) == b"short"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    write_file(path, b"")
    assert read_file(path) == b""


def test_accepts_string_path(tmp_path):
    path = str(tmp_path / "s.bin")
    write_file(path, b"xyz")
    assert read_file(path) == b"xyz"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.bin")


def test_write_into_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        write_file(tmp_path / "no" / "such" / "file.bin", b"x")