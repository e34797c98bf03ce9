"""Tests for the local filesystem adapter."""

from datetime import UTC, datetime
from pathlib import Path

import pytest

from iowalk.core.protocols import FilesystemPort
from iowalk.infrastructure.filesystem import LocalFilesystem, is_hidden


@pytest.fixture
def fs() -> LocalFilesystem:
    """Provide a local filesystem adapter."""
    return LocalFilesystem()


def test_satisfies_filesystem_port(fs: LocalFilesystem):
    """Test LocalFilesystem implements the lifecycle protocol."""
    assert isinstance(fs, FilesystemPort)


def test_create_dirs_reports_whether_created(tmp_path: Path, fs):
    """Test create_dirs creates parents and reports prior absence."""
    nested = tmp_path / "a" / "b" / "c"
    assert fs.create_dirs(nested) is True
    assert nested.is_dir()
    assert fs.create_dirs(nested) is False


def test_create_file_is_exclusive(tmp_path: Path, fs):
    """Test create_file makes an empty file and refuses to overwrite."""
    path = tmp_path / "hi0.txt"
    fs.create_file(path)
    assert path.stat().st_size == 0

    with pytest.raises(FileExistsError):
        fs.create_file(path)


def test_create_file_in_missing_directory_fails(tmp_path: Path, fs):
    """Test create_file requires the parent directory to exist."""
    with pytest.raises(FileNotFoundError):
        fs.create_file(tmp_path / "missing" / "hi0.txt")


def test_list_entries_yields_direct_children(tmp_path: Path, fs):
    """Test list_entries lists only the first level."""
    (tmp_path / "one.txt").touch()
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "deep.txt").touch()

    with fs.list_entries(tmp_path) as entries:
        names = sorted(path.name for path in entries)

    assert names == ["one.txt", "sub"]


def test_list_entries_missing_directory(tmp_path: Path, fs):
    """Test listing a missing directory raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError), fs.list_entries(tmp_path / "nope"):
        pass


def test_delete_file_and_empty_directory(tmp_path: Path, fs):
    """Test delete removes files and empty directories."""
    file = tmp_path / "f.txt"
    file.touch()
    directory = tmp_path / "d"
    directory.mkdir()

    fs.delete(file)
    fs.delete(directory)

    assert not file.exists()
    assert not directory.exists()


def test_delete_non_empty_directory_fails(tmp_path: Path, fs):
    """Test delete refuses a populated directory."""
    directory = tmp_path / "d"
    directory.mkdir()
    (directory / "f.txt").touch()

    with pytest.raises(OSError) as exc_info:
        fs.delete(directory)

    assert not isinstance(exc_info.value, FileNotFoundError)
    assert directory.exists()


def test_delete_missing_path_raises_not_found(tmp_path: Path, fs):
    """Test deleting an absent path raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        fs.delete(tmp_path / "absent")


def test_stat_metadata_of_file(tmp_path: Path, fs):
    """Test regular files report size, modification time and hidden flag."""
    file = tmp_path / "data.bin"
    file.write_bytes(b"12345")

    metadata = fs.stat_metadata(file)

    assert metadata.name == "data.bin"
    assert metadata.absolute_path == file.absolute()
    assert metadata.is_file is True
    assert metadata.is_dir is False
    assert metadata.size == 5
    assert metadata.hidden is False
    assert isinstance(metadata.last_modified, datetime)
    assert metadata.last_modified.tzinfo is UTC


def test_stat_metadata_of_directory_has_no_file_fields(tmp_path: Path, fs):
    """Test directories never carry file-only metadata."""
    metadata = fs.stat_metadata(tmp_path)

    assert metadata.is_dir is True
    assert metadata.is_file is False
    assert metadata.size is None
    assert metadata.last_modified is None
    assert metadata.hidden is None


def test_is_hidden_dot_prefix(tmp_path: Path):
    """Test dot-prefixed names count as hidden on POSIX."""
    assert is_hidden(tmp_path / ".profile")
    assert not is_hidden(tmp_path / "profile")
