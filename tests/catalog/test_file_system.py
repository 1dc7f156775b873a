import os
import stat
from unittest.mock import patch

import pytest

from catalog.file_system import LocalFileSystem


@pytest.fixture
def fs():
    return LocalFileSystem()


def test_write_read_exists(fs, tmp_path):
    path = fs.combine(str(tmp_path), "catalog.yml")
    assert not fs.exists(path)

    fs.write_text(path, "id: x\n")

    assert fs.exists(path)
    assert fs.read_text(path) == "id: x\n"


def test_exists_is_false_for_directory(fs, tmp_path):
    assert not fs.exists(str(tmp_path))


def test_combine_and_directory_name(fs, tmp_path):
    path = fs.combine(str(tmp_path), ".githubtocatalog", "auto-generated-catalog.yml")
    assert fs.directory_name(path) == os.path.join(str(tmp_path), ".githubtocatalog")


def test_write_replaces_read_only_file(fs, tmp_path):
    path = tmp_path / "catalog.yml"
    path.write_text("id: old\n")
    path.chmod(stat.S_IREAD)

    fs.write_text(str(path), "id: new\n")

    assert path.read_text() == "id: new\n"
    assert os.stat(path).st_mode & stat.S_IWRITE
    assert os.listdir(tmp_path) == ["catalog.yml"]


def test_failed_write_keeps_previous_file(fs, tmp_path):
    path = tmp_path / "catalog.yml"
    path.write_text("id: old\n")

    with patch("catalog.file_system.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(OSError):
            fs.write_text(str(path), "id: new\n")

    assert path.read_text() == "id: old\n"
    assert os.listdir(tmp_path) == ["catalog.yml"]


def test_create_directory_and_allow_writes(fs, tmp_path):
    directory = tmp_path / "a" / "b"
    fs.create_directory(str(directory))
    existing = directory / "auto-generated-catalog.yml"
    existing.write_text("old")
    existing.chmod(stat.S_IREAD)

    assert fs.allow_writes_on_directory(str(directory)) is True
    assert os.stat(existing).st_mode & stat.S_IWRITE


def test_allow_writes_on_missing_directory(fs, tmp_path):
    assert fs.allow_writes_on_directory(str(tmp_path / "missing")) is False
