import pytest

from silkengine.files import create_folder, read_file, write_file


def test_create_folder_then_exists(tmp_path):
    assert create_folder("SaveGame", tmp_path) is True
    assert (tmp_path / "SaveGame").is_dir()
    assert create_folder("SaveGame", tmp_path) is False


def test_create_nested_needs_parent(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_folder("missing/child", tmp_path)
    create_folder("SaveGame", tmp_path)
    assert create_folder("SaveGame/ScreenShot", tmp_path) is True


def test_create_folder_default_base_is_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert create_folder("here") is True
    assert (tmp_path / "here").is_dir()


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "save.txt"
    text = "line one\nline two\n"
    write_file(target, text)
    assert read_file(target) == text


def test_write_overwrites(tmp_path):
    target = tmp_path / "save.txt"
    write_file(target, "first")
    write_file(target, "second")
    assert read_file(target) == "second"


def test_read_missing_raises(tmp_path):
    with pytest.raises(OSError):
        read_file(tmp_path / "absent.txt")


def test_write_into_missing_folder_raises(tmp_path):
    with pytest.raises(OSError):
        write_file(tmp_path / "nowhere" / "file.txt", "x")