"""Tests for WAD file location."""

from doomwad.config import WAD_DIR_ENV, get_wad_dir, resolve_wad_path


def test_wad_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(WAD_DIR_ENV, str(tmp_path))

    assert get_wad_dir() == tmp_path


def test_wad_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv(WAD_DIR_ENV, raising=False)
    monkeypatch.chdir(tmp_path)

    assert get_wad_dir() == tmp_path.resolve() / "wad"
    assert resolve_wad_path("doom1.wad") == tmp_path.resolve() / "wad" / "doom1.wad"


def test_existing_file_wins(monkeypatch, tmp_path):
    wad_file = tmp_path / "doom1.wad"
    wad_file.write_bytes(b"IWAD")
    monkeypatch.setenv(WAD_DIR_ENV, str(tmp_path / "elsewhere"))

    assert resolve_wad_path(wad_file) == wad_file
