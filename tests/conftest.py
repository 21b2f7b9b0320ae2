"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

BOM = b"\xef\xbb\xbf"


def _write(path: Path, text: str, marker: bool = True) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes((BOM if marker else b"") + text.encode("utf-8"))
    return path


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Keep .pdx/ artifacts (error log, default db) out of the repository."""
    monkeypatch.chdir(tmp_path)
    for var in (
        "PDX_EXPLORER_PATHS_DB",
        "PDX_EXPLORER_LIMITS_BATCH_SIZE",
        "PDX_EXPLORER_INDEXING_FOLLOW_SYMLINKS",
        "PDX_EXPLORER_INDEXING_REPLACE_TIER",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def write_loc():
    """Return a helper that writes a localization file (with marker by default)."""
    return _write


@pytest.fixture
def game_dir(tmp_path):
    """Minimal game directory.

    game/
      common/defines.txt
      localization/english/a_overrides_l_english.yml
      localization/english/z_base_l_english.yml
      localization/french/base_l_french.yml
      readme.txt
    """
    root = tmp_path / "game"
    (root / "common").mkdir(parents=True)
    (root / "common" / "defines.txt").write_text("NDefines = {}\n", encoding="utf-8")
    (root / "readme.txt").write_text("hello\n", encoding="utf-8")

    _write(
        root / "localization" / "english" / "z_base_l_english.yml",
        'l_english:\n'
        ' canal_suez:0 "Suez Canal"\n'
        ' canal_panama:0 "Panama Canal"\n',
    )
    _write(
        root / "localization" / "english" / "a_overrides_l_english.yml",
        '# overrides\n'
        'l_english:\n'
        ' canal_suez:1 "Suez Canal (Override)"\n',
    )
    _write(
        root / "localization" / "french" / "base_l_french.yml",
        'l_french:\n'
        ' building_farm:0 "Ferme"\n',
    )
    return root


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "index.db")
