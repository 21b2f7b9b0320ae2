"""Tests for the Explorer session facade."""

from pdx_explorer.explorer import Explorer, LocalizationLookup
from pdx_explorer.indexer.exceptions import (
    IndexIOError,
    MalformedKeyLineError,
    PersistenceError,
    RootNotADirectoryError,
)
from pdx_explorer.indexer.language import Language


class TestExplorer:
    def test_initial_state(self, db_path):
        explorer = Explorer(db_path=db_path)

        assert explorer.dir_tree is None
        assert explorer.error is None
        assert explorer.localization(Language.ENGLISH) == {}

    def test_set_directory(self, game_dir, db_path):
        explorer = Explorer(db_path=db_path)

        assert explorer.set_directory(game_dir) is True
        assert explorer.error is None
        assert explorer.dir_tree.root.id == 0
        assert explorer.localization(Language.ENGLISH) == {
            "canal_panama": "Panama Canal",
            "canal_suez": "Suez Canal (Override)",
        }
        assert explorer.localization(Language.GERMAN) == {}

    def test_failure_keeps_previous_state(self, game_dir, db_path, tmp_path):
        explorer = Explorer(db_path=db_path)
        explorer.set_directory(game_dir)
        tree = explorer.dir_tree

        assert explorer.set_directory(tmp_path / "missing") is False

        assert isinstance(explorer.error, RootNotADirectoryError)
        assert explorer.dir_tree is tree
        assert explorer.localization(Language.FRENCH) == {"building_farm": "Ferme"}

    def test_parse_error_reported_with_location(self, game_dir, db_path, write_loc):
        broken = write_loc(game_dir / "localization" / "b_broken.yml", 'l_english:\n\n nope\n')
        explorer = Explorer(db_path=db_path)

        assert explorer.set_directory(game_dir) is False

        assert isinstance(explorer.error, MalformedKeyLineError)
        assert str(explorer.error).startswith(f"{broken.resolve()}:3: ")
        assert explorer.dir_tree is None

    def test_success_clears_error(self, game_dir, db_path, tmp_path):
        explorer = Explorer(db_path=db_path)
        explorer.set_directory(tmp_path / "missing")
        assert explorer.error is not None

        explorer.set_directory(game_dir)

        assert explorer.error is None

    def test_unusable_database_location_is_recorded(self, game_dir, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        explorer = Explorer(db_path=str(blocker / "index.db"))

        assert explorer.set_directory(game_dir) is False

        assert isinstance(explorer.error, IndexIOError)
        assert explorer.dir_tree is None

    def test_corrupt_database_is_recorded(self, game_dir, tmp_path):
        db_file = tmp_path / "garbage.db"
        db_file.write_bytes(b"this is not a database\n" * 64)
        explorer = Explorer(db_path=str(db_file))

        assert explorer.set_directory(game_dir) is False

        assert isinstance(explorer.error, PersistenceError)

    def test_in_memory_database(self, game_dir):
        explorer = Explorer(db_path=":memory:")

        assert explorer.set_directory(game_dir) is True
        assert len(explorer.lookup) == 3


class TestLocalizationLookup:
    def test_iteration_sorted_by_language(self):
        lookup = LocalizationLookup({
            Language.GERMAN: {"k": "de"},
            Language.ENGLISH: {"k": "en"},
        })

        assert lookup.languages() == [Language.ENGLISH, Language.GERMAN]
        assert list(lookup) == [(Language.ENGLISH, "k", "en"), (Language.GERMAN, "k", "de")]

    def test_get_returns_copy(self):
        lookup = LocalizationLookup({Language.ENGLISH: {"k": "v"}})

        lookup.get(Language.ENGLISH)["k"] = "changed"

        assert lookup.get(Language.ENGLISH) == {"k": "v"}
