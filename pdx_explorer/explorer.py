"""Explorer session: the state a front end displays.

The Explorer owns the most recent successful index of one directory and
the last error, if any. Front ends read ``dir_tree`` for the tree view,
``localization()`` for the key table and ``error`` for the status bar.
"""

from collections.abc import Iterator
from pathlib import Path

from pdx_explorer.indexer import DirTree, run_repository_index
from pdx_explorer.indexer.exceptions import IndexerError
from pdx_explorer.indexer.language import Language
from pdx_explorer.utils.logging import logger


class LocalizationLookup:
    """Read-only language -> (key -> value) mapping of resolved keys."""

    def __init__(self, localization_map: dict[Language, dict[str, str]] | None = None):
        self._map = localization_map or {}

    def get(self, language: Language) -> dict[str, str]:
        """Keys of one language; empty when the language has none."""
        return dict(self._map.get(language, {}))

    def languages(self) -> list[Language]:
        return sorted(self._map, key=lambda language: language.value)

    def __len__(self) -> int:
        return sum(len(keys) for keys in self._map.values())

    def __iter__(self) -> Iterator[tuple[Language, str, str]]:
        for language in self.languages():
            for key, value in self._map[language].items():
                yield language, key, value


class Explorer:
    """Indexes a chosen directory and keeps the result for display."""

    def __init__(self, db_path: str | None = None, replace_tier: bool | None = None):
        self.db_path = db_path
        self.replace_tier = replace_tier

        self.root_path: Path | None = None
        self.dir_tree: DirTree | None = None
        self.lookup = LocalizationLookup()
        self.error: IndexerError | None = None

    def set_directory(self, path: Path | str) -> bool:
        """Index path and make it the current directory.

        On failure the previous tree and lookup are kept and the error is
        recorded in ``self.error``.

        Returns:
            True when the directory was indexed
        """
        try:
            result = run_repository_index(
                str(path), db_path=self.db_path, replace_tier=self.replace_tier
            )
        except IndexerError as e:
            logger.error(f"Failed to index {path}: {e}")
            self.error = e
            return False

        self.root_path = Path(path)
        self.dir_tree = result["tree"]
        self.lookup = LocalizationLookup(result["localization"])
        self.error = None
        return True

    def localization(self, language: Language) -> dict[str, str]:
        return self.lookup.get(language)
