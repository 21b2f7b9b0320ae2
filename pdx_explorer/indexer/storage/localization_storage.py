"""Storage handlers for extracted localization data."""

from ..language import Language
from .base import BaseStorage


class LocalizationStorage(BaseStorage):
    """Routes parsed key/value pairs to localization_key upserts."""

    def __init__(self, db_manager, counts: dict[str, int]):
        super().__init__(db_manager, counts)

        self.handlers = {
            "localization_keys": self._store_localization_keys,
        }

    def _store_localization_keys(
        self,
        file_id: int,
        entries: list[tuple[str, str]],
        language: Language | None = None,
    ):
        """Upsert every entry in file order so duplicates inside a file resolve to the last one."""
        if language is None:
            # Empty file: nothing to store
            return

        for key, value in entries:
            self.db_manager.add_localization_key(key, value, file_id, language)

        self.counts["localization_keys"] += len(entries)
        self._debug(f"file {file_id}: queued {len(entries)} keys")
