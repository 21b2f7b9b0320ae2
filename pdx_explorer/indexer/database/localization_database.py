"""Localization database operations.

Keys are unique across the whole table: adding a key that already exists
overwrites its value, source file and language (upsert), it never fails.
"""

from ..language import Language
from ..schema import select_sql


class LocalizationDatabaseMixin:
    """Mixin providing add/read methods for the localization_key table.

    CRITICAL: This mixin assumes self._queue and self.fetch_all exist (from BaseDatabaseManager).
    """

    def add_localization_key(self, key: str, value: str, file_id: int, language: Language):
        """Queue an upsert of one key; later calls win over earlier ones."""
        self._queue("localization_key", (key, value, file_id, language.value))

    def get_localization_map(self) -> dict[Language, dict[str, str]]:
        """Return resolved keys grouped by language, keys sorted."""
        query = select_sql(
            "localization_key", ["language", "key", "value"], order_by="language, key"
        )

        localization_map: dict[Language, dict[str, str]] = {}
        for language, key, value in self.fetch_all(query):
            localization_map.setdefault(Language(language), {})[key] = value
        return localization_map

    def get_localization_entries(
        self,
        language: Language | None = None,
        key_contains: str | None = None,
        limit: int | None = None,
    ) -> list[tuple[str, str, str, str]]:
        """Return (key, value, language, source relative path) rows sorted by key."""
        conditions = []
        params: list[str] = []
        if language is not None:
            conditions.append("lk.language = ?")
            params.append(language.value)
        if key_contains:
            conditions.append("instr(lk.key, ?) > 0")
            params.append(key_contains)

        query = (
            "SELECT lk.key, lk.value, lk.language, f.relative_path "
            "FROM localization_key lk JOIN file f ON f.id = lk.file_id"
        )
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += " ORDER BY lk.key"
        if limit is not None:
            query += f" LIMIT {int(limit)}"

        return self.fetch_all(query, params)
