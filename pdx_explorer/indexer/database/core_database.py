"""Core database operations for the directory tree tables.

This module contains add_* methods and reads for the directory and file
tables defined in schemas/core_schema.py.
"""

from ..content_type import ContentType
from ..schema import select_sql


class CoreDatabaseMixin:
    """Mixin providing add_* methods for the tree tables.

    CRITICAL: This mixin assumes self._queue and self.fetch_all exist (from BaseDatabaseManager).
    DO NOT instantiate directly - only use as mixin for DatabaseManager.
    """

    def add_directory(self, dir_id: int, full_path: str, relative_path: str,
                      dir_name: str, content_type: ContentType):
        """Add a directory row to the batch."""
        self._queue("directory", (dir_id, full_path, relative_path, dir_name, content_type.value))

    def add_file(self, file_id: int, full_path: str, relative_path: str,
                 file_name: str, content_type: ContentType):
        """Add a file row to the batch."""
        self._queue("file", (file_id, full_path, relative_path, file_name, content_type.value))

    def get_files_by_content_type(self, content_type: ContentType) -> list[tuple[int, str, str, str]]:
        """Return (id, full_path, relative_path, file_name) of files with a content type.

        Ordered by file name descending; files sharing a name are ordered by
        relative path descending so the order is total.
        """
        query = select_sql(
            "file",
            ["id", "full_path", "relative_path", "file_name"],
            where="content_type = ?",
            order_by="file_name DESC, relative_path DESC",
        )
        return self.fetch_all(query, (content_type.value,))
