"""Base database manager with core infrastructure."""

import sqlite3
from collections import defaultdict

from pdx_explorer.utils.logging import logger

from ..config import DEFAULT_BATCH_SIZE, MAX_BATCH_SIZE
from ..content_type import ContentType
from ..exceptions import PersistenceError
from ..language import Language
from ..schema import FLUSH_ORDER, TABLES, get_table_schema


def validate_table_name(table: str) -> str:
    """Validate table name against schema to prevent SQL injection."""
    if table not in TABLES:
        raise ValueError(f"Invalid table name: {table}. Must be one of the schema-defined tables.")
    return table


class BaseDatabaseManager:
    """Base database manager providing core infrastructure."""

    def __init__(self, db_path: str, batch_size: int = DEFAULT_BATCH_SIZE):
        """Open the database at db_path (``":memory:"`` is accepted)."""
        self.db_path = db_path

        try:
            self.conn = sqlite3.connect(db_path, timeout=60)
            self.conn.execute("PRAGMA journal_mode=WAL")
            self.conn.execute("PRAGMA synchronous=NORMAL")
            self.conn.execute("PRAGMA foreign_keys = ON")
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to open database {db_path}: {e}") from e

        if batch_size <= 0:
            self.batch_size = DEFAULT_BATCH_SIZE
        elif batch_size > MAX_BATCH_SIZE:
            self.batch_size = MAX_BATCH_SIZE
        else:
            self.batch_size = batch_size

        self.generic_batches: dict[str, list[tuple]] = defaultdict(list)

    def begin_transaction(self) -> None:
        """Start a new transaction."""
        try:
            self.conn.execute("BEGIN IMMEDIATE")
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to begin transaction: {e}") from e

    def commit(self) -> None:
        """Commit the current transaction."""
        try:
            self.conn.commit()
        except sqlite3.Error as e:
            self.conn.rollback()
            raise PersistenceError(f"Failed to commit database changes: {e}") from e

    def rollback(self) -> None:
        """Rollback the current transaction and drop pending batches."""
        self.generic_batches.clear()
        try:
            self.conn.rollback()
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to roll back: {e}") from e

    def close(self) -> None:
        """Close the database connection."""
        self.conn.close()

    def validate_schema(self) -> bool:
        """Validate database schema matches expected definitions."""
        from ..schema import validate_all_tables

        try:
            mismatches = validate_all_tables(self.conn.cursor())
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to read schema of {self.db_path}: {e}") from e

        if not mismatches:
            logger.debug("All table schemas validated successfully")
            return True

        for table_name, errors in mismatches.items():
            for error in errors:
                logger.warning(f"Schema mismatch in {table_name}: {error}")
        return False

    def create_schema(self) -> None:
        """Create all tables and indexes and seed the lookup tables."""
        cursor = self.conn.cursor()

        try:
            for table_schema in TABLES.values():
                cursor.execute(table_schema.create_table_sql())

                for create_index_sql in table_schema.create_indexes_sql():
                    cursor.execute(create_index_sql)

            cursor.executemany(
                "INSERT OR IGNORE INTO content_type (name) VALUES (?)",
                [(content_type.value,) for content_type in ContentType],
            )
            cursor.executemany(
                "INSERT OR IGNORE INTO language (name) VALUES (?)",
                [(language.value,) for language in Language],
            )
            self.conn.commit()
        except sqlite3.Error as e:
            self.conn.rollback()
            raise PersistenceError(f"Failed to create schema: {e}") from e

    def clear_tables(self) -> None:
        """Clear all indexed data; lookup tables are kept."""
        cursor = self.conn.cursor()

        try:
            # Children first so foreign keys never dangle
            for table_name, _ in reversed(FLUSH_ORDER):
                cursor.execute(f"DELETE FROM {validate_table_name(table_name)}")
        except sqlite3.Error as e:
            self.conn.rollback()
            raise PersistenceError(f"Failed to clear existing data: {e}") from e

    def _queue(self, table_name: str, row: tuple) -> None:
        """Append a row to a table batch, flushing the batch when it is full."""
        batch = self.generic_batches[table_name]
        batch.append(row)
        if len(batch) >= self.batch_size:
            mode = dict(FLUSH_ORDER)[table_name]
            self.flush_generic_batch(table_name, mode)

    def flush_generic_batch(self, table_name: str, insert_mode: str = "INSERT") -> None:
        """Flush a single table's batch using schema-driven SQL.

        Rows are applied in the order they were queued, so with UPSERT the
        last queued row for a key wins.
        """
        batch = self.generic_batches.get(table_name, [])
        if not batch:
            return

        schema = get_table_schema(table_name)

        if len(batch[0]) != len(schema.columns):
            raise PersistenceError(
                f"Column mismatch for table '{table_name}': "
                f"add_* method provides {len(batch[0])} values but schema has "
                f"{len(schema.columns)} columns."
            )

        query = schema.upsert_sql() if insert_mode == "UPSERT" else schema.insert_sql()

        try:
            self.conn.executemany(query, batch)
        except sqlite3.Error as e:
            logger.error(f"Flush of '{table_name}' failed ({len(batch)} rows): {e}")
            for i, row in enumerate(batch[:3]):
                logger.debug(f"  [{i}] {row}")
            raise PersistenceError(f"Batch insert into '{table_name}' failed: {e}") from e

        self.generic_batches[table_name] = []

    def flush_batch(self) -> None:
        """Execute all pending batch inserts in FLUSH_ORDER."""
        for table_name, insert_mode in FLUSH_ORDER:
            if self.generic_batches.get(table_name):
                self.flush_generic_batch(table_name, insert_mode)

    def fetch_all(self, query: str, params: tuple | list = ()) -> list[tuple]:
        """Run a read query; sqlite failures surface as PersistenceError."""
        try:
            return self.conn.execute(query, params).fetchall()
        except sqlite3.Error as e:
            raise PersistenceError(f"Query failed on {self.db_path}: {e}") from e

    def count_rows(self, table_name: str) -> int:
        """Return the number of rows in a schema table."""
        return self.fetch_all(f"SELECT COUNT(*) FROM {validate_table_name(table_name)}")[0][0]


__all__ = ["BaseDatabaseManager", "validate_table_name"]
