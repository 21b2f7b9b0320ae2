"""Schema building blocks.

A TableSchema is the single description of a table: the CREATE statements,
the batch INSERT/UPSERT statements and the live-database check are all
generated from it.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Column:
    name: str
    type: str
    nullable: bool = True
    primary_key: bool = False

    def to_sql(self) -> str:
        sql = f"{self.name} {self.type}"
        if not self.nullable:
            sql += " NOT NULL"
        if self.primary_key:
            sql += " PRIMARY KEY"
        return sql


@dataclass(frozen=True)
class ForeignKey:
    """``columns`` of the owning table reference ``ref_columns`` of ``table``."""

    columns: list[str]
    table: str
    ref_columns: list[str]

    def to_sql(self) -> str:
        return (
            f"FOREIGN KEY ({', '.join(self.columns)}) "
            f"REFERENCES {self.table}({', '.join(self.ref_columns)})"
        )

    def problems(self, owner: str, tables: dict[str, TableSchema]) -> list[str]:
        """Describe what is wrong with this key inside a table registry (empty if nothing)."""
        if self.table not in tables:
            return [f"{owner}: referenced table '{self.table}' is not defined"]

        found = []
        if len(self.columns) != len(self.ref_columns):
            found.append(
                f"{owner}: {len(self.columns)} columns reference {len(self.ref_columns)} in '{self.table}'"
            )
        found += [
            f"{owner}: no column '{name}'"
            for name in self.columns
            if name not in tables[owner].column_names()
        ]
        found += [
            f"{self.table}: no column '{name}' (referenced by {owner})"
            for name in self.ref_columns
            if name not in tables[self.table].column_names()
        ]
        return found


@dataclass
class TableSchema:
    name: str
    columns: list[Column]
    # (index name, indexed columns)
    indexes: list[tuple[str, list[str]]] = field(default_factory=list)
    foreign_keys: list[ForeignKey] = field(default_factory=list)
    # Conflict target of upsert_sql(); tables without one are insert-only
    upsert_key: list[str] | None = None

    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]

    def create_table_sql(self) -> str:
        body = [column.to_sql() for column in self.columns]
        body += [fk.to_sql() for fk in self.foreign_keys]
        return f"CREATE TABLE IF NOT EXISTS {self.name} (\n    " + ",\n    ".join(body) + "\n)"

    def create_indexes_sql(self) -> list[str]:
        return [
            f"CREATE INDEX IF NOT EXISTS {index_name} ON {self.name} ({', '.join(columns)})"
            for index_name, columns in self.indexes
        ]

    def insert_sql(self) -> str:
        names = self.column_names()
        return (
            f"INSERT INTO {self.name} ({', '.join(names)}) "
            f"VALUES ({', '.join('?' * len(names))})"
        )

    def upsert_sql(self) -> str:
        """INSERT that overwrites every non-key column when the key already exists."""
        if not self.upsert_key:
            raise ValueError(f"Table '{self.name}' has no upsert key")

        assignments = ", ".join(
            f"{name} = excluded.{name}"
            for name in self.column_names()
            if name not in self.upsert_key
        )
        return (
            f"{self.insert_sql()} "
            f"ON CONFLICT({', '.join(self.upsert_key)}) DO UPDATE SET {assignments}"
        )

    def diff_against_db(self, cursor: sqlite3.Cursor) -> list[str]:
        """Compare this definition with the live table; returns the differences found."""
        cursor.execute("PRAGMA table_info(" + self.name + ")")
        live = {row[1]: row[2].upper() for row in cursor.fetchall()}
        if not live:
            return [f"table {self.name} does not exist"]

        differences = []
        for column in self.columns:
            live_type = live.get(column.name)
            if live_type is None:
                differences.append(f"column {self.name}.{column.name} is missing")
            elif live_type != column.type.upper():
                differences.append(
                    f"column {self.name}.{column.name} is {live_type}, expected {column.type}"
                )

        cursor.execute(
            "SELECT name FROM sqlite_master WHERE type = 'index' AND tbl_name = ?", (self.name,)
        )
        live_indexes = {row[0] for row in cursor.fetchall()}
        differences += [
            f"index {index_name} is missing"
            for index_name, _ in self.indexes
            if index_name not in live_indexes
        ]
        return differences
