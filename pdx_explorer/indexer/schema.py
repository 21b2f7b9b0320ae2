"""Table registry - every table the indexer writes is declared here."""

import sqlite3

from .schemas.core_schema import CORE_TABLES
from .schemas.utils import TableSchema

TABLES: dict[str, TableSchema] = {
    **CORE_TABLES,
}

# Seeded once from the enums; clear_tables() leaves them alone
LOOKUP_TABLES: tuple[str, ...] = ("content_type", "language")

# (table, mode) in foreign key order; mode is "INSERT" or "UPSERT"
FLUSH_ORDER: list[tuple[str, str]] = [
    ("directory", "INSERT"),
    ("file", "INSERT"),
    ("localization_key", "UPSERT"),
]

assert {table for table, _ in FLUSH_ORDER} | set(LOOKUP_TABLES) == set(TABLES), (
    "Schema contract violation: every table must be a lookup table or appear in FLUSH_ORDER"
)


def get_table_schema(table_name: str) -> TableSchema:
    try:
        return TABLES[table_name]
    except KeyError:
        raise ValueError(
            f"Unknown table: {table_name}. Available tables: {', '.join(sorted(TABLES))}"
        ) from None


def select_sql(
    table_name: str,
    columns: list[str] | None = None,
    where: str | None = None,
    order_by: str | None = None,
) -> str:
    """SELECT over one table; column names are checked against its schema."""
    schema = get_table_schema(table_name)
    known = schema.column_names()

    if columns is None:
        columns = known
    unknown = [name for name in columns if name not in known]
    if unknown:
        raise ValueError(
            f"Unknown column(s) {', '.join(unknown)} in table '{table_name}'. "
            f"Valid columns: {', '.join(known)}"
        )

    sql = f"SELECT {', '.join(columns)} FROM {table_name}"
    if where:
        sql += f" WHERE {where}"
    if order_by:
        sql += f" ORDER BY {order_by}"
    return sql


def validate_all_tables(cursor: sqlite3.Cursor) -> dict[str, list[str]]:
    """Map each table whose live definition differs from TABLES to its differences."""
    results = {}
    for table_name, schema in TABLES.items():
        differences = schema.diff_against_db(cursor)
        if differences:
            results[table_name] = differences
    return results
