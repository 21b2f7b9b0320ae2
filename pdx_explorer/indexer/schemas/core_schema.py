"""
Core schema definitions.

Tables:
- content_type, language: lookup tables seeded from the enums
- directory, file: one row per tree node, keyed by the node id
- localization_key: resolved key table, one row per key

Directory and file ids come from independent id spaces, so the two tables
never reference each other.
"""

from .utils import Column, ForeignKey, TableSchema


# ============================================================================
# LOOKUP TABLES
# ============================================================================

CONTENT_TYPE = TableSchema(
    name="content_type",
    columns=[
        Column("name", "TEXT", nullable=False, primary_key=True),
    ],
)

LANGUAGE = TableSchema(
    name="language",
    columns=[
        Column("name", "TEXT", nullable=False, primary_key=True),
    ],
)

# ============================================================================
# TREE TABLES
# ============================================================================

DIRECTORY = TableSchema(
    name="directory",
    columns=[
        Column("id", "INTEGER", nullable=False, primary_key=True),
        Column("full_path", "TEXT", nullable=False),
        Column("relative_path", "TEXT", nullable=False),
        Column("dir_name", "TEXT", nullable=False),
        Column("content_type", "TEXT", nullable=False),
    ],
    foreign_keys=[
        ForeignKey(["content_type"], "content_type", ["name"]),
    ],
)

FILE = TableSchema(
    name="file",
    columns=[
        Column("id", "INTEGER", nullable=False, primary_key=True),
        Column("full_path", "TEXT", nullable=False),
        Column("relative_path", "TEXT", nullable=False),
        Column("file_name", "TEXT", nullable=False),
        Column("content_type", "TEXT", nullable=False),
    ],
    indexes=[
        # Precedence query: files of one content type by name descending
        ("idx_file_content_type_name", ["content_type", "file_name"]),
    ],
    foreign_keys=[
        ForeignKey(["content_type"], "content_type", ["name"]),
    ],
)

# ============================================================================
# LOCALIZATION TABLES
# ============================================================================

LOCALIZATION_KEY = TableSchema(
    name="localization_key",
    columns=[
        Column("key", "TEXT", nullable=False, primary_key=True),
        Column("value", "TEXT", nullable=False),
        Column("file_id", "INTEGER", nullable=False),
        Column("language", "TEXT", nullable=False),
    ],
    indexes=[
        ("idx_localization_key_language", ["language"]),
    ],
    foreign_keys=[
        ForeignKey(["file_id"], "file", ["id"]),
        ForeignKey(["language"], "language", ["name"]),
    ],
    upsert_key=["key"],
)


CORE_TABLES: dict[str, TableSchema] = {
    "content_type": CONTENT_TYPE,
    "language": LANGUAGE,
    "directory": DIRECTORY,
    "file": FILE,
    "localization_key": LOCALIZATION_KEY,
}
