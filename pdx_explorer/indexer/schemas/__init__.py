"""
Schema module: database schema definitions.

Each submodule defines the tables of one domain; this package exports the
building blocks and the merged registry lives in ``indexer.schema``.
"""

from .core_schema import CORE_TABLES
from .utils import Column, ForeignKey, TableSchema

__all__ = [
    "CORE_TABLES",
    "Column",
    "ForeignKey",
    "TableSchema",
]
