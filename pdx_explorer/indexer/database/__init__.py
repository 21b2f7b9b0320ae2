"""Database operations for the indexer.

This module contains the DatabaseManager class which handles all database
operations including schema creation, batch inserts, upserts and
transaction management.

ARCHITECTURE: Schema-Driven Database Layer
- schema.py is the Single Source of Truth for all table definitions
- SQL for inserts and upserts is generated from the TableSchema objects
- The database is rebuilt from scratch on every indexing run

REFACTORED ARCHITECTURE:
- BaseDatabaseManager: Core infrastructure (transactions, schema, batching)
- CoreDatabaseMixin: directory and file tables
- LocalizationDatabaseMixin: resolved localization keys

DatabaseManager uses multiple inheritance to combine all capabilities.
"""

from .base_database import BaseDatabaseManager
from .core_database import CoreDatabaseMixin
from .localization_database import LocalizationDatabaseMixin


class DatabaseManager(
    BaseDatabaseManager,
    CoreDatabaseMixin,
    LocalizationDatabaseMixin,
):
    """Complete database manager combining all table capabilities."""


__all__ = ["DatabaseManager"]
