"""pdx-explorer indexer package.

Builds the directory tree of a game/mod folder, parses the localization
files under ``localization/`` and resolves overriding keys into a single
SQLite table.

ARCHITECTURAL CONTRACT
======================
- core.DirTree walks the filesystem and assigns node ids; nothing else does.
- Extractors receive raw bytes and return data WITHOUT database access.
- storage.DataStorer routes extracted data to DatabaseManager add_* methods.
- IndexerOrchestrator owns the transaction: a run either commits fully or
  leaves the previous index untouched.
"""

from .core import DirectoryNode, DirTree, FileNode, Node
from .database import DatabaseManager
from .extractors import ExtractorRegistry
from .orchestrator import IndexerOrchestrator
from .runner import read_localization, run_repository_index

__all__ = [
    "DirTree",
    "DirectoryNode",
    "FileNode",
    "Node",
    "DatabaseManager",
    "ExtractorRegistry",
    "IndexerOrchestrator",
    "run_repository_index",
    "read_localization",
]
