"""Indexer orchestration logic."""

from pathlib import Path
from typing import Any

from pdx_explorer.utils.logging import logger

from .config import DEFAULT_BATCH_SIZE, REPLACE_SEGMENT
from .content_type import ContentType
from .core import DirTree
from .database import DatabaseManager
from .exceptions import IndexIOError
from .extractors import ExtractorRegistry
from .storage import DataStorer


class IndexerOrchestrator:
    """Orchestrates the indexing process, coordinating all components.

    A run is all-or-nothing: clearing the previous index, writing the tree
    and resolving localization keys happen in one transaction. Any failure
    rolls it back and the database keeps whatever it held before the run.
    """

    def __init__(
        self,
        root_path: Path,
        db_path: str,
        batch_size: int = DEFAULT_BATCH_SIZE,
        follow_symlinks: bool = True,
        replace_tier: bool = False,
    ):
        """Initialize the indexer orchestrator."""
        self.root_path = Path(root_path)
        self.follow_symlinks = follow_symlinks
        self.replace_tier = replace_tier

        self.db_manager = DatabaseManager(db_path, batch_size)
        self.extractor_registry = ExtractorRegistry(self.root_path)

        self.counts = {
            "directories": 0,
            "files": 0,
            "localization_files": 0,
            "localization_keys": 0,
            "resolved_keys": 0,
        }

        self.data_storer = DataStorer(self.db_manager, self.counts)

    def index(self) -> tuple[dict[str, int], DirTree]:
        """Build the tree and replace the stored index with it.

        Returns:
            (counts, tree) of the committed run

        Raises:
            IndexerError: the run failed; nothing was committed
        """
        tree = DirTree.build(self.root_path, follow_symlinks=self.follow_symlinks)

        self.db_manager.begin_transaction()
        try:
            self.db_manager.clear_tables()
            self._store_tree(tree)
            self._resolve_localization()
            self.db_manager.commit()
        except Exception:
            logger.debug("Indexing failed, rolling back")
            self.db_manager.rollback()
            raise

        self.counts["resolved_keys"] = self.db_manager.count_rows("localization_key")
        logger.info(
            f"[Indexer] {self.counts['files']} files, "
            f"{self.counts['localization_files']} localization files, "
            f"{self.counts['resolved_keys']} keys"
        )
        return self.counts, tree

    def close(self):
        self.db_manager.close()

    def _store_tree(self, tree: DirTree):
        """Write one row per node. Ids come from the tree unchanged."""
        for directory in tree.directories():
            self.db_manager.add_directory(
                directory.id,
                directory.full_path,
                directory.relative_path,
                directory.name,
                directory.content_type,
            )
            self.counts["directories"] += 1

        for file in tree.files():
            self.db_manager.add_file(
                file.id,
                file.full_path,
                file.relative_path,
                file.name,
                file.content_type,
            )
            self.counts["files"] += 1

        # Keys reference file ids, so file rows must exist first
        self.db_manager.flush_batch()

    def _resolve_localization(self):
        """Process localization files from lowest to highest precedence.

        Files are read by name descending, so the file whose name sorts
        first is processed last and its keys overwrite everyone else's.
        """
        extractor = self.extractor_registry.get_extractor(ContentType.LOCALIZATION)
        if extractor is None:
            return

        files = self.db_manager.get_files_by_content_type(ContentType.LOCALIZATION)
        if self.replace_tier:
            # Stable sort keeps name order within each tier
            files.sort(key=lambda row: _in_replace_folder(row[2]))

        for file_id, full_path, relative_path, file_name in files:
            file_info = {"id": file_id, "path": full_path, "name": file_name}

            try:
                content = Path(full_path).read_bytes()
            except OSError as e:
                raise IndexIOError(full_path, e.strerror or str(e)) from e

            extracted = extractor.extract(file_info, content)
            self._store_extracted_data(file_id, extracted)
            self.counts["localization_files"] += 1

        self.db_manager.flush_batch()

    def _store_extracted_data(self, file_id: int, extracted: dict[str, Any]):
        """Store extracted data in the database - DELEGATED TO DataStorer."""
        receipt = self.data_storer.store(file_id, extracted)
        logger.trace(f"file {file_id}: {receipt}")


def _in_replace_folder(relative_path: str) -> bool:
    parts = Path(relative_path.replace("\\", "/")).parts
    return REPLACE_SEGMENT in parts[:-1]
