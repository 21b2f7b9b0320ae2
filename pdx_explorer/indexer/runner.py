"""Indexer workflow runner."""

import time
from pathlib import Path
from typing import Any

from pdx_explorer.config_runtime import load_runtime_config
from pdx_explorer.utils.logging import logger

from .database import DatabaseManager
from .exceptions import IndexIOError, RootNotADirectoryError
from .orchestrator import IndexerOrchestrator


def run_repository_index(
    root_path: str = ".",
    db_path: str | None = None,
    follow_symlinks: bool | None = None,
    replace_tier: bool | None = None,
    batch_size: int | None = None,
) -> dict[str, Any]:
    """Run the complete indexing workflow for one game/mod directory.

    Options left as None are taken from the runtime configuration of
    ``root_path``. A relative ``db_path`` is resolved against the current
    working directory; ``":memory:"`` is passed through.

    Raises:
        IndexerError: the run failed and the database was left untouched
    """
    start_time = time.time()
    root = Path(root_path)

    if not root.is_dir():
        raise RootNotADirectoryError(root)

    config = load_runtime_config(str(root))
    if db_path is None:
        db_path = config["paths"]["db"]
    if follow_symlinks is None:
        follow_symlinks = config["indexing"]["follow_symlinks"]
    if replace_tier is None:
        replace_tier = config["indexing"]["replace_tier"]
    if batch_size is None:
        batch_size = config["limits"]["batch_size"]

    if db_path != ":memory:":
        db_file = Path(db_path)
        try:
            db_file.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IndexIOError(db_file.parent, e.strerror or str(e)) from e
        if not db_file.exists():
            logger.info(f"Created database: {db_path}")
        db_path = str(db_file)

    orchestrator = IndexerOrchestrator(
        root_path=root,
        db_path=db_path,
        batch_size=batch_size,
        follow_symlinks=follow_symlinks,
        replace_tier=replace_tier,
    )

    try:
        orchestrator.db_manager.create_schema()
        orchestrator.db_manager.validate_schema()
        extract_counts, tree = orchestrator.index()
        localization_map = orchestrator.db_manager.get_localization_map()
    finally:
        orchestrator.close()

    elapsed = time.time() - start_time

    return {
        "success": True,
        "db_path": db_path,
        "tree": tree,
        "localization": localization_map,
        "stats": tree.stats,
        "extract_counts": extract_counts,
        "elapsed": elapsed,
    }


def read_localization(db_path: str) -> DatabaseManager:
    """Open an existing index for reading. The caller closes it."""
    if db_path != ":memory:" and not Path(db_path).exists():
        raise FileNotFoundError(f"Index database not found: {db_path} (run 'pdx index' first)")
    return DatabaseManager(db_path)
