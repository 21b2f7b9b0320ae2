"""Base class for domain-specific storage modules."""

from pdx_explorer.utils.logging import logger


class BaseStorage:
    """Base class for domain-specific storage handlers."""

    def __init__(self, db_manager, counts: dict[str, int]):
        self.db_manager = db_manager
        self.counts = counts

    def _debug(self, message: str):
        """Debug logging helper."""
        logger.debug(f"[STORAGE] {message}")
