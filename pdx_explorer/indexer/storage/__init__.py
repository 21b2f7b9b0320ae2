"""Storage layer: Domain-specific handler modules."""

from typing import Any

from pdx_explorer.utils.logging import logger

from .localization_storage import LocalizationStorage


class DataStorer:
    """Main storage orchestrator - aggregates domain-specific handlers."""

    def __init__(self, db_manager, counts: dict[str, int]):
        """Initialize DataStorer with database manager and counts dict."""
        self.db_manager = db_manager
        self.counts = counts

        self.localization = LocalizationStorage(db_manager, counts)

        self.handlers = {
            **self.localization.handlers,
        }

    def store(self, file_id: int, extracted: dict[str, Any]) -> dict[str, int]:
        """Store extracted data via domain-specific handlers.

        Keys starting with ``_`` are metadata: they are not stored themselves
        but passed to every handler as keyword arguments (``_language`` ->
        ``language=``).

        Returns:
            Receipt of data type -> number of records handed to the database
        """
        metadata = {key[1:]: value for key, value in extracted.items() if key.startswith("_")}

        receipt = {}
        for data_type, data in extracted.items():
            if data_type.startswith("_"):
                continue

            handler = self.handlers.get(data_type)
            if handler is None:
                # Exposes extractor/handler mismatches immediately
                logger.warning(f"No handler for data type '{data_type}' - data dropped")
                continue

            handler(file_id, data, **metadata)
            receipt[data_type] = len(data) if isinstance(data, list) else int(bool(data))

        return receipt


__all__ = ["DataStorer"]
