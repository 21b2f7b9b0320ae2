"""Content classification of indexed paths."""

from enum import Enum
from pathlib import PurePath, PurePosixPath

from .config import LOCALIZATION_SEGMENT


class ContentType(str, Enum):
    """Content tag of a tree node, stored by value in the database."""

    LOCALIZATION = "localization"
    INDETERMINATE = "indeterminate"


def classify(relative_path: str | PurePath) -> ContentType:
    """Return the content type of a path relative to the indexing root.

    A path is localization content iff its first component is exactly
    ``localization``. Backslashes are treated as separators so Windows
    paths classify the same way on every platform.
    """
    normalized = str(relative_path).replace("\\", "/")
    parts = PurePosixPath(normalized).parts

    if parts and parts[0] == LOCALIZATION_SEGMENT:
        return ContentType.LOCALIZATION
    return ContentType.INDETERMINATE
