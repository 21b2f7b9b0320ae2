"""Custom exceptions for the indexer module.

Every failure of an indexing run is one of these classes. None of them is
retried: the run aborts, the database transaction is rolled back and a
single error reaches the caller.
"""

from pathlib import Path


class IndexerError(Exception):
    """Base class for all indexing failures."""


class RootNotADirectoryError(IndexerError):
    """Raised when the indexing root does not resolve to a directory."""

    def __init__(self, root: Path | str):
        super().__init__(f"Root path `{root}` doesn't point to a directory")
        self.root = Path(root)


class IndexIOError(IndexerError):
    """Raised when reading the tree or a file fails.

    The underlying ``OSError`` (or ``UnicodeDecodeError``) is chained as
    ``__cause__``.
    """

    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)


class PathEncodingError(IndexerError):
    """Raised when a path cannot be represented as UTF-8 text."""

    def __init__(self, path: Path | str):
        super().__init__(f"Path `{path!r}` is not representable as UTF-8")
        self.path = path


class LocalizationParseError(IndexerError):
    """A localization file violates the line format.

    Attributes:
        path: File being parsed
        line_number: 1-based line of the offending line
        line: The offending line after comment stripping and trimming
    """

    def __init__(self, path: Path | str, line_number: int, line: str, description: str):
        super().__init__(f"{path}:{line_number}: {description}")
        self.path = Path(path)
        self.line_number = line_number
        self.line = line


class MalformedLanguageSpecifierError(LocalizationParseError):
    """First significant line does not end with a colon."""

    def __init__(self, path: Path | str, line_number: int, line: str):
        super().__init__(
            path, line_number, line,
            f"Failed to find the language specifier in line `{line}`",
        )


class UnrecognizedLanguageSpecifierError(LocalizationParseError):
    """Language specifier is not one of the known specifiers."""

    def __init__(self, path: Path | str, line_number: int, line: str, specifier: str):
        super().__init__(
            path, line_number, line,
            f"Unrecognized language specifier: `{specifier}`",
        )
        self.specifier = specifier


class MalformedKeyLineError(LocalizationParseError):
    """A key line has no colon or its value is not quoted."""

    def __init__(self, path: Path | str, line_number: int, line: str):
        super().__init__(
            path, line_number, line,
            f"Failed to parse localization key in line `{line}`",
        )


class PersistenceError(IndexerError):
    """Raised when the SQLite store rejects an operation.

    The ``sqlite3.Error`` is chained as ``__cause__``.
    """
