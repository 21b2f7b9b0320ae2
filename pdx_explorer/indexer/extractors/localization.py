"""Localization file parser and extractor.

A localization file looks like this (UTF-8 with a leading byte order mark):

    l_english:
     canal_suez:0 "Suez Canal"
     canal_panama:0 "Panama Canal"  # comment

The first significant line names the language. Every following significant
line is ``<key>:<optional revision> "<value>"``. ``#`` starts a comment
that runs to the end of the line; blank and comment-only lines are ignored.
Every other deviation is an error that names the file and the line.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pdx_explorer.utils.logging import logger

from . import BaseExtractor
from ..config import COMMENT_DELIMITER, ENCODING_MARKER, KEY_SEPARATOR, VALUE_QUOTE
from ..content_type import ContentType
from ..exceptions import (
    IndexIOError,
    MalformedKeyLineError,
    MalformedLanguageSpecifierError,
    UnrecognizedLanguageSpecifierError,
)
from ..language import Language

# Optional revision number (and surrounding whitespace) after the key colon
_REVISION_PREFIX = re.compile(r"[0-9\s]*")


@dataclass(frozen=True)
class ParsedLocalization:
    """Result of parsing one file.

    ``language`` is None for files that contribute nothing (empty, no
    marker, or only blank/comment lines). ``entries`` keeps file order and
    duplicates.
    """

    language: Language | None = None
    entries: list[tuple[str, str]] = field(default_factory=list)


def parse_localization_file(path: Path | str) -> ParsedLocalization:
    """Read and parse a localization file.

    Raises:
        IndexIOError: the file cannot be read, or it carries the marker
            and the rest is not valid UTF-8
        LocalizationParseError: a significant line is malformed
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise IndexIOError(path, e.strerror or str(e)) from e

    return parse_localization_bytes(data, path)


def parse_localization_bytes(data: bytes, path: Path | str) -> ParsedLocalization:
    """Parse the raw bytes of a localization file; path is used for errors only.

    Only files that start with the UTF-8 byte order mark are decoded. A file
    without it contributes no keys and its bytes are never decoded, so a
    marker-less file that is not valid UTF-8 is skipped rather than failing.
    After the marker, invalid UTF-8 raises IndexIOError.
    """
    if not data.startswith(ENCODING_MARKER):
        # Covers empty files and files shorter than the marker
        if data:
            logger.debug(f"{path}: no encoding marker, contributing no keys")
        return ParsedLocalization()

    try:
        text = data[len(ENCODING_MARKER):].decode("utf-8")
    except UnicodeDecodeError as e:
        raise IndexIOError(path, f"stream did not contain valid UTF-8 ({e.reason})") from e

    lines = _significant_lines(text)

    first = next(lines, None)
    if first is None:
        return ParsedLocalization()

    language = _parse_language_line(path, *first)
    entries = [_parse_key_line(path, line_index, line) for line_index, line in lines]

    return ParsedLocalization(language=language, entries=entries)


def _significant_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (0-based line index, stripped content) for non-blank lines."""
    for line_index, raw_line in enumerate(text.split("\n")):
        line = raw_line.split(COMMENT_DELIMITER, 1)[0].strip()
        if line:
            yield line_index, line


def _parse_language_line(path: Path | str, line_index: int, line: str) -> Language:
    if not line.endswith(KEY_SEPARATOR):
        raise MalformedLanguageSpecifierError(path, line_index + 1, line)

    specifier = line[: -len(KEY_SEPARATOR)]
    language = Language.from_specifier(specifier)
    if language is None:
        raise UnrecognizedLanguageSpecifierError(path, line_index + 1, line, specifier)
    return language


def _parse_key_line(path: Path | str, line_index: int, line: str) -> tuple[str, str]:
    # The key is kept verbatim; only the revision field is skipped.
    key, separator, rest = line.partition(KEY_SEPARATOR)
    if not separator:
        raise MalformedKeyLineError(path, line_index + 1, line)

    rest = rest[_REVISION_PREFIX.match(rest).end():]

    if len(rest) < 2 or not (rest.startswith(VALUE_QUOTE) and rest.endswith(VALUE_QUOTE)):
        raise MalformedKeyLineError(path, line_index + 1, line)

    return key, rest[1:-1]


class LocalizationExtractor(BaseExtractor):
    """Extractor for files under the localization/ subtree."""

    def supported_content_types(self) -> list[ContentType]:
        return [ContentType.LOCALIZATION]

    def extract(self, file_info: dict[str, Any], content: bytes) -> dict[str, Any]:
        parsed = parse_localization_bytes(content, file_info["path"])

        logger.debug(
            f"Parsed {file_info['path']}: {len(parsed.entries)} keys"
            + (f" ({parsed.language.specifier})" if parsed.language else "")
        )

        return {
            "_language": parsed.language,
            "localization_keys": parsed.entries,
        }
