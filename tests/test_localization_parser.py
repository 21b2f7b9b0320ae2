"""Tests for the localization file parser."""

import pytest

from pdx_explorer.indexer.exceptions import (
    IndexIOError,
    LocalizationParseError,
    MalformedKeyLineError,
    MalformedLanguageSpecifierError,
    UnrecognizedLanguageSpecifierError,
)
from pdx_explorer.indexer.extractors.localization import (
    LocalizationExtractor,
    parse_localization_bytes,
    parse_localization_file,
)
from pdx_explorer.indexer.language import Language

BOM = b"\xef\xbb\xbf"


def parse(text: str):
    return parse_localization_bytes(BOM + text.encode("utf-8"), "test_l_english.yml")


class TestParseSuccess:
    def test_basic_file(self):
        result = parse(
            'l_english:\n'
            ' canal_suez:0 "Suez Canal"\n'
            ' canal_panama:0 "Panama Canal"\n'
        )

        assert result.language is Language.ENGLISH
        assert result.entries == [
            ("canal_suez", "Suez Canal"),
            ("canal_panama", "Panama Canal"),
        ]

    def test_revision_is_optional(self):
        result = parse('l_english:\n a:"one"\n b: "two"\n c:12 "three"\n')
        assert result.entries == [("a", "one"), ("b", "two"), ("c", "three")]

    def test_value_keeps_inner_colons_and_quotes(self):
        result = parse('l_english:\n key:0 "Time: 12:00 "noon""\n')
        assert result.entries == [("key", 'Time: 12:00 "noon"')]

    def test_empty_value(self):
        result = parse('l_english:\n key:0 ""\n')
        assert result.entries == [("key", "")]

    def test_comments_and_blank_lines_ignored(self):
        result = parse(
            '# header comment\n'
            '\n'
            'l_english:  # trailing comment\n'
            '   \n'
            ' # indented comment\n'
            ' key:0 "value"  # note\n'
        )

        assert result.language is Language.ENGLISH
        assert result.entries == [("key", "value")]

    def test_crlf_line_endings(self):
        result = parse('l_english:\r\n key:0 "value"\r\n')
        assert result.entries == [("key", "value")]

    def test_duplicates_kept_in_file_order(self):
        result = parse('l_english:\n key:0 "first"\n key:0 "second"\n')
        assert result.entries == [("key", "first"), ("key", "second")]

    def test_other_languages(self):
        result = parse('l_simp_chinese:\n key:0 "运河"\n')
        assert result.language is Language.SIMPLIFIED_CHINESE
        assert result.entries == [("key", "运河")]

    def test_deterministic(self):
        text = 'l_english:\n a:0 "1"\n b:0 "2"\n'
        assert parse(text) == parse(text)


class TestEmptyInputs:
    def test_marker_only_file(self):
        result = parse_localization_bytes(BOM, "empty.yml")
        assert result.language is None
        assert result.entries == []

    def test_completely_empty_file(self):
        result = parse_localization_bytes(b"", "empty.yml")
        assert result.language is None
        assert result.entries == []

    def test_only_comments(self):
        result = parse("# nothing here\n\n")
        assert result.language is None
        assert result.entries == []

    def test_missing_marker_contributes_nothing(self):
        result = parse_localization_bytes(b'l_english:\n key:0 "value"\n', "no_bom.yml")
        assert result.language is None
        assert result.entries == []


class TestParseFailures:
    def test_language_line_without_colon(self):
        with pytest.raises(MalformedLanguageSpecifierError) as exc_info:
            parse('\nl_english\n key:0 "v"\n')

        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "l_english"

    def test_language_line_with_trailing_content(self):
        with pytest.raises(MalformedLanguageSpecifierError):
            parse('l_english: extra\n')

    def test_unknown_language(self):
        with pytest.raises(UnrecognizedLanguageSpecifierError) as exc_info:
            parse('l_klingon:\n key:0 "v"\n')

        assert exc_info.value.specifier == "l_klingon"
        assert exc_info.value.line_number == 1

    def test_specifier_is_case_sensitive(self):
        with pytest.raises(UnrecognizedLanguageSpecifierError):
            parse('L_ENGLISH:\n')

    def test_key_line_without_colon(self):
        with pytest.raises(MalformedKeyLineError) as exc_info:
            parse('l_english:\n good:0 "ok"\n broken "v"\n')

        assert exc_info.value.line_number == 3

    def test_unquoted_value(self):
        with pytest.raises(MalformedKeyLineError):
            parse('l_english:\n key:0 value\n')

    def test_missing_closing_quote(self):
        with pytest.raises(MalformedKeyLineError):
            parse('l_english:\n key:0 "value\n')

    def test_lone_quote(self):
        with pytest.raises(MalformedKeyLineError):
            parse('l_english:\n key:0 "\n')

    def test_error_message_names_file_and_line(self):
        with pytest.raises(LocalizationParseError) as exc_info:
            parse('l_english:\n\n bad line\n')

        assert str(exc_info.value).startswith("test_l_english.yml:3: ")

    def test_invalid_utf8(self):
        with pytest.raises(IndexIOError):
            parse_localization_bytes(BOM + b"l_english:\n key:0 \"\xff\"\n", "bad.yml")


class TestParseFile:
    def test_two_line_english_file(self, tmp_path):
        path = tmp_path / "canals_l_english.yml"
        path.write_bytes(BOM + b'l_english:\n canal_suez:0 "Suez Canal"\n')

        result = parse_localization_file(path)

        assert (result.language, result.entries) == (
            Language.ENGLISH, [("canal_suez", "Suez Canal")]
        )

    def test_missing_marker_skips_undecodable_bytes(self, tmp_path):
        path = tmp_path / "binary.yml"
        path.write_bytes(b"\xff\xfe l_english:\n")

        result = parse_localization_file(path)

        assert result.language is None
        assert result.entries == []

    def test_reads_from_disk(self, tmp_path, write_loc):
        path = write_loc(tmp_path / "x_l_french.yml", 'l_french:\n k:0 "v"\n')

        result = parse_localization_file(path)

        assert result.language is Language.FRENCH
        assert result.entries == [("k", "v")]

    def test_missing_file(self, tmp_path):
        with pytest.raises(IndexIOError):
            parse_localization_file(tmp_path / "missing.yml")


class TestLocalizationExtractor:
    def test_extract_shape(self, tmp_path):
        extractor = LocalizationExtractor(tmp_path)
        content = BOM + b'l_english:\n k:0 "v"\n'

        extracted = extractor.extract({"id": 0, "path": "a.yml", "name": "a.yml"}, content)

        assert extracted == {"_language": Language.ENGLISH, "localization_keys": [("k", "v")]}
