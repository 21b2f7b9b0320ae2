"""Languages a localization file can declare."""

from enum import Enum


class Language(str, Enum):
    """Language table; each value is the specifier heading a localization file."""

    ENGLISH = "l_english"
    BRAZILIAN_PORTUGUESE = "l_braz_por"
    FRENCH = "l_french"
    GERMAN = "l_german"
    POLISH = "l_polish"
    RUSSIAN = "l_russian"
    SPANISH = "l_spanish"
    JAPANESE = "l_japanese"
    SIMPLIFIED_CHINESE = "l_simp_chinese"
    KOREAN = "l_korean"
    TURKISH = "l_turkish"

    @property
    def specifier(self) -> str:
        return self.value

    @classmethod
    def from_specifier(cls, specifier: str) -> "Language | None":
        """Exact-match lookup; unknown specifiers return None."""
        return _BY_SPECIFIER.get(specifier)


_BY_SPECIFIER: dict[str, Language] = {language.value: language for language in Language}
