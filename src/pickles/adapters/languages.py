"""Gherkin language registry.

Lists the keyword languages feature files may be written in and supplies
the default used when no language is configured.
"""

from __future__ import annotations

DEFAULT_LANGUAGE = "en"

# Gherkin i18n language codes
SUPPORTED_LANGUAGES: tuple[str, ...] = (
    "af", "am", "ar", "ast", "az", "bg", "bm", "bs", "ca", "cs", "cy-GB",
    "da", "de", "el", "em", "en", "en-Scouse", "en-au", "en-lol", "en-old",
    "en-pirate", "eo", "es", "et", "fa", "fi", "fr", "ga", "gj", "gl", "he",
    "hi", "hr", "ht", "hu", "id", "is", "it", "ja", "jv", "ka", "kn", "ko",
    "lt", "lu", "lv", "mk-Cyrl", "mk-Latn", "mn", "nl", "no", "pa", "pl",
    "pt", "ro", "ru", "sk", "sl", "sr-Cyrl", "sr-Latn", "sv", "ta", "th",
    "tl", "tlh", "tr", "tt", "uk", "ur", "uz", "vi", "zh-CN", "zh-TW",
)


class LanguageServicesRegistry:
    def __init__(self, default_language: str = DEFAULT_LANGUAGE):
        self._default_language = default_language

    def default_language(self) -> str:
        return self._default_language

    def supported_languages(self) -> tuple[str, ...]:
        return SUPPORTED_LANGUAGES

    def is_supported(self, code: str) -> bool:
        """Case-insensitive membership check against the Gherkin languages."""
        normalized = (code or "").strip().lower()
        return any(normalized == language.lower() for language in SUPPORTED_LANGUAGES)
