"""Translation models for the i18n system.

Defines locale validation, dictionary entries and the reserved fallback
entries every dictionary carries.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

LOCALE_PATTERN = re.compile(r"^[a-z]{2}$", re.IGNORECASE)

MISSING_TRANSLATION = "missing_translation"
MISSING_LOCALE = "missing_locale"

ISO_639_1_CODES = frozenset(
    """
    aa ab ae af ak am an ar as av ay az ba be bg bh bi bm bn bo br bs ca ce ch
    co cr cs cu cv cy da de dv dz ee el en eo es et eu fa ff fi fj fo fr fy ga
    gd gl gn gu gv ha he hi ho hr ht hu hy hz ia id ie ig ii ik io is it iu ja
    jv ka kg ki kj kk kl km kn ko kr ks ku kv kw ky la lb lg li ln lo lt lu lv
    mg mh mi mk ml mn mr ms mt my na nb nd ne ng nl nn no nr nv ny oc oj om or
    os pa pi pl ps pt qu rm rn ro ru rw sa sc sd se sg si sk sl sm sn so sq sr
    ss st su sv sw ta te tg th ti tk tl tn to tr ts tt tw ty ug uk ur uz ve vi
    vo wa wo xh yi yo za zh zu
    """.split()
)

# Reserved entries used as the global fallback of translate().
# missing_locale texts receive the requested locale code as $1.
RESERVED_ENTRIES: Dict[str, Dict[str, str]] = {
    MISSING_TRANSLATION: {
        "en": "Missing translation",
        "de": "Fehlende Übersetzung",
        "ru": "Отсутствует перевод",
    },
    MISSING_LOCALE: {
        "en": "Missing translation for locale '$1'",
        "de": "Fehlende Übersetzung für die Sprache '$1'",
        "ru": "Отсутствует перевод для языка '$1'",
    },
}


def is_valid_locale(value: Any) -> bool:
    """Check if a value is a two-letter language code (case-insensitive).

    Args:
        value: Candidate locale.

    Returns:
        True if value is a string of exactly two ASCII letters.
    """
    return isinstance(value, str) and LOCALE_PATTERN.fullmatch(value) is not None


def normalize_locale(value: Any) -> Optional[str]:
    """Return the lowercased locale code, or None if it is not valid."""
    if not is_valid_locale(value):
        return None
    return value.lower()


def is_language_code(value: Any) -> bool:
    """Check if a value is a registered ISO-639-1 code (case-insensitive)."""
    return is_valid_locale(value) and value.lower() in ISO_639_1_CODES


def normalize_language(value: Any) -> Optional[str]:
    """Return the lowercased language code, or None if it is not registered."""
    if not is_language_code(value):
        return None
    return value.lower()


@dataclass
class DictionaryEntry:
    """All translations of one identifier.

    Attributes:
        identifier: Stable key naming the message across locales.
        translations: Mapping from two-letter locale to text.
    """

    identifier: str
    translations: Dict[str, str] = field(default_factory=dict)

    def get(self, locale: str) -> Optional[str]:
        """Return the text for a locale, or None if it is not translated."""
        text = self.translations.get(locale)
        if isinstance(text, str) and text:
            return text
        return None

    @property
    def locales(self) -> list[str]:
        """Locales this entry is translated to, in registration order."""
        return list(self.translations.keys())


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of a language detection.

    Attributes:
        language: Detected ISO-639-1 code, or None when detection failed.
    """

    language: Optional[str] = None
