"""i18n system - translation dictionary and language resolution.

Provides the translation dictionary with placeholder substitution and
locale fallback, and the language resolution chain used by rendered
responses.

Main components:
- dictionary: TranslationDictionary store (has/add/update/translate)
- interpolation: patch() for positional $n placeholders
- loader: DictionaryLoader and YAMLDictionaryLoader
- detection: LanguageDetector protocol and langdetect adapter
- resolvers: LanguageResolver and Accept-Language based default provider
- slug: multilingual route path segments
"""

from infrastructure.i18n.detection import LangdetectDetector, LanguageDetector
from infrastructure.i18n.dictionary import TranslationDictionary
from infrastructure.i18n.exceptions import (
    DuplicateTranslationError,
    InvalidDefaultLanguageError,
    InvalidTranslationError,
    TranslationError,
)
from infrastructure.i18n.factory import create_dictionary
from infrastructure.i18n.interpolation import patch
from infrastructure.i18n.loader import DictionaryLoader, YAMLDictionaryLoader
from infrastructure.i18n.models import (
    MISSING_LOCALE,
    MISSING_TRANSLATION,
    DetectionResult,
    DictionaryEntry,
    is_language_code,
    is_valid_locale,
    normalize_language,
    normalize_locale,
)
from infrastructure.i18n.resolvers import (
    LanguageResolver,
    application_language,
    parse_accept_language,
    preferred_language_from_header,
)
from infrastructure.i18n.slug import slug, strip

__all__ = [
    "MISSING_LOCALE",
    "MISSING_TRANSLATION",
    "DetectionResult",
    "DictionaryEntry",
    "DictionaryLoader",
    "DuplicateTranslationError",
    "InvalidDefaultLanguageError",
    "InvalidTranslationError",
    "LangdetectDetector",
    "LanguageDetector",
    "LanguageResolver",
    "TranslationDictionary",
    "TranslationError",
    "YAMLDictionaryLoader",
    "application_language",
    "create_dictionary",
    "is_language_code",
    "is_valid_locale",
    "normalize_language",
    "normalize_locale",
    "parse_accept_language",
    "patch",
    "preferred_language_from_header",
    "slug",
    "strip",
]
