"""Translation dictionary store.

Holds translation entries keyed by identifier and locale. Feature modules
register their own default strings, so registration never overwrites an
existing translation.
"""

import threading
from typing import Any, Dict, Iterator, Mapping, Optional

from infrastructure.i18n.exceptions import (
    DuplicateTranslationError,
    InvalidTranslationError,
)
from infrastructure.i18n.interpolation import patch
from infrastructure.i18n.models import (
    MISSING_LOCALE,
    MISSING_TRANSLATION,
    RESERVED_ENTRIES,
    DictionaryEntry,
    is_valid_locale,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationDictionary:
    """Append-only store of translations with locale fallback.

    Every instance is seeded with the reserved ``missing_translation`` and
    ``missing_locale`` entries. ``add`` and ``has`` share a lock so
    concurrent registrations of the same pair cannot both succeed.

    Attributes:
        entries: DictionaryEntry by identifier.
    """

    def __init__(self, entries: Optional[Mapping[str, Mapping[str, str]]] = None):
        """Initialize the dictionary.

        Args:
            entries: Optional initial ``{identifier: {locale: text}}`` mapping.

        Raises:
            DuplicateTranslationError: If entries redefine a reserved translation.
        """
        self.entries: Dict[str, DictionaryEntry] = {}
        self._lock = threading.RLock()
        self.update(RESERVED_ENTRIES)
        if entries:
            self.update(entries)

    def has(self, locale: str, identifier: str) -> bool:
        """Check if the dictionary contains a translation.

        Args:
            locale: Two-letter locale code.
            identifier: Translation identifier.

        Returns:
            True if identifier exists with a non-empty text for locale.
        """
        if not isinstance(identifier, str):
            return False
        with self._lock:
            entry = self.entries.get(identifier)
            return entry is not None and entry.get(locale) is not None

    def add(self, locale: str, identifier: str, text: str) -> None:
        """Register a single translation.

        Args:
            locale: Two-letter locale code.
            identifier: Translation identifier.
            text: Localized text, may contain ``$n`` placeholders.

        Raises:
            DuplicateTranslationError: If the pair is already registered.
            InvalidTranslationError: If locale, identifier or text is malformed.
        """
        if not is_valid_locale(locale):
            raise InvalidTranslationError(
                f"Translation locale must be a two-letter code: {locale!r}"
            )
        if not isinstance(identifier, str) or not identifier:
            raise InvalidTranslationError(
                f"Translation identifier must be a non-empty string: {identifier!r}"
            )
        if not isinstance(text, str) or not text:
            raise InvalidTranslationError(
                f"Translation '{identifier}' for locale '{locale}' must be a non-empty string"
            )

        locale = locale.lower()
        with self._lock:
            if self.has(locale, identifier):
                raise DuplicateTranslationError(locale, identifier)
            entry = self.entries.setdefault(identifier, DictionaryEntry(identifier))
            entry.translations[locale] = text

        logger.debug("translation_added", locale=locale, identifier=identifier)

    def update(
        self,
        entries: Mapping[str, Mapping[str, str]],
        ignore_duplicates: bool = False,
    ) -> int:
        """Register many translations at once.

        Args:
            entries: ``{identifier: {locale: text}}`` mapping.
            ignore_duplicates: Skip pairs that are already registered instead
                of failing. Meant for feature modules that may be imported twice.

        Returns:
            Number of translations added.

        Raises:
            DuplicateTranslationError: On an existing pair, unless ignored.
            InvalidTranslationError: On a malformed entry.
        """
        added = 0
        for identifier, translations in entries.items():
            if not isinstance(translations, Mapping):
                raise InvalidTranslationError(
                    f"Translations of '{identifier}' must be a mapping of locale to text"
                )
            for locale, text in translations.items():
                try:
                    self.add(locale, identifier, text)
                    added += 1
                except DuplicateTranslationError:
                    if not ignore_duplicates:
                        raise
                    logger.debug(
                        "duplicate_translation_skipped",
                        locale=locale,
                        identifier=identifier,
                    )
        return added

    def translate(self, locale: str, identifier: str, *substitutions: Any) -> str:
        """Translate an identifier to a locale.

        Unknown identifiers fall back to ``missing_translation``. A locale
        missing from the resolved entry falls back to the English
        ``missing_locale`` text, patched with the requested locale.

        Args:
            locale: Two-letter locale code.
            identifier: Translation identifier.
            *substitutions: Values for ``$n`` placeholders.

        Returns:
            The localized, patched text.
        """
        with self._lock:
            entry = None
            if isinstance(identifier, str):
                entry = self.entries.get(identifier)
            if entry is None:
                logger.debug("translation_not_found", identifier=identifier)
                entry = self.entries[MISSING_TRANSLATION]

            text = entry.get(locale)
            if text is None:
                logger.debug(
                    "translation_locale_not_found",
                    identifier=entry.identifier,
                    locale=locale,
                )
                text = patch(self.entries[MISSING_LOCALE].translations["en"], locale)

        return patch(text, *substitutions)

    def get_entry(self, identifier: str) -> Optional[DictionaryEntry]:
        """Return the entry of an identifier, or None."""
        return self.entries.get(identifier)

    def locales(self, identifier: str) -> list[str]:
        """Return the locales an identifier is translated to."""
        entry = self.entries.get(identifier)
        return entry.locales if entry else []

    def identifiers(self) -> list[str]:
        """Return all registered identifiers."""
        return list(self.entries.keys())

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.entries.keys()))
