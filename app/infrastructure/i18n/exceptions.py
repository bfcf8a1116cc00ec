"""Custom exceptions for the translation dictionary and language resolution."""

from infrastructure.exceptions import ConfigurationError


class TranslationError(Exception):
    """Base exception for all translation dictionary errors."""


class DuplicateTranslationError(TranslationError, ValueError):
    """Raised when a (locale, identifier) pair is registered twice.

    Example:
        >>> dictionary.add("en", "greeting", "Hello")
        >>> dictionary.add("en", "greeting", "Hi")
        Traceback (most recent call last):
        ...
        DuplicateTranslationError: Translation with identifier 'greeting' and locale 'en' already exists
    """

    def __init__(self, locale: str, identifier: str):
        self.locale = locale
        self.identifier = identifier
        super().__init__(
            f"Translation with identifier '{identifier}' and locale '{locale}' already exists"
        )


class InvalidTranslationError(TranslationError, ValueError):
    """Raised when a translation has a malformed locale, identifier or text."""


class InvalidDefaultLanguageError(ConfigurationError):
    """Raised when the default language provider yields an invalid code."""
