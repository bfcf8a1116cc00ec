"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings, settings
from infrastructure.i18n import LangdetectDetector, TranslationDictionary, create_dictionary


def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Returns the module-level instance of infrastructure.configuration, the
    one logging setup and the renderer default to.

    Returns:
        Settings: Settings instance loaded from environment.
    """
    return settings


@lru_cache
def get_dictionary() -> TranslationDictionary:
    """
    Get application-scoped translation dictionary singleton.

    Loads the bundled default response strings plus the files of
    TRANSLATIONS_DIR, if configured.

    Returns:
        TranslationDictionary: Cached dictionary instance.

    Usage:
        dictionary = get_dictionary()
        dictionary.translate("de", "Request Not Matching (Default Title)")
    """
    return create_dictionary(get_settings().renderer.TRANSLATIONS_DIR)


@lru_cache
def get_language_detector() -> LangdetectDetector:
    """
    Get application-scoped language detector singleton.

    Returns:
        LangdetectDetector: Cached detector instance.
    """
    return LangdetectDetector()
