"""Factory functions for creating i18n components.

Provides convenience functions for initializing dictionaries with the
default response strings of the application.
"""

from pathlib import Path
from typing import Optional, Union

from infrastructure.i18n.dictionary import TranslationDictionary
from infrastructure.i18n.loader import YAMLDictionaryLoader
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parent / "locales"


def create_dictionary(
    translations_dir: Optional[Union[str, Path]] = None,
    include_defaults: bool = True,
) -> TranslationDictionary:
    """Create a TranslationDictionary loaded from YAML files.

    Args:
        translations_dir: Extra directory with YAML dictionary files, loaded
            after the bundled defaults.
        include_defaults: Whether to load the bundled default response strings.

    Returns:
        TranslationDictionary: Populated dictionary.

    Raises:
        ValueError: If translations_dir does not exist.
        DuplicateTranslationError: If a file redefines an existing translation.

    Usage:
        dictionary = create_dictionary()
        dictionary = create_dictionary(translations_dir=Path("/srv/locales"))
    """
    dictionary = TranslationDictionary()

    directories = []
    if include_defaults:
        directories.append(DEFAULT_TRANSLATIONS_DIR)
    if translations_dir is not None:
        directories.append(Path(translations_dir))

    for directory in directories:
        added = YAMLDictionaryLoader(directory, use_cache=False).load_into(dictionary)
        logger.info(
            "dictionary_loaded",
            translations_dir=str(directory),
            translation_count=added,
        )

    return dictionary
