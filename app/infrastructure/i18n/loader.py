"""Dictionary loading interface and implementations.

Defines the contract for loading translation entries and provides the
YAML-based loader.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict

import yaml

from infrastructure.i18n.dictionary import TranslationDictionary
from infrastructure.i18n.exceptions import (
    DuplicateTranslationError,
    InvalidTranslationError,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

Entries = Dict[str, Dict[str, str]]


class DictionaryLoader(ABC):
    """Abstract base for dictionary loaders."""

    @abstractmethod
    def load(self) -> Entries:
        """Load translation entries.

        Returns:
            ``{identifier: {locale: text}}`` mapping.
        """

    def load_into(
        self,
        dictionary: TranslationDictionary,
        ignore_duplicates: bool = False,
    ) -> int:
        """Load entries and register them in a dictionary.

        Args:
            dictionary: Target dictionary.
            ignore_duplicates: Skip already registered pairs instead of failing.

        Returns:
            Number of translations added.
        """
        return dictionary.update(self.load(), ignore_duplicates=ignore_duplicates)


class YAMLDictionaryLoader(DictionaryLoader):
    """Loader for YAML dictionary files.

    Every ``*.yml`` / ``*.yaml`` file in the directory holds entries in the
    format::

        "Request Not Matching (Default Title)":
          en: Invalid request
          de: Ungültige Anfrage

    Attributes:
        translations_dir: Path to directory containing YAML files.
        use_cache: Whether parsed entries are kept in memory.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        """Initialize YAML dictionary loader.

        Args:
            translations_dir: Path to directory with YAML dictionary files.
            use_cache: Whether to cache loaded entries in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Entries | None = None

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def files(self) -> list[Path]:
        """Return the dictionary files of the directory in load order."""
        return sorted(
            list(self.translations_dir.glob("*.yml"))
            + list(self.translations_dir.glob("*.yaml"))
        )

    def load(self) -> Entries:
        """Load and merge all dictionary files of the directory.

        Returns:
            Merged ``{identifier: {locale: text}}`` mapping.

        Raises:
            DuplicateTranslationError: If two files translate the same pair.
            InvalidTranslationError: If a file is not valid YAML or has the
                wrong structure.
        """
        if self.use_cache and self.cache is not None:
            return self.cache

        entries: Entries = {}
        yaml_files = self.files()

        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise InvalidTranslationError(f"Failed to parse {yaml_file}: {e}") from e

            if data:
                self._merge_yaml_data(entries, data, yaml_file)

        logger.info(
            "loaded_dictionary_files",
            translations_dir=str(self.translations_dir),
            file_count=len(yaml_files),
            identifier_count=len(entries),
        )

        if self.use_cache:
            self.cache = entries

        return entries

    def _merge_yaml_data(self, entries: Entries, data: object, source_file: Path) -> None:
        if not isinstance(data, dict):
            raise InvalidTranslationError(
                f"Dictionary file {source_file} must contain a mapping of identifiers"
            )

        for identifier, translations in data.items():
            if not isinstance(translations, dict):
                raise InvalidTranslationError(
                    f"Identifier '{identifier}' in {source_file} must map locales to texts"
                )
            bucket = entries.setdefault(str(identifier), {})
            for locale, text in translations.items():
                if locale in bucket:
                    raise DuplicateTranslationError(str(locale), str(identifier))
                bucket[str(locale)] = text

    def clear_cache(self) -> None:
        """Clear cached entries."""
        self.cache = None
        logger.info("cleared_dictionary_cache")
