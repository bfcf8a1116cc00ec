"""Multilingual route path segments.

Compiles all translations of an identifier into one alternation so a single
route answers to every language, e.g. ``hello|hallo|привет``.
"""

import re

from infrastructure.i18n.dictionary import TranslationDictionary

# ASCII punctuation plus the general and supplemental punctuation blocks
_PUNCTUATION = re.compile(
    r"[\u2000-\u206F\u2E00-\u2E7F\\'!\"#$%&()*+,\-./:;<=>?@\[\]^_`{|}~]+"
)
_WHITESPACE = re.compile(r"\s+")


def strip(value: str) -> str:
    """Trim a string for use in URLs.

    Removes leading and trailing whitespace and punctuation, and replaces
    inner whitespace runs with a dash.

    Args:
        value: Text to strip.

    Returns:
        The URL-friendly text.

    Raises:
        TypeError: If value is not a string.
    """
    if not isinstance(value, str):
        raise TypeError("Can't remove special characters from non-string values")
    value = _PUNCTUATION.sub("", value.strip())
    return _WHITESPACE.sub("-", value)


def slug(
    dictionary: TranslationDictionary,
    identifier: str,
    with_param_name: bool = True,
) -> str:
    """Compile the translations of an identifier into a path pattern.

    ``{"hello": {"en": "hello", "fr": "bon jour", "de": "hallo"}}`` compiles
    into ``hello|bon-jour|hallo``. With ``with_param_name`` the alternation is
    wrapped into a named group ``(?P<i18n_hello>hello|bon-jour|hallo)`` so the
    matched translation is available as a path parameter.

    Args:
        dictionary: Dictionary holding the identifier.
        identifier: Lowercase identifier without special characters.
        with_param_name: Wrap the alternation into a named regex group.

    Returns:
        The path pattern.

    Raises:
        ValueError: If identifier is empty or contains special characters or
            uppercase letters.
        KeyError: If the dictionary has no translations for identifier.
    """
    if not isinstance(identifier, str) or not identifier:
        raise ValueError("Slug is missing identifier argument")
    if identifier != strip(identifier).lower():
        raise ValueError(
            f"Slug identifier '{identifier}' is not allowed to include special characters or uppercase letters"
        )
    entry = dictionary.get_entry(identifier)
    if entry is None or not entry.translations:
        raise KeyError(f"Dictionary is missing translations for identifier '{identifier}'")

    pattern = "|".join(strip(text).lower() for text in entry.translations.values())
    if with_param_name:
        return f"(?P<i18n_{identifier}>{pattern})"
    return pattern
