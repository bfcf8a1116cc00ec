"""Unit tests for multilingual route path segments."""

import re

import pytest

from infrastructure.i18n import TranslationDictionary, slug, strip


@pytest.fixture
def slug_dictionary():
    """Dictionary with a multilingual path segment."""
    return TranslationDictionary(
        {"hello": {"en": "Hello", "fr": "bon jour", "de": "Hallo!", "ru": "Привет"}}
    )


@pytest.mark.unit
class TestStrip:
    """Tests for strip()."""

    def test_strip_punctuation_and_whitespace(self):
        """Test punctuation is removed and whitespace becomes dashes."""
        assert strip("  Hello,   world! ") == "Hello-world"

    def test_strip_unicode_punctuation(self):
        """Test general punctuation block characters are removed."""
        assert strip("“quoted”…") == "quoted"

    def test_strip_keeps_letters(self):
        """Test non-ASCII letters survive."""
        assert strip("Привет мир") == "Привет-мир"

    def test_strip_non_string_raises(self):
        """Test only strings can be stripped."""
        with pytest.raises(TypeError):
            strip(42)


@pytest.mark.unit
class TestSlug:
    """Tests for slug()."""

    def test_slug_with_param_name(self, slug_dictionary):
        """Test translations are compiled into a named group."""
        assert slug(slug_dictionary, "hello") == (
            "(?P<i18n_hello>hello|bon-jour|hallo|привет)"
        )

    def test_slug_without_param_name(self, slug_dictionary):
        """Test the bare alternation."""
        assert slug(slug_dictionary, "hello", with_param_name=False) == (
            "hello|bon-jour|hallo|привет"
        )

    def test_slug_matches_every_translation(self, slug_dictionary):
        """Test the pattern matches each translated segment."""
        pattern = re.compile(slug(slug_dictionary, "hello"))

        for segment in ("hello", "bon-jour", "hallo", "привет"):
            match = pattern.fullmatch(segment)
            assert match is not None
            assert match.group("i18n_hello") == segment

    @pytest.mark.parametrize("identifier", ["", None, "Hello", "hel lo", "hello!"])
    def test_slug_rejects_identifier(self, slug_dictionary, identifier):
        """Test empty, uppercase or special identifiers are rejected."""
        with pytest.raises(ValueError):
            slug(slug_dictionary, identifier)

    def test_slug_unknown_identifier(self, slug_dictionary):
        """Test identifiers without translations raise KeyError."""
        with pytest.raises(KeyError):
            slug(slug_dictionary, "goodbye")
