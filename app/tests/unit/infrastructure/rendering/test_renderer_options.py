"""Unit tests for RendererOptions."""

import pytest

from infrastructure.configuration import RendererSettings
from infrastructure.exceptions import ConfigurationError
from infrastructure.i18n import (
    InvalidDefaultLanguageError,
    TranslationDictionary,
    application_language,
)
from infrastructure.providers import Computed, Static
from infrastructure.rendering import MissingViewTemplateError, RendererOptions
from infrastructure.rendering.options import DEFAULT_DECORATOR_NAME, application_template
from tests.factories.rendering import make_request


@pytest.mark.unit
class TestRendererOptions:
    """Tests for RendererOptions construction."""

    def test_defaults(self):
        """Test default options read template and language from app state."""
        options = RendererOptions()

        assert options.decorator_name == DEFAULT_DECORATOR_NAME == "respond"
        assert options.default_template == Computed(application_template)
        assert options.preferred_language == Computed(application_language)

    def test_values_are_coerced_to_providers(self):
        """Test plain values and callables become providers."""

        def template(request):
            return "page.html"

        options = RendererOptions(default_template=template, preferred_language="de")

        assert options.default_template == Computed(template)
        assert options.preferred_language == Static("de")

    def test_malformed_provider_raises(self):
        """Test values that are neither strings nor callables are rejected."""
        with pytest.raises(ConfigurationError):
            RendererOptions(preferred_language=42)

    def test_from_settings(self):
        """Test options built from the renderer settings section."""
        settings = RendererSettings(
            RENDERER_DECORATOR_NAME="render",
            DEFAULT_VIEW_TEMPLATE="page.html",
            PREFERRED_LANGUAGE="DE",
        )

        options = RendererOptions.from_settings(settings)

        assert options.decorator_name == "render"
        assert options.default_template == Static("page.html")
        assert options.preferred_language == Static("de")

    def test_from_settings_keeps_state_lookups_when_unset(self):
        """Test unset template and language keep the app state providers."""
        settings = RendererSettings(DEFAULT_VIEW_TEMPLATE="", PREFERRED_LANGUAGE="")

        options = RendererOptions.from_settings(settings, decorator_name="answer")

        assert options.decorator_name == "answer"
        assert isinstance(options.default_template, Computed)
        assert isinstance(options.preferred_language, Computed)

    def test_application_state_accessors(self):
        """Test the app state accessors and the "en" fallback."""
        request = make_request(
            app_state={"default_view_template": "home.html", "preferred_language": "ru"}
        )

        assert application_template(request) == "home.html"
        assert application_language(request) == "ru"
        assert application_template(make_request()) is None
        assert application_language(make_request()) == "en"


@pytest.mark.unit
class TestRendererOptionsValidate:
    """Tests for RendererOptions.validate()."""

    def test_valid_options(self, dictionary):
        """Test defaults validate against a dictionary with the default strings."""
        RendererOptions(
            default_template="default.html", preferred_language="ru"
        ).validate(dictionary)

    @pytest.mark.parametrize("name", ["return", "my-name", "", "1st", None])
    def test_unusable_decorator_name(self, dictionary, name):
        """Test keywords and non-identifiers are rejected."""
        with pytest.raises(ConfigurationError, match="can't be used"):
            RendererOptions(decorator_name=name).validate(dictionary)

    def test_blank_static_template(self, dictionary):
        """Test a blank static template is rejected."""
        with pytest.raises(MissingViewTemplateError):
            RendererOptions(default_template="  ").validate(dictionary)

    def test_invalid_static_language(self, dictionary):
        """Test a static language must be a two-letter code."""
        with pytest.raises(InvalidDefaultLanguageError):
            RendererOptions(preferred_language="english").validate(dictionary)

    def test_missing_default_identifier(self):
        """Test the dictionary must hold the default title and message."""
        with pytest.raises(ConfigurationError, match="missing the default response"):
            RendererOptions().validate(TranslationDictionary())

    def test_missing_default_locale(self, dictionary):
        """Test a static language must be translated."""
        with pytest.raises(ConfigurationError, match="for locale 'fr'"):
            RendererOptions(preferred_language="fr").validate(dictionary)

    def test_blank_default_identifier(self, dictionary):
        """Test default identifiers must be set."""
        with pytest.raises(ConfigurationError):
            RendererOptions(default_response_title="").validate(dictionary)
