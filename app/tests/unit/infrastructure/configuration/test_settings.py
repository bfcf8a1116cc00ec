"""Unit tests for configuration settings."""

import pytest
from pydantic import ValidationError

from infrastructure.configuration import RendererSettings, Settings


@pytest.mark.unit
class TestRendererSettings:
    """Tests for RendererSettings."""

    def test_defaults(self, monkeypatch):
        """Test the default renderer configuration."""
        for name in ("RENDERER_DECORATOR_NAME", "DEFAULT_VIEW_TEMPLATE", "PREFERRED_LANGUAGE"):
            monkeypatch.delenv(name, raising=False)

        settings = RendererSettings()

        assert settings.RENDERER_DECORATOR_NAME == "respond"
        assert settings.DEFAULT_VIEW_TEMPLATE is None
        assert settings.PREFERRED_LANGUAGE is None
        assert settings.DEFAULT_RESPONSE_TITLE == "Request Not Matching (Default Title)"
        assert settings.DEFAULT_RESPONSE_MESSAGE == "Request Not Matching (Default Message)"

    def test_from_environment(self, monkeypatch):
        """Test values are read from environment variables."""
        monkeypatch.setenv("RENDERER_DECORATOR_NAME", "render")
        monkeypatch.setenv("PREFERRED_LANGUAGE", "RU")
        monkeypatch.setenv("TEMPLATES_DIR", "  ")

        settings = RendererSettings()

        assert settings.RENDERER_DECORATOR_NAME == "render"
        assert settings.PREFERRED_LANGUAGE == "ru"
        assert settings.TEMPLATES_DIR is None

    @pytest.mark.parametrize("value", ["english", "e1", "d"])
    def test_invalid_preferred_language(self, value):
        """Test PREFERRED_LANGUAGE must be a two-letter code."""
        with pytest.raises(ValidationError):
            RendererSettings(PREFERRED_LANGUAGE=value)


@pytest.mark.unit
class TestSettings:
    """Tests for the main Settings aggregator."""

    def test_renderer_section_is_created(self):
        """Test subsettings are instantiated automatically."""
        settings = Settings()

        assert isinstance(settings.renderer, RendererSettings)

    def test_renderer_section_override(self):
        """Test a section can be passed explicitly."""
        renderer = RendererSettings(RENDERER_DECORATOR_NAME="answer")

        settings = Settings(renderer=renderer)

        assert settings.renderer.RENDERER_DECORATOR_NAME == "answer"

    @pytest.mark.parametrize("prefix,expected", [("", True), ("dev-", False)])
    def test_is_production(self, prefix, expected):
        """Test production is detected from an empty PREFIX."""
        assert Settings(PREFIX=prefix).is_production is expected
