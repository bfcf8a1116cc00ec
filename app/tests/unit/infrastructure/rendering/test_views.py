"""Unit tests for the Jinja2 view renderer."""

import pytest
from jinja2 import TemplateError, TemplateNotFound

from infrastructure.rendering import Jinja2ViewRenderer
from infrastructure.rendering.middleware import DEFAULT_TEMPLATES_DIR
from tests.factories.i18n import make_dictionary


@pytest.fixture
def templates_dir(tmp_path):
    """Directory with test view templates."""
    (tmp_path / "page.html").write_text(
        "<h1>{{ title }}</h1><p>{{ message }}</p><i>{{ context | length }}</i>",
        encoding="utf-8",
    )
    (tmp_path / "greeting.html").write_text(
        "<p>{{ t('greeting', 'Eric') }}</p>", encoding="utf-8"
    )
    (tmp_path / "broken.html").write_text("{{ missing() }}", encoding="utf-8")
    return tmp_path


@pytest.mark.unit
class TestJinja2ViewRenderer:
    """Tests for Jinja2ViewRenderer."""

    def test_render_context_variables(self, templates_dir):
        """Test context keys are template variables."""
        renderer = Jinja2ViewRenderer(templates_dir)

        html = renderer.render(
            "page.html", {"title": "Hello", "message": "World", "language": "en"}
        )

        assert html == "<h1>Hello</h1><p>World</p><i>3</i>"

    def test_render_autoescapes(self, templates_dir):
        """Test context values are escaped in HTML templates."""
        renderer = Jinja2ViewRenderer(templates_dir)

        html = renderer.render("page.html", {"title": "<b>x</b>", "message": ""})

        assert "&lt;b&gt;x&lt;/b&gt;" in html

    def test_translate_helper_uses_context_language(self, templates_dir):
        """Test t() translates into the context language."""
        renderer = Jinja2ViewRenderer(templates_dir, make_dictionary())

        html = renderer.render("greeting.html", {"language": "de"})

        assert html == "<p>Willkommen zurück, Eric</p>"

    def test_missing_template(self, templates_dir):
        """Test unknown views raise TemplateNotFound."""
        with pytest.raises(TemplateNotFound):
            Jinja2ViewRenderer(templates_dir).render("nope.html", {})

    def test_template_failure(self, templates_dir):
        """Test template errors propagate."""
        with pytest.raises(TemplateError):
            Jinja2ViewRenderer(templates_dir).render("broken.html", {})

    def test_bundled_default_view(self):
        """Test the bundled default view renders the context."""
        renderer = Jinja2ViewRenderer(DEFAULT_TEMPLATES_DIR)

        html = renderer.render(
            "default.html",
            {"status": 404, "title": "Invalid request", "message": "Nothing", "language": "en"},
        )

        assert '<html lang="en">' in html
        assert "<h1>Invalid request</h1>" in html
        assert "<p>Nothing</p>" in html
