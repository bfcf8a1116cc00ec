"""HTML view rendering.

The dispatcher consumes any object with a ``render(view, context)`` method
returning the HTML body (or an awaitable of it). The Jinja2 renderer is
the default implementation.
"""

from pathlib import Path
from typing import Any, Awaitable, Mapping, Optional, Protocol, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from infrastructure.i18n.dictionary import TranslationDictionary
from infrastructure.i18n.resolvers import DEFAULT_LANGUAGE


class ViewRenderer(Protocol):
    """Renders a named view template with a context."""

    def render(
        self, view: str, context: Mapping[str, Any]
    ) -> Union[str, Awaitable[str]]: ...


class Jinja2ViewRenderer:
    """ViewRenderer backed by a Jinja2 file system environment.

    Templates receive the context keys as variables plus ``context`` itself.
    With a dictionary, a ``t(identifier, *substitutions)`` helper translates
    into the context language.

    Attributes:
        environment: Jinja2 Environment loading from templates_dir.
        dictionary: Optional dictionary for the ``t`` helper.
    """

    def __init__(
        self,
        templates_dir: Union[str, Path],
        dictionary: Optional[TranslationDictionary] = None,
    ):
        self.templates_dir = Path(templates_dir)
        self.dictionary = dictionary
        self.environment = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def render(self, view: str, context: Mapping[str, Any]) -> str:
        """Render a template.

        Args:
            view: Template name relative to templates_dir.
            context: Template context.

        Returns:
            Rendered HTML.

        Raises:
            jinja2.TemplateError: If the template is missing or fails.
        """
        language = context.get("language") or DEFAULT_LANGUAGE
        template_context = {**context, "context": dict(context)}

        if self.dictionary is not None:
            dictionary = self.dictionary

            def t(identifier: str, *substitutions: Any) -> str:
                return dictionary.translate(language, identifier, *substitutions)

            template_context["t"] = t

        template = self.environment.get_template(view)
        return template.render(template_context)
