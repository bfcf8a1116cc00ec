"""Response renderer options.

Typed runtime configuration of the renderer, validated once at setup.
Template and language are providers: a fixed value or an accessor of the
current request.
"""

import keyword
from dataclasses import dataclass, field
from typing import Any, Optional

from infrastructure.configuration import RendererSettings
from infrastructure.i18n.dictionary import TranslationDictionary
from infrastructure.i18n.models import is_language_code
from infrastructure.i18n.resolvers import application_language
from infrastructure.providers import Computed, Provider, Static, as_provider
from infrastructure.rendering.exceptions import (
    ConfigurationError,
    InvalidDefaultLanguageError,
    MissingViewTemplateError,
)

DEFAULT_DECORATOR_NAME = "respond"
DEFAULT_RESPONSE_TITLE = "Request Not Matching (Default Title)"
DEFAULT_RESPONSE_MESSAGE = "Request Not Matching (Default Message)"


def _app_state(request: Any) -> Any:
    return getattr(request.scope.get("app"), "state", None)


def application_template(request: Any) -> Optional[str]:
    """Return ``app.state.default_view_template`` of the request's application."""
    return getattr(_app_state(request), "default_view_template", None)


@dataclass
class RendererOptions:
    """Renderer configuration.

    Attributes:
        decorator_name: Attribute name of the responder on ``request.state``.
        default_template: Provider of the fallback view template. Defaults to
            ``app.state.default_view_template``.
        preferred_language: Provider of the fallback language. Defaults to
            ``app.state.preferred_language``, then "en".
        default_response_title: Dictionary identifier of the default title.
        default_response_message: Dictionary identifier of the default message.
    """

    decorator_name: str = DEFAULT_DECORATOR_NAME
    default_template: Provider = field(
        default_factory=lambda: Computed(application_template)
    )
    preferred_language: Provider = field(
        default_factory=lambda: Computed(application_language)
    )
    default_response_title: str = DEFAULT_RESPONSE_TITLE
    default_response_message: str = DEFAULT_RESPONSE_MESSAGE

    def __post_init__(self):
        self.default_template = as_provider(
            self.default_template, name="default view template"
        )
        self.preferred_language = as_provider(
            self.preferred_language, name="default language"
        )

    @classmethod
    def from_settings(cls, settings: RendererSettings, **overrides: Any) -> "RendererOptions":
        """Build options from environment settings.

        Unset template and language settings keep the ``app.state`` lookups.

        Args:
            settings: RendererSettings section.
            **overrides: Explicit option values, e.g. a computed template.

        Returns:
            RendererOptions instance.
        """
        values: dict[str, Any] = {
            "decorator_name": settings.RENDERER_DECORATOR_NAME,
            "default_response_title": settings.DEFAULT_RESPONSE_TITLE,
            "default_response_message": settings.DEFAULT_RESPONSE_MESSAGE,
        }
        if settings.DEFAULT_VIEW_TEMPLATE:
            values["default_template"] = Static(settings.DEFAULT_VIEW_TEMPLATE)
        if settings.PREFERRED_LANGUAGE:
            values["preferred_language"] = Static(settings.PREFERRED_LANGUAGE)
        values.update(overrides)
        return cls(**values)

    def validate(self, dictionary: TranslationDictionary) -> None:
        """Validate the options against a dictionary.

        Args:
            dictionary: Dictionary the default title and message come from.

        Raises:
            ConfigurationError: If the decorator name is unusable or default
                translations are missing.
            MissingViewTemplateError: If a static template is blank.
            InvalidDefaultLanguageError: If a static language is not a
                registered ISO-639-1 code.
        """
        name = self.decorator_name
        if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
            raise ConfigurationError(
                f"Response decorator with name {name!r} can't be used"
            )

        if isinstance(self.default_template, Static) and not (
            isinstance(self.default_template.value, str)
            and self.default_template.value.strip()
        ):
            raise MissingViewTemplateError(
                f"Invalid reference to default view template: {self.default_template.value!r}"
            )

        if isinstance(self.preferred_language, Static) and not is_language_code(
            self.preferred_language.value
        ):
            raise InvalidDefaultLanguageError(
                f"Invalid reference to default language: {self.preferred_language.value!r}"
            )

        for identifier in (self.default_response_title, self.default_response_message):
            if not isinstance(identifier, str) or not identifier:
                raise ConfigurationError(
                    "Response renderer is missing a default value for response title or message"
                )
            if identifier not in dictionary:
                raise ConfigurationError(
                    f"Dictionary is missing the default response translation '{identifier}'"
                )
            if isinstance(self.preferred_language, Static):
                locale = self.preferred_language.value.lower()
                if not dictionary.has(locale, identifier):
                    raise ConfigurationError(
                        f"Dictionary is missing the default response translation '{identifier}' for locale '{locale}'"
                    )
