"""Response renderer infrastructure settings."""

import re
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

_LANGUAGE_PATTERN = re.compile(r"^[a-z]{2}$", re.IGNORECASE)


class RendererSettings(InfrastructureSettings):
    """Response renderer configuration.

    Environment Variables:
        RENDERER_DECORATOR_NAME: Attribute name of the responder on
            ``request.state`` (default: respond)
        DEFAULT_VIEW_TEMPLATE: Fallback HTML view template. When empty, the
            template is looked up on ``app.state.default_view_template``
            for every request.
        PREFERRED_LANGUAGE: Fallback two-letter language code. When empty, the
            language is looked up on ``app.state.preferred_language`` for
            every request, then "en".
        DEFAULT_RESPONSE_TITLE: Dictionary identifier of the default title
        DEFAULT_RESPONSE_MESSAGE: Dictionary identifier of the default message
        TEMPLATES_DIR: Directory with Jinja2 view templates
        TRANSLATIONS_DIR: Extra directory with YAML dictionary files

    Example:
        ```python
        from infrastructure.configuration import settings

        name = settings.renderer.RENDERER_DECORATOR_NAME
        title_id = settings.renderer.DEFAULT_RESPONSE_TITLE
        ```
    """

    RENDERER_DECORATOR_NAME: str = Field(
        default="respond", alias="RENDERER_DECORATOR_NAME"
    )
    DEFAULT_VIEW_TEMPLATE: Optional[str] = Field(
        default=None, alias="DEFAULT_VIEW_TEMPLATE"
    )
    PREFERRED_LANGUAGE: Optional[str] = Field(default=None, alias="PREFERRED_LANGUAGE")
    DEFAULT_RESPONSE_TITLE: str = Field(
        default="Request Not Matching (Default Title)",
        alias="DEFAULT_RESPONSE_TITLE",
    )
    DEFAULT_RESPONSE_MESSAGE: str = Field(
        default="Request Not Matching (Default Message)",
        alias="DEFAULT_RESPONSE_MESSAGE",
    )
    TEMPLATES_DIR: Optional[str] = Field(default=None, alias="TEMPLATES_DIR")
    TRANSLATIONS_DIR: Optional[str] = Field(default=None, alias="TRANSLATIONS_DIR")

    @field_validator("DEFAULT_VIEW_TEMPLATE", "TEMPLATES_DIR", "TRANSLATIONS_DIR")
    @classmethod
    def empty_as_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank environment values as unset."""
        if v is None or not v.strip():
            return None
        return v

    @field_validator("PREFERRED_LANGUAGE")
    @classmethod
    def validate_preferred_language(cls, v: Optional[str]) -> Optional[str]:
        """Validate PREFERRED_LANGUAGE as a two-letter code."""
        if v is None or not v.strip():
            return None
        if not _LANGUAGE_PATTERN.fullmatch(v):
            raise ValueError(
                f"PREFERRED_LANGUAGE must be a two-letter language code: {v!r}"
            )
        return v.lower()
