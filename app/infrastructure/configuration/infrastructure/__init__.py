"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.rendering import RendererSettings

__all__ = [
    "RendererSettings",
]
