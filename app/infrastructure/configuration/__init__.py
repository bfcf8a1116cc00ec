"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    RendererSettings: Response renderer settings class

Example:
    ```python
    from infrastructure.configuration import settings

    if settings.is_production:
        ...
    language = settings.renderer.PREFERRED_LANGUAGE
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.rendering import RendererSettings

__all__ = ["Settings", "RendererSettings", "settings"]
