"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import ResponderDep
from infrastructure.services.providers import (
    get_settings,
    get_dictionary,
    get_language_detector,
)

__all__ = [
    "ResponderDep",
    "get_settings",
    "get_dictionary",
    "get_language_detector",
]
