"""Custom exceptions for the response renderer.

Setup-time problems raise ConfigurationError subclasses and abort startup.
Per-request problems are either recovered locally (invalid view or context),
swallowed at the responder boundary (AlreadyRespondedError) or handed to
the framework's exception handlers (RenderEngineError).
"""

from infrastructure.exceptions import ConfigurationError
from infrastructure.i18n.exceptions import InvalidDefaultLanguageError


class RenderingError(Exception):
    """Base exception for per-request rendering errors."""


class MissingViewTemplateError(ConfigurationError):
    """Raised when the default view provider does not yield a template name."""


class AlreadyRespondedError(RenderingError):
    """Raised when a response was already sent for the request.

    Never propagates past the responder; the second render call becomes
    a no-op.
    """


class RenderEngineError(RenderingError):
    """Raised when the HTML view renderer fails.

    Attributes:
        view: Name of the view that failed to render.
    """

    def __init__(self, view: str, message: str):
        self.view = view
        super().__init__(f"Failed to render HTML view '{view}': {message}")


__all__ = [
    "AlreadyRespondedError",
    "ConfigurationError",
    "InvalidDefaultLanguageError",
    "MissingViewTemplateError",
    "RenderEngineError",
    "RenderingError",
]
