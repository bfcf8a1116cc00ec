"""Response rendering - context resolution and content negotiation.

Main components:
- context: ContextResolver merging caller context with localized defaults
- negotiation: Accept header negotiation (HTML, JSON, plain text)
- dispatcher: FormatDispatcher producing the HTTP response
- responder: Responder attached to every request
- middleware: ResponseRendererMiddleware and setup_response_renderer
- options: RendererOptions validated at setup
"""

from infrastructure.rendering.context import ContextResolver
from infrastructure.rendering.dispatcher import FormatDispatcher
from infrastructure.rendering.exceptions import (
    AlreadyRespondedError,
    ConfigurationError,
    InvalidDefaultLanguageError,
    MissingViewTemplateError,
    RenderEngineError,
    RenderingError,
)
from infrastructure.rendering.middleware import (
    ResponseRenderer,
    ResponseRendererMiddleware,
    setup_response_renderer,
)
from infrastructure.rendering.models import (
    RenderPlan,
    ResponseContext,
    ResponseState,
    ValidationResult,
)
from infrastructure.rendering.negotiation import MediaType, negotiate
from infrastructure.rendering.options import RendererOptions
from infrastructure.rendering.plaintext import dump_plaintext, to_plaintext
from infrastructure.rendering.responder import Responder, get_responder
from infrastructure.rendering.views import Jinja2ViewRenderer, ViewRenderer

__all__ = [
    "AlreadyRespondedError",
    "ConfigurationError",
    "ContextResolver",
    "FormatDispatcher",
    "InvalidDefaultLanguageError",
    "Jinja2ViewRenderer",
    "MediaType",
    "MissingViewTemplateError",
    "RenderEngineError",
    "RenderPlan",
    "RenderingError",
    "RendererOptions",
    "Responder",
    "ResponseContext",
    "ResponseRenderer",
    "ResponseRendererMiddleware",
    "ResponseState",
    "ValidationResult",
    "ViewRenderer",
    "dump_plaintext",
    "get_responder",
    "negotiate",
    "setup_response_renderer",
    "to_plaintext",
]
