"""Response renderer middleware and setup.

Usage:
    from fastapi import FastAPI
    from infrastructure.rendering import setup_response_renderer

    app = FastAPI()
    app.state.default_view_template = "default.html"
    setup_response_renderer(app)

    @app.get("/")
    async def index(request: Request):
        return await request.state.respond({"message": "Hello"})
"""

from pathlib import Path
from typing import Optional, TYPE_CHECKING

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from infrastructure.i18n.detection import LangdetectDetector, LanguageDetector
from infrastructure.i18n.dictionary import TranslationDictionary
from infrastructure.i18n.factory import create_dictionary
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.logging import bind_request_context, get_module_logger, redact
from infrastructure.rendering.context import ContextResolver
from infrastructure.rendering.dispatcher import FormatDispatcher
from infrastructure.rendering.exceptions import ConfigurationError
from infrastructure.rendering.options import RendererOptions
from infrastructure.rendering.responder import Responder
from infrastructure.rendering.views import Jinja2ViewRenderer, ViewRenderer

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class ResponseRenderer:
    """Assembled renderer shared by all requests of an application.

    Attributes:
        options: Validated renderer options.
        dictionary: Translation dictionary.
        resolver: Context resolver.
        dispatcher: Format dispatcher.
    """

    def __init__(
        self,
        options: RendererOptions,
        dictionary: TranslationDictionary,
        detector: LanguageDetector,
        view_renderer: ViewRenderer,
    ):
        """Initialize and validate the renderer.

        Raises:
            ConfigurationError: If the options are invalid for the dictionary.
        """
        options.validate(dictionary)
        self.options = options
        self.dictionary = dictionary
        self.resolver = ContextResolver(
            dictionary=dictionary,
            language_resolver=LanguageResolver(detector, options.preferred_language),
            default_template=options.default_template,
            default_title=options.default_response_title,
            default_message=options.default_response_message,
        )
        self.dispatcher = FormatDispatcher(view_renderer)

    def attach(self, request: Request) -> Responder:
        """Create the responder of a request and attach it to ``request.state``.

        Raises:
            ConfigurationError: If ``request.state`` already has an attribute
                with the decorator name.
        """
        name = self.options.decorator_name
        if hasattr(request.state, name):
            raise ConfigurationError(
                f"Response decorator with name '{name}' can't be used, request state already has it"
            )
        responder = Responder(request, self.resolver, self.dispatcher)
        setattr(request.state, name, responder)
        return responder


class ResponseRendererMiddleware(BaseHTTPMiddleware):
    """Attaches a responder to every request and logs incoming requests."""

    def __init__(self, app, renderer: ResponseRenderer):
        super().__init__(app)
        self.renderer = renderer

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        with bind_request_context(
            correlation_id=request.headers.get("x-correlation-id"),
            request_path=request.url.path,
            request_method=request.method,
            client_ip=request.client.host if request.client else None,
        ):
            logger.info(
                "request_received",
                url=str(request.url),
                headers=redact(dict(request.headers)),
                query=redact(dict(request.query_params)),
            )
            self.renderer.attach(request)
            response = await call_next(request)
            logger.info("response_sent", status_code=response.status_code)
            return response


def setup_response_renderer(
    app: FastAPI,
    options: Optional[RendererOptions] = None,
    dictionary: Optional[TranslationDictionary] = None,
    detector: Optional[LanguageDetector] = None,
    view_renderer: Optional[ViewRenderer] = None,
    settings: Optional["Settings"] = None,
) -> ResponseRenderer:
    """Setup the response renderer for a FastAPI application.

    Missing collaborators are built from settings: options from the
    renderer settings section, the dictionary from the bundled default
    strings plus TRANSLATIONS_DIR, langdetect for detection, and Jinja2
    templates from TEMPLATES_DIR.

    Args:
        app: Application to install the middleware on.
        options: Renderer options.
        dictionary: Translation dictionary.
        detector: Language detector.
        view_renderer: HTML view renderer.
        settings: Settings instance. Defaults to the configuration singleton.

    Returns:
        The installed ResponseRenderer, also stored as
        ``app.state.response_renderer``.

    Raises:
        ConfigurationError: If the configuration is invalid.
    """
    if settings is None:
        from infrastructure.configuration import settings as default_settings

        settings = default_settings

    if options is None:
        options = RendererOptions.from_settings(settings.renderer)
    if dictionary is None:
        dictionary = create_dictionary(settings.renderer.TRANSLATIONS_DIR)
    if detector is None:
        detector = LangdetectDetector()
    if view_renderer is None:
        templates_dir = settings.renderer.TEMPLATES_DIR or DEFAULT_TEMPLATES_DIR
        view_renderer = Jinja2ViewRenderer(templates_dir, dictionary)

    renderer = ResponseRenderer(options, dictionary, detector, view_renderer)
    app.state.response_renderer = renderer
    app.add_middleware(ResponseRendererMiddleware, renderer=renderer)

    logger.info(
        "response_renderer_installed",
        decorator_name=options.decorator_name,
        identifier_count=len(dictionary),
    )
    return renderer
