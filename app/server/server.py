from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from infrastructure.logging import get_module_logger
from infrastructure.rendering import (
    RenderEngineError,
    get_responder,
    setup_response_renderer,
)
from infrastructure.services import (
    ResponderDep,
    get_dictionary,
    get_language_detector,
    get_settings,
)

logger = get_module_logger()
settings = get_settings()

handler = FastAPI()
handler.state.default_view_template = "default.html"
handler.state.preferred_language = settings.renderer.PREFERRED_LANGUAGE or "en"

renderer = setup_response_renderer(
    handler,
    dictionary=get_dictionary(),
    detector=get_language_detector(),
    settings=settings,
)


async def render_engine_error_handler(_request: Request, exc: Exception):
    """Answer with a bare 500 when an HTML view can't be rendered."""
    logger.error("render_engine_error", error=str(exc))
    return PlainTextResponse("Internal Server Error", status_code=500)


def custom_detail(exc: StarletteHTTPException) -> Optional[str]:
    """Return the detail of an HTTP error unless it is the standard reason phrase."""
    if not isinstance(exc.detail, str) or not exc.detail:
        return None
    try:
        phrase = HTTPStatus(exc.status_code).phrase
    except ValueError:
        phrase = None
    return None if exc.detail == phrase else exc.detail


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors (404, 405, ...) as localized responses.

    A custom detail becomes the message; the standard reason phrase is
    replaced by the localized default message. Headers of the exception
    (Allow, WWW-Authenticate, ...) are kept.
    """
    respond = get_responder(request)
    response = await respond.status(exc.status_code, custom_detail(exc))()
    if response is None:
        response = PlainTextResponse(str(exc.status_code), status_code=exc.status_code)
    response.headers.update(exc.headers or {})
    return response


handler.add_exception_handler(RenderEngineError, render_engine_error_handler)
handler.add_exception_handler(StarletteHTTPException, http_exception_handler)


@handler.get("/health")
async def health(respond: ResponderDep):
    """Liveness probe."""
    return await respond({"status": 200, "message": "ok", "language": "en"})
