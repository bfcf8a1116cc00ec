"""Format dispatching of resolved render plans.

Negotiates the output format from the Accept header and produces the
HTTP response: an HTML view, the context as JSON, or the context as a
plain-text YAML document.
"""

from typing import Any

from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from infrastructure.i18n.models import normalize_language
from infrastructure.logging import get_module_logger
from infrastructure.providers import maybe_await
from infrastructure.rendering.exceptions import AlreadyRespondedError, RenderEngineError
from infrastructure.rendering.models import RenderPlan, ResponseState
from infrastructure.rendering.negotiation import MediaType, negotiate
from infrastructure.rendering.plaintext import dump_plaintext, to_plaintext
from infrastructure.rendering.views import ViewRenderer

logger = get_module_logger()


def ensure_pending(request: Any, state: ResponseState) -> None:
    """Refuse to render twice for the same request.

    Raises:
        AlreadyRespondedError: If a response was already produced.
    """
    if state.headers_sent:
        raise AlreadyRespondedError(
            f"Server failed to respond to the request '{request.method} {request.url.path}' "
            "because a response has already been sent. Check your route handlers and "
            "prevent repetitive responses to the same request."
        )


class FormatDispatcher:
    """Produces the HTTP response of a render plan.

    Attributes:
        view_renderer: Renders HTML views.
    """

    def __init__(self, view_renderer: ViewRenderer):
        self.view_renderer = view_renderer

    async def dispatch(
        self,
        request: Any,
        state: ResponseState,
        plan: RenderPlan,
    ) -> Response:
        """Render a plan in the negotiated format.

        The response uses the status code of the response state; the status
        inside the context is informational.

        Args:
            request: Current request.
            state: In-flight response state, finalized with the response.
            plan: Resolved view and context.

        Returns:
            The produced response.

        Raises:
            AlreadyRespondedError: If a response was already produced.
            RenderEngineError: If the HTML view fails to render.
        """
        ensure_pending(request, state)
        media_type = negotiate(request.headers.get("accept"))

        if media_type is MediaType.HTML:
            response = await self.render_html(plan, state)
        elif media_type is MediaType.JSON:
            response = self.render_json(plan, state)
        else:
            response = self.render_text(plan, state)

        # complete caller contexts are rendered unvalidated, header values must be codes
        language = normalize_language(plan.language)
        if language:
            response.headers["Content-Language"] = language
        response.headers["Vary"] = "Accept"

        state.finalize(response)
        logger.info(
            "response_rendered",
            media_type=media_type.value,
            status_code=state.status_code,
            view=plan.view,
            recovered=plan.recovered,
        )
        return response

    async def render_html(self, plan: RenderPlan, state: ResponseState) -> Response:
        """Render the view with the context.

        Raises:
            RenderEngineError: If the view renderer fails.
        """
        try:
            html = await maybe_await(self.view_renderer.render(plan.view, plan.context))
        except Exception as e:
            logger.error("html_view_render_failed", view=plan.view, error=str(e))
            raise RenderEngineError(plan.view, str(e)) from e

        if not isinstance(html, str):
            logger.error("html_view_render_failed", view=plan.view, error="no body")
            raise RenderEngineError(plan.view, "view renderer returned no HTML")

        logger.debug("html_view_rendered", view=plan.view, body=html)
        return HTMLResponse(html, status_code=state.status_code)

    def render_json(self, plan: RenderPlan, state: ResponseState) -> Response:
        """Serialize the context verbatim as JSON."""
        return JSONResponse(plan.context, status_code=state.status_code)

    def render_text(self, plan: RenderPlan, state: ResponseState) -> Response:
        """Serialize the context as a plain-text YAML document."""
        context = dict(plan.context)
        if "message" in context:
            context["message"] = to_plaintext(context["message"])
        body = dump_plaintext(context)
        logger.debug("plaintext_rendered", body=body)
        return PlainTextResponse(body, status_code=state.status_code)
