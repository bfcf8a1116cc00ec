"""Per-request responder.

The responder is what route handlers call to answer a request::

    @router.get("/items/{item_id}")
    async def item(request: Request):
        respond = request.state.respond
        return await respond.status(404)("items/missing.html")
"""

from typing import Any, Optional

from starlette.requests import Request
from starlette.responses import Response

from infrastructure.logging import get_module_logger
from infrastructure.rendering.context import ContextResolver
from infrastructure.rendering.dispatcher import FormatDispatcher, ensure_pending
from infrastructure.rendering.exceptions import AlreadyRespondedError, ConfigurationError
from infrastructure.rendering.models import ResponseState

logger = get_module_logger()


class Responder:
    """Renders the response of one request.

    Attributes:
        request: The request being answered.
        state: In-flight response state.
        resolver: Resolves view and context.
        dispatcher: Produces the negotiated response.
    """

    def __init__(
        self,
        request: Request,
        resolver: ContextResolver,
        dispatcher: FormatDispatcher,
        state: Optional[ResponseState] = None,
    ):
        self.request = request
        self.resolver = resolver
        self.dispatcher = dispatcher
        self.state = state or ResponseState()

    @property
    def status_code(self) -> int:
        """HTTP status code of the response."""
        return self.state.status_code

    @property
    def headers_sent(self) -> bool:
        """Whether a response was already produced."""
        return self.state.headers_sent

    def status(self, code: int, message: Optional[str] = None) -> "Responder":
        """Set the HTTP status of the response.

        Args:
            code: HTTP status code.
            message: Optional status line text, used as default message.

        Returns:
            The responder, for chaining.
        """
        self.state.status_code = int(code)
        if message is not None:
            self.state.status_message = message
        return self

    async def __call__(self, view: Any = None, context: Any = None) -> Optional[Response]:
        """Render the response.

        Args:
            view: View template name, or a context mapping when the default
                view should be used.
            context: Context mapping or message string.

        Returns:
            The produced response. A repeated call returns the response of
            the first call unchanged.

        Raises:
            RenderEngineError: If the HTML view fails to render.
            ConfigurationError: If a default view or language is needed and
                its provider yields an invalid value.
        """
        try:
            ensure_pending(self.request, self.state)
            plan = await self.resolver.resolve(self.request, self.state, view, context)
            return await self.dispatcher.dispatch(self.request, self.state, plan)
        except AlreadyRespondedError as e:
            logger.error(
                "already_responded",
                error=str(e),
                status_code=self.state.status_code,
                status_message=self.state.status_message,
            )
            return self.state.response


def get_responder(request: Request) -> Responder:
    """FastAPI dependency returning the responder of the request.

    Raises:
        ConfigurationError: If the renderer middleware is not installed.
    """
    renderer = getattr(request.app.state, "response_renderer", None)
    if renderer is None:
        raise ConfigurationError("Response renderer middleware is not installed")
    responder = getattr(request.state, renderer.options.decorator_name, None)
    if not isinstance(responder, Responder):
        raise ConfigurationError("Response renderer middleware did not run for this request")
    return responder
