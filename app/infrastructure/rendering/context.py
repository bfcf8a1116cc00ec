"""Render context resolution.

Turns the loose arguments of a render call into a finalized view and
context. Callers may pass a view, a context mapping, a bare message string,
or nothing; every missing piece is computed from the response state, the
dictionary and the language resolver.

Resolution steps for one call::

    shift arguments -> resolve view -> resolve context -> validate
        -> plan                      (valid)
        -> recover -> plan           (invalid, context status forced to 500)
"""

from typing import Any, Mapping, Optional

from infrastructure.i18n.dictionary import TranslationDictionary
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.logging import get_module_logger
from infrastructure.providers import Provider, evaluate
from infrastructure.rendering.exceptions import MissingViewTemplateError
from infrastructure.rendering.models import (
    COMPLETE_CONTEXT_FIELDS,
    RenderPlan,
    ResponseContext,
    ResponseState,
    ValidationResult,
    order_context,
)

logger = get_module_logger()

RECOVERY_STATUS = 500


def _text(value: Any) -> Optional[str]:
    """Return value if it is a non-empty string, else None."""
    if isinstance(value, str) and value:
        return value
    return None


class ContextResolver:
    """Resolves view and context of a render call.

    Attributes:
        dictionary: Source of the default title and message.
        language_resolver: Resolves the context language.
        default_template: Provider of the fallback view template.
        default_title: Dictionary identifier of the default title.
        default_message: Dictionary identifier of the default message.
    """

    def __init__(
        self,
        dictionary: TranslationDictionary,
        language_resolver: LanguageResolver,
        default_template: Provider,
        default_title: str,
        default_message: str,
    ):
        self.dictionary = dictionary
        self.language_resolver = language_resolver
        self.default_template = default_template
        self.default_title = default_title
        self.default_message = default_message

    async def resolve(
        self,
        request: Any,
        state: ResponseState,
        view: Any = None,
        context: Any = None,
    ) -> RenderPlan:
        """Resolve the arguments of a render call.

        Args:
            request: Current request.
            state: In-flight response state.
            view: View template name, a context mapping (shifted into
                context), or None.
            context: Context mapping, message string, or None.

        Returns:
            RenderPlan with the finalized view and context.

        Raises:
            MissingViewTemplateError: If a default view is needed and the
                provider does not yield one.
            InvalidDefaultLanguageError: If a default language is needed and
                the provider does not yield a valid one.
        """
        # view and context are both optional, shift if only a context was given
        if not isinstance(context, Mapping) and isinstance(view, Mapping):
            context = view
            view = await self.default_view(request)

        if view is None:
            view = await self.default_view(request)

        if not self.is_complete(context):
            defaults = await self.default_context(request, state, context)
            base = dict(context) if isinstance(context, Mapping) else {}
            context = {**base, **defaults.as_dict()}

        recovered = False
        validation = self.validate(view, context, state.status_code)
        if not validation.is_valid:
            logger.error(
                "render_validation_failed",
                errors=validation.errors,
                view=repr(view),
                context=repr(context),
                status_code=state.status_code,
            )
            view = await self.default_view(request)
            hints = context if isinstance(context, Mapping) else None
            context = (await self.default_context(request, state, hints)).as_dict()
            # internal only, the HTTP status of the response is unchanged
            context["status"] = RECOVERY_STATUS
            recovered = True
            logger.info("render_recovered_with_defaults", view=view, context=context)

        context = dict(context)
        if context.get("status") is None:
            context["status"] = state.status_code

        return RenderPlan(view=view, context=order_context(context), recovered=recovered)

    async def default_view(self, request: Any) -> str:
        """Evaluate the default view provider.

        Raises:
            MissingViewTemplateError: If the provider yields no template name.
        """
        template = await evaluate(self.default_template, request)
        if not isinstance(template, str) or not template.strip():
            logger.error("invalid_default_view_template", template=repr(template))
            raise MissingViewTemplateError(
                f"Invalid reference to default view template: {template!r}"
            )
        return template

    @staticmethod
    def is_complete(context: Any) -> bool:
        """Check if a caller context needs no defaults.

        A context is complete when it is a non-empty mapping whose keys are
        all among status, message and language, none of them None, and it
        carries a language. The title never counts: a complete context is
        rendered without a title.

        Args:
            context: Caller-supplied context.

        Returns:
            True if the context is rendered as given.
        """
        if not isinstance(context, Mapping) or not context:
            return False
        if "language" not in context:
            return False
        return all(
            key in COMPLETE_CONTEXT_FIELDS and value is not None
            for key, value in context.items()
        )

    async def default_context(
        self,
        request: Any,
        state: ResponseState,
        context: Any = None,
    ) -> ResponseContext:
        """Compute the default context of a response.

        Caller title, message and valid language are kept; the message
        falls back to the status line text, then to the default message.

        Args:
            request: Current request.
            state: In-flight response state.
            context: Caller context mapping or message string, used as hints.

        Returns:
            ResponseContext with all four fields set.
        """
        message = _text(state.status_message)
        title = None
        language = None

        if isinstance(context, Mapping):
            message = _text(context.get("message")) or message
            title = _text(context.get("title"))
            language = context.get("language")
        elif isinstance(context, str) and context:
            message = context

        language = await self.language_resolver.resolve(
            request, language=language, message=message, title=title
        )

        if title is None:
            title = self.dictionary.translate(language, self.default_title)
        if message is None:
            message = self.dictionary.translate(language, self.default_message)

        return ResponseContext(
            status=state.status_code,
            title=title,
            message=message,
            language=language,
        )

    @staticmethod
    def validate(view: Any, context: Any, status_code: int) -> ValidationResult:
        """Validate finalized render arguments.

        Args:
            view: View template name.
            context: Context mapping.
            status_code: HTTP status code of the response.

        Returns:
            ValidationResult listing every violation.
        """
        errors = []
        if not isinstance(view, str):
            errors.append("Missing a view")
        if not isinstance(context, Mapping):
            errors.append(f"Missing a context for the view {view!r}")
        elif status_code >= 400 and not _text(context.get("message")):
            errors.append(f"Context of the view {view!r} is missing a 'message'")
        if errors:
            return ValidationResult.failure(*errors)
        return ValidationResult.success()
