"""Language resolution for rendered responses.

Derives an ISO-639-1 language code for a response from, in order:

1. The language explicitly set on the response context
2. The detected language of the response message
3. The detected language of the response title
4. The configured default language (static or per request)
"""

from typing import Any, Iterable, Optional

from infrastructure.i18n.detection import LanguageDetector
from infrastructure.i18n.exceptions import InvalidDefaultLanguageError
from infrastructure.i18n.models import normalize_language
from infrastructure.logging import get_module_logger
from infrastructure.providers import Computed, Provider, Static, evaluate, maybe_await

logger = get_module_logger()

DEFAULT_LANGUAGE = "en"


class LanguageResolver:
    """Resolves the language of a response context.

    Explicit caller intent outranks inference, and message text outranks
    title text for detection.

    Attributes:
        detector: LanguageDetector used for message and title text.
        default_language: Provider of the fallback language.
    """

    def __init__(
        self,
        detector: LanguageDetector,
        default_language: Provider = Static(DEFAULT_LANGUAGE),
    ):
        self.detector = detector
        self.default_language = default_language

    async def resolve(
        self,
        request: Any,
        language: Any = None,
        message: Any = None,
        title: Any = None,
    ) -> str:
        """Resolve a lowercase ISO-639-1 language code.

        Args:
            request: Current request, passed to computed default providers.
            language: Explicit language of the context, if any.
            message: Resolved message text, if any.
            title: Resolved title text, if any.

        Returns:
            Lowercase ISO-639-1 language code.

        Raises:
            InvalidDefaultLanguageError: If no step yields a valid code and
                the default provider does not either.
        """
        explicit = normalize_language(language)
        if explicit:
            return explicit
        if language is not None:
            logger.warning(
                "invalid_context_language",
                language=language,
                hint="A language code should be a registered ISO-639-1 code of two letters.",
            )

        for source, text in (("message", message), ("title", title)):
            detected = await self.detect(text)
            if detected:
                logger.debug("language_detected", source=source, language=detected)
                return detected

        return await self.resolve_default(request)

    async def detect(self, text: Any) -> Optional[str]:
        """Detect the language of a text.

        Args:
            text: Candidate text; non-strings and blank strings are skipped.

        Returns:
            Lowercase two-letter code, or None if detection gave no valid code.
        """
        if not isinstance(text, str) or not text.strip():
            return None
        result = await maybe_await(self.detector.detect(text))
        return normalize_language(getattr(result, "language", None))

    async def resolve_default(self, request: Any) -> str:
        """Evaluate the default language provider.

        Raises:
            InvalidDefaultLanguageError: If the provided value is not valid.
        """
        value = await evaluate(self.default_language, request)
        language = normalize_language(value)
        if language is None:
            logger.error("invalid_default_language", language=value)
            raise InvalidDefaultLanguageError(
                f"Invalid reference to default language: {value!r}"
            )
        return language


def parse_accept_language(header: Optional[str]) -> list[str]:
    """Parse an Accept-Language header into language tags by preference.

    Handles formats like "en-US,en;q=0.9,de;q=0.8". Malformed quality
    values count as 1.0.

    Args:
        header: The Accept-Language header value.

    Returns:
        Language tags, highest quality first.
    """
    if not header:
        return []

    preferences = []
    for part in header.split(","):
        lang_range = part.split(";")[0].strip()
        if not lang_range:
            continue
        quality = 1.0

        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0

        preferences.append((lang_range, quality))

    # sorted() is stable, equal qualities keep header order
    return [lang for lang, _ in sorted(preferences, key=lambda x: x[1], reverse=True)]


def preferred_language_from_header(
    supported: Optional[Iterable[str]] = None,
    fallback: str = DEFAULT_LANGUAGE,
) -> Computed:
    """Build a default language provider from the Accept-Language header.

    The first header language (by quality) whose language part is supported
    wins. Without a match the application's ``preferred_language`` state is
    used, then ``fallback``.

    Args:
        supported: Supported two-letter codes. Any valid code when None.
        fallback: Language used when nothing else matches.

    Returns:
        Computed provider for LanguageResolver.default_language.
    """
    supported_codes = {code.lower() for code in supported} if supported else None

    def accessor(request: Any) -> str:
        for tag in parse_accept_language(request.headers.get("accept-language")):
            language = normalize_language(tag.split("-")[0])
            if language and (supported_codes is None or language in supported_codes):
                return language
        return application_language(request, fallback)

    return Computed(accessor)


def application_language(
    request: Any, fallback: Optional[str] = DEFAULT_LANGUAGE
) -> Optional[str]:
    """Return ``app.state.preferred_language`` of the request's application.

    Args:
        request: Current request.
        fallback: Language returned when the state has no valid code.

    Returns:
        Lowercase language code from the application state, or fallback.
    """
    state = getattr(request.scope.get("app"), "state", None)
    return normalize_language(getattr(state, "preferred_language", None)) or fallback
