"""Rendering models.

Defines the computed response context, the in-flight response state and
the typed outcome of render argument validation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from starlette.responses import Response

# Rendered context keys come first, in this order
CONTEXT_FIELDS = ("status", "title", "message", "language")

# Keys a caller context may hold without triggering default lookup
COMPLETE_CONTEXT_FIELDS = frozenset({"status", "message", "language"})


@dataclass
class ResponseContext:
    """Computed default context of a response.

    Attributes:
        status: HTTP status code.
        title: Localized title.
        message: Localized message.
        language: Lowercase two-letter language code.
    """

    status: int
    title: str
    message: str
    language: str

    def as_dict(self) -> Dict[str, Any]:
        """Return the context as a mapping in rendering order."""
        return {name: getattr(self, name) for name in CONTEXT_FIELDS}


def order_context(context: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy a context with the known fields first and extras after.

    Args:
        context: Context mapping.

    Returns:
        New dict ordered status, title, message, language, then extras
        in their original order.
    """
    ordered = {name: context[name] for name in CONTEXT_FIELDS if name in context}
    ordered.update(
        (key, value) for key, value in context.items() if key not in ordered
    )
    return ordered


@dataclass
class ResponseState:
    """State of the response being built for one request.

    Attributes:
        status_code: HTTP status code sent with the response.
        status_message: Optional status line text, used as default message.
        headers_sent: Whether a response was already produced.
        response: The produced response, once sent.
    """

    status_code: int = 200
    status_message: Optional[str] = None
    headers_sent: bool = False
    response: Optional[Response] = None

    def finalize(self, response: Response) -> Response:
        """Record the produced response; only the first one counts."""
        if not self.headers_sent:
            self.headers_sent = True
            self.response = response
        return self.response


@dataclass
class RenderPlan:
    """Finalized render arguments.

    Attributes:
        view: View template name.
        context: Context mapping in rendering order.
        recovered: Whether the defaults replaced an invalid view or context.
    """

    view: str
    context: Dict[str, Any]
    recovered: bool = False

    @property
    def language(self) -> Optional[str]:
        """Language of the context, if it has one."""
        language = self.context.get("language")
        return language if isinstance(language, str) else None


@dataclass
class ValidationResult:
    """Outcome of render argument validation.

    Attributes:
        errors: Human-friendly descriptions of every violation.
    """

    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True if no violation was found."""
        return not self.errors

    @classmethod
    def success(cls) -> "ValidationResult":
        """Create a result without violations."""
        return cls()

    @classmethod
    def failure(cls, *errors: str) -> "ValidationResult":
        """Create a result listing violations."""
        return cls(errors=list(errors))
