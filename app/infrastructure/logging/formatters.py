"""Custom log formatters for structured logging.

This module provides processors that can be plugged into the structlog
pipeline to enrich or sanitize log output.

Usage:
    from infrastructure.logging.formatters import add_app_info, mask_sensitive_data
"""

from typing import Any, Mapping

# Sensitive field patterns that should be masked in logs
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "cookie",
        "jwt",
        "bearer",
    }
)

DEFAULT_MASK = "***REDACTED***"


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Create a processor that adds application info to log entries.

    Args:
        app_name: Name of the application.
        app_version: Version string for the application.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


def _is_sensitive(key: str, patterns: frozenset[str]) -> bool:
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in patterns)


def redact(
    value: Any,
    mask_value: str = DEFAULT_MASK,
    patterns: frozenset[str] = SENSITIVE_PATTERNS,
) -> Any:
    """Recursively mask sensitive values of a mapping.

    Request headers and query parameters are logged as nested mappings,
    so the check walks into nested mappings and lists.

    Args:
        value: Value to sanitize.
        mask_value: Replacement for sensitive values.
        patterns: Key fragments considered sensitive (case-insensitive).

    Returns:
        A sanitized copy of the value.
    """
    if isinstance(value, Mapping):
        return {
            key: (
                mask_value
                if isinstance(key, str)
                and _is_sensitive(key, patterns)
                and item is not None
                else redact(item, mask_value, patterns)
            )
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact(item, mask_value, patterns) for item in value]
    return value


def mask_sensitive_data(
    mask_value: str = DEFAULT_MASK,
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that masks sensitive data in log entries.

    Automatically detects and masks values for keys that contain
    sensitive patterns (case-insensitive matching), including keys of
    nested mappings such as logged request headers.

    Args:
        mask_value: The string to replace sensitive values with.
        additional_patterns: Extra patterns to consider sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        return redact(event_dict, mask_value, patterns)

    return processor


def truncate_large_values(max_length: int = 500):
    """Create a processor that truncates overly large string values.

    Rendered HTML bodies end up in debug logs, this keeps them bounded.

    Args:
        max_length: Maximum string length before truncation.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
