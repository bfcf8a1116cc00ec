"""Unit tests for log processors and redaction."""

import pytest

from infrastructure.logging import (
    SENSITIVE_PATTERNS,
    add_app_info,
    mask_sensitive_data,
    redact,
    truncate_large_values,
)
from infrastructure.logging.formatters import DEFAULT_MASK


@pytest.mark.unit
class TestAddAppInfo:
    """Test suite for add_app_info processor."""

    def test_adds_name_and_version(self):
        """App name and version are added to every entry."""
        processor = add_app_info("response-renderer", "abc123")

        result = processor(None, "info", {"event": "test"})

        assert result == {
            "event": "test",
            "app_name": "response-renderer",
            "app_version": "abc123",
        }


@pytest.mark.unit
class TestRedact:
    """Test suite for redact."""

    def test_masks_sensitive_headers(self):
        """Sensitive header values are masked."""
        headers = {"authorization": "Bearer x", "accept": "text/html", "Cookie": "a=b"}

        assert redact(headers) == {
            "authorization": DEFAULT_MASK,
            "accept": "text/html",
            "Cookie": DEFAULT_MASK,
        }

    def test_walks_nested_values(self):
        """Nested mappings and lists are sanitized."""
        value = {"query": {"api_key": "k", "page": "2"}, "items": [{"password": "p"}]}

        assert redact(value) == {
            "query": {"api_key": DEFAULT_MASK, "page": "2"},
            "items": [{"password": DEFAULT_MASK}],
        }

    def test_keeps_none_values(self):
        """None values are not masked."""
        assert redact({"token": None}) == {"token": None}

    def test_does_not_mutate_input(self):
        """The input mapping is copied."""
        value = {"secret": "s"}
        redact(value)

        assert value == {"secret": "s"}

    def test_default_patterns(self):
        """Common credential names are sensitive by default."""
        assert {"password", "token", "authorization", "cookie"} <= SENSITIVE_PATTERNS


@pytest.mark.unit
class TestMaskSensitiveData:
    """Test suite for mask_sensitive_data processor."""

    def test_masks_event_dict(self):
        """Sensitive event keys are masked."""
        processor = mask_sensitive_data()

        result = processor(None, "info", {"event": "request_received", "token": "t"})

        assert result == {"event": "request_received", "token": DEFAULT_MASK}

    def test_additional_patterns_and_mask(self):
        """Extra patterns and a custom mask are applied."""
        processor = mask_sensitive_data(
            mask_value="***", additional_patterns=frozenset({"session"})
        )

        result = processor(None, "info", {"session_id": "s1", "view": "default.html"})

        assert result == {"session_id": "***", "view": "default.html"}


@pytest.mark.unit
class TestTruncateLargeValues:
    """Test suite for truncate_large_values processor."""

    def test_truncates_long_strings(self):
        """Strings over the limit are cut and annotated."""
        processor = truncate_large_values(max_length=10)

        result = processor(None, "debug", {"body": "x" * 25})

        assert result["body"] == "x" * 10 + "...[truncated, 25 chars total]"

    def test_keeps_short_values(self):
        """Short strings and non-strings are unchanged."""
        processor = truncate_large_values(max_length=10)

        result = processor(None, "debug", {"body": "short", "status": 404})

        assert result == {"body": "short", "status": 404}
