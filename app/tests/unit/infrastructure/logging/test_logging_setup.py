"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    _is_test_environment,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        """configure_logging returns a logger with the level methods."""
        result = configure_logging(settings=mock_settings)

        for method in ("debug", "info", "warning", "error"):
            assert hasattr(result, method)

    def test_configure_logging_accepts_overrides(self, mock_settings):
        """configure_logging accepts log_level and is_production overrides."""
        assert configure_logging(settings=mock_settings, log_level="DEBUG") is not None
        assert configure_logging(settings=mock_settings, is_production=True) is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, the root logger level suppresses all output."""
        configure_logging(settings=mock_settings)

        assert logging.getLogger().level > logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_binds_calling_module(self):
        """Module loggers carry component and module path of their module."""
        from infrastructure.i18n import dictionary

        context = dictionary.logger._context
        assert context["module_path"] == "infrastructure.i18n.dictionary"
        assert context["component"] == "dictionary"

    def test_binds_component_for_caller(self):
        """A logger requested from any frame has a component."""
        assert "component" in get_module_logger()._context

    def test_module_loggers_are_independent(self):
        """Binding on one module logger does not leak into another."""
        first = get_module_logger().bind(request="a")
        second = get_module_logger()

        assert "request" in first._context
        assert "request" not in second._context
