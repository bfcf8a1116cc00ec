"""Shared fixtures for the test suite."""

import pytest

from infrastructure.rendering import ResponseState
from tests.factories.i18n import StubDetector, make_dictionary
from tests.factories.rendering import StubViewRenderer


@pytest.fixture
def dictionary():
    """Isolated TranslationDictionary with the default response strings."""
    return make_dictionary()


@pytest.fixture
def detector():
    """Language detector that detects nothing."""
    return StubDetector()


@pytest.fixture
def view_renderer():
    """View renderer stub recording its calls."""
    return StubViewRenderer()


@pytest.fixture
def state():
    """Fresh in-flight response state."""
    return ResponseState()
