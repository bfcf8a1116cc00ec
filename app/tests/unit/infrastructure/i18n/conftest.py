"""Fixtures for i18n tests."""

import pytest


@pytest.fixture
def translations_dir(tmp_path):
    """Directory with two dictionary files."""
    (tmp_path / "greetings.yml").write_text(
        "hello:\n  en: Hello\n  de: Hallo\n", encoding="utf-8"
    )
    (tmp_path / "farewells.yaml").write_text(
        "bye:\n  en: Bye\n  ru: Пока\n", encoding="utf-8"
    )
    return tmp_path
