"""Unit tests for the langdetect detection adapter."""

from unittest.mock import patch

import pytest
from langdetect.lang_detect_exception import LangDetectException

from infrastructure.i18n import DetectionResult, LangdetectDetector


@pytest.mark.unit
class TestLangdetectDetector:
    """Tests for LangdetectDetector."""

    @patch("infrastructure.i18n.detection.langdetect_detect")
    def test_detect_returns_language(self, mock_detect):
        """Test the detected code is wrapped in a DetectionResult."""
        mock_detect.return_value = "de"

        result = LangdetectDetector().detect("Hallo Welt, wie geht es dir?")

        assert result == DetectionResult(language="de")
        mock_detect.assert_called_once_with("Hallo Welt, wie geht es dir?")

    @patch("infrastructure.i18n.detection.langdetect_detect")
    def test_detect_failure_returns_empty_result(self, mock_detect):
        """Test detection errors yield no language."""
        mock_detect.side_effect = LangDetectException(0, "No features in text.")

        result = LangdetectDetector().detect("12345")

        assert result.language is None

    @patch("infrastructure.i18n.detection.langdetect_detect")
    def test_unknown_language(self, mock_detect):
        """Test the "unknown" code counts as no language."""
        mock_detect.return_value = "unknown"

        assert LangdetectDetector().detect("???").language is None

    @pytest.mark.parametrize("text", ["", "   ", None, 42])
    @patch("infrastructure.i18n.detection.langdetect_detect")
    def test_blank_input_is_not_detected(self, mock_detect, text):
        """Test blank or non-string input skips detection."""
        assert LangdetectDetector().detect(text) == DetectionResult()
        mock_detect.assert_not_called()
