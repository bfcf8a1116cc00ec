"""Language detection adapters.

The resolver consumes detection as a black box: any object with a
``detect(text)`` method returning a DetectionResult (or an awaitable of
one) can be plugged in.
"""

from typing import Awaitable, Protocol, Union

from langdetect import DetectorFactory
from langdetect import detect as langdetect_detect
from langdetect.lang_detect_exception import LangDetectException

from infrastructure.i18n.models import DetectionResult
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# langdetect is probabilistic, a fixed seed makes results repeatable
DetectorFactory.seed = 0


class LanguageDetector(Protocol):
    """Best-effort classifier from text to an ISO-639-1 code."""

    def detect(
        self, text: str
    ) -> Union[DetectionResult, Awaitable[DetectionResult]]: ...


class LangdetectDetector:
    """LanguageDetector backed by the langdetect library.

    Codes langdetect reports with a region (e.g. "zh-cn") are returned
    unchanged; the resolver rejects them as invalid two-letter codes.
    """

    def detect(self, text: str) -> DetectionResult:
        """Detect the language of a text.

        Args:
            text: Arbitrary UTF-8 text.

        Returns:
            DetectionResult with the detected code, or None if unknown.
        """
        if not isinstance(text, str) or not text.strip():
            return DetectionResult()
        try:
            language = langdetect_detect(text)
        except LangDetectException as e:
            logger.debug("language_detection_failed", error=str(e))
            return DetectionResult()
        if language == "unknown":
            return DetectionResult()
        return DetectionResult(language=language)
