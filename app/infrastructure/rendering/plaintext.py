"""Plain-text conversion of rendered contexts."""

import re
from html.parser import HTMLParser
from typing import Any, Mapping

import yaml

_WHITESPACE = re.compile(r"\s+")


class _TextExtractor(HTMLParser):
    """Collects text content and notes whether any element was seen."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.has_elements = False
        self.parts: list[str] = []

    def handle_starttag(self, tag, attrs):
        self.has_elements = True

    def handle_startendtag(self, tag, attrs):
        self.has_elements = True

    def handle_data(self, data):
        self.parts.append(data)


def to_plaintext(value: Any) -> Any:
    """Strip markup from a message.

    Only values containing element nodes are converted; their text content
    is returned with whitespace runs collapsed. Anything else is returned
    unchanged.

    Args:
        value: Message, possibly HTML.

    Returns:
        Plain text, or the original value.

    Example:
        >>> to_plaintext("<p>Nothing <b>here</b></p>")
        'Nothing here'
    """
    if not isinstance(value, str):
        return value
    parser = _TextExtractor()
    parser.feed(value)
    parser.close()
    if parser.has_elements:
        text = _WHITESPACE.sub(" ", "".join(parser.parts)).strip()
        if text:
            return text
    return value


def dump_plaintext(context: Mapping[str, Any]) -> str:
    """Serialize a context as a block-style YAML document.

    Key order is preserved.

    Args:
        context: Context mapping.

    Returns:
        YAML text.
    """
    return yaml.safe_dump(
        dict(context),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        indent=4,
        width=float("inf"),
    )
