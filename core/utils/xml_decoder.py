"""Decode XML documents into plain dictionaries.

The shape mirrors what the feed consumers expect: the root element is
dropped, tag names lose their namespace prefix and are lower-cased, a tag
that appears once is a scalar while repeated tags become lists, attributes
are ignored, and text is trimmed with empty elements decoded as None.
"""

import logging
from typing import Any, Callable, Iterable

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup
from lxml import etree

from core.exceptions import DecodeError

logger = logging.getLogger(__name__)

ValueProcessor = Callable[[Any], Any]

STRICT_PARSER = etree.XMLParser(recover=False, resolve_entities=False)


def _normalize_tag_name(name: str) -> str:
    return name.rsplit(":", 1)[-1].lower()


def _decode_element(
    element: Tag, value_processors: Iterable[ValueProcessor]
) -> Any:
    children = element.find_all(True, recursive=False)

    if not children:
        value = element.get_text().strip() or None
        if value is None:
            return None
        for processor in value_processors:
            value = processor(value)
        return value

    decoded: dict[str, Any] = {}
    for child in children:
        key = _normalize_tag_name(child.name)
        value = _decode_element(child, value_processors)
        if key not in decoded:
            decoded[key] = value
        elif isinstance(decoded[key], list):
            decoded[key].append(value)
        else:
            decoded[key] = [decoded[key], value]
    return decoded


def decode_xml(
    text: str | bytes, value_processors: Iterable[ValueProcessor] = ()
) -> dict[str, Any]:
    """Decode an XML document into nested dictionaries.

    Args:
        text: XML document.
        value_processors: Callables applied in order to every leaf value.

    Returns:
        Dictionary for the children of the root element.

    Raises:
        DecodeError: If the document is not well-formed or has no root
            element with children.
    """
    value_processors = list(value_processors)
    data = text.encode("utf-8") if isinstance(text, str) else text

    # Strict pass; the bs4 builder below recovers from broken markup
    try:
        etree.fromstring(data, STRICT_PARSER)
    except etree.XMLSyntaxError as e:
        raise DecodeError(f"Invalid XML document: {e}") from e

    try:
        soup = BeautifulSoup(data, features="xml")
    except (ParserRejectedMarkup, etree.LxmlError) as e:
        raise DecodeError(f"Invalid XML document: {e}") from e

    root = soup.find(True)
    if root is None:
        raise DecodeError("XML document has no root element")

    decoded = _decode_element(root, value_processors)
    if not isinstance(decoded, dict):
        raise DecodeError(
            f"XML root element <{root.name}> has no child elements"
        )

    logger.debug(f"Decoded XML document with root <{root.name}>")
    return decoded
