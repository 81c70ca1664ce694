"""CSS-selector based fragment extraction.

A ``DocumentScanner`` walks every element matching a selector and reports it
to a capture visitor through two hooks: ``on_element`` once per matched
element, then ``on_text`` for each text node beneath it in document order.
What gets captured depends on the visitor, chosen once per call:

* ``AttributeCapture`` keeps the last non-empty value of one attribute.
* ``TextCapture`` appends all text of all matched elements.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag
from soupsieve import SelectorSyntaxError

from pricewatch.core.errors import ConfigurationError
from pricewatch.extraction.models import MAX_FRAGMENT_LENGTH

logger = logging.getLogger(__name__)


@dataclass
class CaptureState:
    """Accumulator threaded through a single scan."""

    parts: list[str] = field(default_factory=list)
    value: str = ""

    @property
    def text(self) -> str:
        return self.value or "".join(self.parts)


class CaptureVisitor(Protocol):
    def on_element(self, element: Tag, state: CaptureState) -> None: ...

    def on_text(self, text: str, state: CaptureState) -> None: ...


class AttributeCapture:
    """Capture one attribute; later matches overwrite earlier ones."""

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute

    def on_element(self, element: Tag, state: CaptureState) -> None:
        value = element.get(self.attribute)
        if isinstance(value, list):
            # multi-valued attributes such as class
            value = " ".join(value)
        if value:
            state.value = value

    def on_text(self, text: str, state: CaptureState) -> None:
        return None


class TextCapture:
    """Capture the text content of every matched element."""

    def on_element(self, element: Tag, state: CaptureState) -> None:
        return None

    def on_text(self, text: str, state: CaptureState) -> None:
        state.parts.append(text)


def select_capture(attribute: str | None) -> CaptureVisitor:
    if attribute:
        return AttributeCapture(attribute)
    return TextCapture()


class DocumentScanner:
    """Drive a capture visitor over the elements matching a selector."""

    def __init__(self, features: str = "html.parser") -> None:
        self.features = features

    def scan(
        self,
        html: str,
        selector: str,
        visitor: CaptureVisitor,
        state: CaptureState,
    ) -> None:
        soup = BeautifulSoup(html, self.features)
        try:
            matches = soup.select(selector)
        except (SelectorSyntaxError, NotImplementedError) as exc:
            # soupsieve rejects pseudo-elements such as ::before with NotImplementedError
            raise ConfigurationError(f"invalid selector {selector!r}: {exc}") from exc

        logger.debug("Selector %r matched %d element(s)", selector, len(matches))

        for element in matches:
            visitor.on_element(element, state)
            for node in element.descendants:
                # comments, CDATA, doctypes and processing instructions carry no page text
                if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
                    visitor.on_text(str(node), state)


async def extract_by_selector(
    html: str,
    selector: str,
    attribute: str | None = None,
    scanner: DocumentScanner | None = None,
) -> str:
    """Return the text (or ``attribute`` value) captured for ``selector``.

    An empty string means nothing matched. The scan runs in a worker thread
    and is awaited in full before the fragment is returned.
    """
    visitor = select_capture(attribute)
    state = CaptureState()
    await asyncio.to_thread((scanner or DocumentScanner()).scan, html, selector, visitor, state)
    return state.text[:MAX_FRAGMENT_LENGTH]


__all__ = [
    "AttributeCapture",
    "CaptureState",
    "CaptureVisitor",
    "DocumentScanner",
    "TextCapture",
    "extract_by_selector",
    "select_capture",
]
