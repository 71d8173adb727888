"""DOM selection utilities for HTML parsing.

This module provides the minimal query interface the form extractor needs
(find descendants, read attributes, read text) and its implementation over
``lxml.html`` elements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from lxml import etree, html

if TYPE_CHECKING:
    from lxml.html import HtmlElement


@runtime_checkable
class Selection(Protocol):
    """A single element of a parsed document."""

    @property
    def tag(self) -> str: ...

    def find(self, path: str) -> list[Selection]: ...

    def attr(self, name: str) -> str | None: ...

    def text(self) -> str: ...


class HtmlSelection:
    """``Selection`` over an lxml HTML element.

    Paths passed to ``find`` are XPath expressions evaluated relative to the
    element, e.g. ``.//input | .//button``. Results come back in document
    order; non-element results (text nodes, attribute values) are skipped.
    """

    def __init__(self, element: HtmlElement) -> None:
        self.element = element

    @property
    def tag(self) -> str:
        tag = self.element.tag
        if not isinstance(tag, str):
            return ""
        return tag.lower()

    def find(self, path: str) -> list[HtmlSelection]:
        result = self.element.xpath(path)
        if not isinstance(result, list):
            return []
        return [HtmlSelection(el) for el in result if isinstance(el, etree._Element)]

    def attr(self, name: str) -> str | None:
        if name not in self.element.attrib:
            return None
        # valueless attributes such as `checked` read as ""
        return self.element.get(name) or ""

    def text(self) -> str:
        return self.element.text_content()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HtmlSelection):
            return NotImplemented
        return self.element is other.element

    def __hash__(self) -> int:
        return hash(self.element)

    def __repr__(self) -> str:
        return "<HtmlSelection(%s)>" % self.tag


def parse_html(content: str | bytes | None) -> HtmlElement | None:
    """Parse an HTML document.

    Returns the document root, or ``None`` when there is nothing to parse.
    """
    if content is None or not len(content):
        return None
    try:
        return html.fromstring(content)
    except ValueError as ve:
        if "encoding declaration" in str(ve) and isinstance(content, str):
            return html.fromstring(content.encode("utf-8"))
    except (etree.ParserError, etree.ParseError):
        pass
    return None
