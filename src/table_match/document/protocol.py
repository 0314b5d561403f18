"""The page-query capability the table engine depends on.

The engine never imports a page-automation library directly.  Anything that
can look elements up by id or CSS selector and read their visible text can be
adapted to these protocols (see soup.py and browser.py).
"""

from typing import Protocol


class Element(Protocol):
    """A single element on the page."""

    def find_all(self, selector: str) -> list["Element"]:
        """Return every descendant matching *selector* (``:scope`` refers to this element)."""

    def text(self) -> str:
        """Visible text of the element, whitespace collapsed the way the page renders it."""

    def own_text(self) -> str:
        """Text of the element's direct text nodes only, ignoring child elements."""

    def attribute(self, name: str) -> str | None:
        """Attribute value, or None if the attribute is absent."""


class QueryableDocument(Protocol):
    """A rendered page that can be queried for elements."""

    def find_by_id(self, element_id: str) -> list[Element]:
        """Return every element whose id attribute equals *element_id* exactly."""

    def find_all(self, selector: str) -> list[Element]:
        """Return every element in the document matching *selector*."""


def collapse_whitespace(value: str) -> str:
    """Collapse runs of whitespace to single spaces and strip the ends."""
    return " ".join(value.split())
