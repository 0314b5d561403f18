"""BeautifulSoup adapter for static HTML.

Useful for server-rendered responses (test-client bodies, saved fixtures)
where there is no browser.  Selectors go through soupsieve, which supports the
``:scope`` anchors and complex ``:not()`` arguments the table selectors use.

Visible text mirrors what a browser shows: strings inside script/style/etc.
and inside elements hidden via the ``hidden`` attribute or an inline
``display: none`` are skipped, and whitespace is collapsed.
"""

import logging
import re

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from table_match.document.protocol import collapse_whitespace

logger = logging.getLogger(__name__)

# Elements whose text never renders
_INVISIBLE_TAGS = frozenset({"script", "style", "template", "noscript", "head", "title"})

_DISPLAY_NONE_RE = re.compile(r"display\s*:\s*none", re.IGNORECASE)


def _is_hidden(tag: Tag) -> bool:
    """Return True if the tag itself is never rendered."""
    if tag.name in _INVISIBLE_TAGS:
        return True
    if tag.has_attr("hidden"):
        return True
    return bool(_DISPLAY_NONE_RE.search(tag.get("style", "")))


def _visible_strings(tag: Tag) -> list[str]:
    """Collect the rendered text nodes below *tag*, in document order."""
    if _is_hidden(tag):
        return []
    strings: list[str] = []
    for child in tag.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString):
            strings.append(str(child))
        elif isinstance(child, Tag):
            strings.extend(_visible_strings(child))
    return strings


class SoupElement:
    """Element adapter around a bs4 Tag."""

    def __init__(self, tag: Tag):
        self.tag = tag

    def __repr__(self) -> str:
        return f"SoupElement(<{self.tag.name}>)"

    def find_all(self, selector: str) -> list["SoupElement"]:
        return [SoupElement(found) for found in self.tag.select(selector)]

    def text(self) -> str:
        return collapse_whitespace("".join(_visible_strings(self.tag)))

    def own_text(self) -> str:
        direct = [str(child) for child in self.tag.children if isinstance(child, NavigableString) and not isinstance(child, Comment)]
        return collapse_whitespace("".join(direct))

    def attribute(self, name: str) -> str | None:
        value = self.tag.get(name)
        # bs4 splits multi-valued attributes (class, rel, ...) into lists
        if isinstance(value, list):
            return " ".join(value)
        return value


class SoupDocument:
    """QueryableDocument over a parsed HTML string.

    The markup is static, so the settle loop re-reads the same content on every
    attempt; call ``load()`` to swap in freshly fetched HTML.
    """

    def __init__(self, html: str, features: str = "html.parser"):
        self.features = features
        self.soup = BeautifulSoup(html, features)

    def load(self, html: str) -> None:
        """Replace the document content, e.g. after re-fetching a server-rendered page."""
        self.soup = BeautifulSoup(html, self.features)
        logger.debug("Reloaded document (%d characters)", len(html))

    def find_by_id(self, element_id: str) -> list[SoupElement]:
        return [SoupElement(tag) for tag in self.soup.find_all(id=element_id)]

    def find_all(self, selector: str) -> list[SoupElement]:
        return [SoupElement(tag) for tag in self.soup.select(selector)]
