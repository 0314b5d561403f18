"""Playwright adapter for live browser pages.

Wraps ``playwright.sync_api`` Locators.  Lookups use ``Locator.all()``, which
snapshots the current matches without auto-waiting: waiting for the page to
settle is the job of the settle loop, not of individual queries.  Reads pass a
short ``timeout`` so a row detached by a re-render fails fast, and any
Playwright error is re-raised as StaleElement for the settle loop to retry.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from table_match.config import QUERY_TIMEOUT
from table_match.document.protocol import collapse_whitespace
from table_match.errors import StaleElement
from table_match.tables.patterns import id_selector

logger = logging.getLogger(__name__)

# Concatenate only the element's direct text nodes
_OWN_TEXT_JS = """\
el => Array.from(el.childNodes)
    .filter(node => node.nodeType === Node.TEXT_NODE)
    .map(node => node.textContent)
    .join('')
"""


@contextmanager
def _stale_on_error() -> Iterator[None]:
    """Translate Playwright errors (including TimeoutError) into StaleElement."""
    try:
        yield
    except PlaywrightError as exc:
        logger.debug("Browser query failed: %s", exc.message)
        raise StaleElement(exc.message) from exc


class PlaywrightElement:
    """Element adapter around a Playwright Locator that resolves to one element."""

    def __init__(self, locator: Locator, timeout: float = QUERY_TIMEOUT):
        self.locator = locator
        self.timeout = timeout

    def find_all(self, selector: str) -> list["PlaywrightElement"]:
        with _stale_on_error():
            return [PlaywrightElement(found, self.timeout) for found in self.locator.locator(selector).all()]

    def text(self) -> str:
        with _stale_on_error():
            return collapse_whitespace(self.locator.inner_text(timeout=self.timeout))

    def own_text(self) -> str:
        with _stale_on_error():
            return collapse_whitespace(self.locator.evaluate(_OWN_TEXT_JS, timeout=self.timeout))

    def attribute(self, name: str) -> str | None:
        with _stale_on_error():
            return self.locator.get_attribute(name, timeout=self.timeout)


class PlaywrightDocument:
    """QueryableDocument over a Playwright Page."""

    def __init__(self, page: Page, timeout: float = QUERY_TIMEOUT):
        self.page = page
        self.timeout = timeout

    def find_by_id(self, element_id: str) -> list[PlaywrightElement]:
        return self.find_all(id_selector(element_id))

    def find_all(self, selector: str) -> list[PlaywrightElement]:
        with _stale_on_error():
            return [PlaywrightElement(found, self.timeout) for found in self.page.locator(selector).all()]
