"""Resolve a table identifier to exactly one element on the page.

An id identifier is looked up by exact id attribute.  A free-text identifier
matches ``table`` elements by id, aria-label, or caption text.  The two
strategies never fall back to each other.
"""

import logging

from table_match.document.protocol import Element, QueryableDocument
from table_match.errors import AmbiguousTable, TableNotFound
from table_match.tables.patterns import CAPTION_SELECTOR, TABLE_SELECTOR
from table_match.tables.schema import TableIdentifier

logger = logging.getLogger(__name__)


def _matches_locator(table: Element, locator: str) -> bool:
    """Return True if the table's id, aria-label, or caption matches the free-text locator."""
    if table.attribute("id") == locator or table.attribute("aria-label") == locator:
        return True
    # Caption matching is partial: "Users" finds <caption>Active Users</caption>
    return any(locator in caption.text() for caption in table.find_all(CAPTION_SELECTOR))


def find_tables(document: QueryableDocument, identifier: TableIdentifier) -> list[Element]:
    """Return every element matching *identifier* (zero, one, or many)."""
    if identifier.is_id:
        return document.find_by_id(identifier.id)
    return [table for table in document.find_all(TABLE_SELECTOR) if _matches_locator(table, identifier.text)]


def resolve_table(document: QueryableDocument, identifier: TableIdentifier) -> Element:
    """Return the single element for *identifier*; raise TableNotFound / AmbiguousTable otherwise."""
    matches = find_tables(document, identifier)
    if not matches:
        raise TableNotFound(str(identifier))
    if len(matches) > 1:
        logger.debug("Identifier %s matched %d elements", identifier, len(matches))
        raise AmbiguousTable(str(identifier), len(matches))
    return matches[0]
