"""Header and data-row extraction from a resolved table element.

Headers come from the table's own ``thead``.  Data rows must sit in a body
section that is not marked as 'contents', carry the data-row marker, and (by
default) not live inside accordion content nested in another row.  Cell text
is taken as the page renders it: no trimming or case-folding happens here.
"""

import logging

from table_match.config import DEFAULT_MARKERS
from table_match.document.protocol import Element
from table_match.tables.patterns import DATA_CELL_SELECTOR, HEADER_CELL_SELECTOR, body_selector, row_selector
from table_match.tables.schema import TableContent, TableMarkers

logger = logging.getLogger(__name__)


# ─── Headers ─────────────────────────────────────────────────────────────────


def header_label(cell: Element, markers: TableMarkers = DEFAULT_MARKERS) -> str:
    """Return the label for one header cell.

    A cell with its own text uses its full visible text.  A cell whose label is
    wrapped in child elements reads the nested header-text marker element when
    there is one (so sort buttons and icons next to it are ignored).
    """
    if cell.own_text():
        return cell.text()
    labelled = cell.find_all(markers.header_text)
    if labelled:
        return labelled[0].text()
    return cell.text()


def extract_headers(table: Element, markers: TableMarkers = DEFAULT_MARKERS) -> list[str]:
    """Return one label per header cell, in document order (duplicates kept)."""
    return [header_label(cell, markers) for cell in table.find_all(HEADER_CELL_SELECTOR)]


# ─── Rows ────────────────────────────────────────────────────────────────────


def _qualifying_rows(table: Element, markers: TableMarkers, exclude_accordion: bool) -> list[Element]:
    """Collect marked data rows from every non-'contents' body section."""
    rows: list[Element] = []
    selector = row_selector(markers, exclude_accordion=exclude_accordion)
    for body in table.find_all(body_selector(markers)):
        rows.extend(body.find_all(selector))
    return rows


def extract_rows(table: Element, markers: TableMarkers = DEFAULT_MARKERS) -> list[list[str]]:
    """Return the cell texts of every qualifying data row, in document order.

    If excluding accordion-nested rows would leave nothing, the nested rows are
    used instead so a table made only of expandable content still matches.
    """
    rows = _qualifying_rows(table, markers, exclude_accordion=True)
    if not rows:
        rows = _qualifying_rows(table, markers, exclude_accordion=False)
        if rows:
            logger.debug("No top-level data rows; falling back to %d accordion-nested rows", len(rows))
    return [[cell.text() for cell in row.find_all(DATA_CELL_SELECTOR)] for row in rows]


def extract_table(table: Element, markers: TableMarkers = DEFAULT_MARKERS) -> TableContent:
    """Read headers and qualifying rows in one pass."""
    return TableContent(headers=extract_headers(table, markers), rows=extract_rows(table, markers))
