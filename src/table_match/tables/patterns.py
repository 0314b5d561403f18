"""CSS selectors for the structural parts of a rendered table.

Fixed selectors are module constants.  Selectors that depend on the marker
vocabulary are built from a TableMarkers instance.  Every selector is
evaluated relative to the table (or row) element, hence the ``:scope``
anchors that keep nested tables from leaking into the outer one.
"""

from table_match.tables.schema import TableMarkers

# ─── Fixed Selectors ──────────────────────────────────────────────────────────

# Candidate elements for free-text table lookup
TABLE_SELECTOR = "table"

# The table's own caption (not one belonging to a nested table)
CAPTION_SELECTOR = ":scope > caption"

# Header cells of the table's own thead, in document order
HEADER_CELL_SELECTOR = ":scope > thead th"

# Data cells that belong directly to a row
DATA_CELL_SELECTOR = ":scope > td"


# ─── Marker-Derived Selectors ─────────────────────────────────────────────────


def body_selector(markers: TableMarkers) -> str:
    """Body sections of the table that are not marked as 'contents'."""
    return f":scope > tbody:not(.{markers.contents_class})"


def row_selector(markers: TableMarkers, exclude_accordion: bool = True) -> str:
    """Data rows within a body section, optionally skipping rows nested in accordion content."""
    selector = f"tr{markers.data_row}"
    if exclude_accordion:
        selector += f":not([{markers.accordion_attribute}] table tr)"
    return selector


def id_selector(element_id: str) -> str:
    """Attribute selector for an exact id match, safe for ids that are not CSS identifiers."""
    escaped = element_id.replace("\\", "\\\\").replace('"', '\\"')
    return f'[id="{escaped}"]'
