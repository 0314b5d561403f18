"""Unit tests for the marker-derived selector builders."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from table_match.tables.patterns import body_selector, id_selector, row_selector
from table_match.tables.schema import TableMarkers


class TestSelectors:

    def test_body_selector_default(self):
        assert body_selector(TableMarkers()) == ":scope > tbody:not(.contents)"

    def test_row_selector_excludes_accordion(self):
        assert row_selector(TableMarkers()) == "tr[data-table-target='row']:not([data-accordion-content] table tr)"

    def test_row_selector_loose(self):
        assert row_selector(TableMarkers(), exclude_accordion=False) == "tr[data-table-target='row']"

    def test_custom_markers(self):
        markers = TableMarkers(data_row="[data-row]", contents_class="skip", accordion_attribute="data-details")
        assert body_selector(markers) == ":scope > tbody:not(.skip)"
        assert row_selector(markers) == "tr[data-row]:not([data-details] table tr)"

    def test_id_selector_plain(self):
        assert id_selector("users") == '[id="users"]'

    def test_id_selector_escapes(self):
        assert id_selector('a"b\\c') == '[id="a\\"b\\\\c"]'
