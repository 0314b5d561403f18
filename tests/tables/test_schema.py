"""Unit tests for the Pydantic models: identifiers, assertion validation, result messages."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from table_match.tables.schema import MatchMode, MatchResult, TableAssertion, TableIdentifier, TableMarkers

# ===========================================================================
# TableIdentifier tests
# ===========================================================================


class TestTableIdentifier:

    def test_by_id(self):
        identifier = TableIdentifier.by_id("users")
        assert identifier.is_id
        assert str(identifier) == "users"

    def test_by_text(self):
        identifier = TableIdentifier.by_text("My Table")
        assert not identifier.is_id
        assert str(identifier) == "My Table"

    def test_coerce_string_is_text(self):
        assert TableIdentifier.coerce("My Table") == TableIdentifier.by_text("My Table")

    def test_coerce_passes_identifier_through(self):
        identifier = TableIdentifier.by_id("users")
        assert TableIdentifier.coerce(identifier) is identifier

    def test_neither_kind_rejected(self):
        with pytest.raises(ValidationError):
            TableIdentifier()

    def test_both_kinds_rejected(self):
        with pytest.raises(ValidationError):
            TableIdentifier(id="users", text="Users")

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            TableIdentifier.by_id("")

    def test_frozen(self):
        identifier = TableIdentifier.by_id("users")
        with pytest.raises(ValidationError):
            identifier.id = "other"


# ===========================================================================
# TableAssertion tests
# ===========================================================================


class TestTableAssertion:

    def test_expected_headers_from_first_row(self):
        assertion = TableAssertion(
            identifier=TableIdentifier.by_id("users"),
            mode=MatchMode.INCLUDE,
            expected=({"Name": "A", "Email": "a@x"}, {"Name": "B", "Email": "b@x"}),
        )
        assert assertion.expected_headers == ["Name", "Email"]
        assert assertion.markers == TableMarkers()
        assert assertion.strict_headers is False

    def test_inconsistent_keys_rejected(self):
        with pytest.raises(ValidationError, match="all rows must have the same headers"):
            TableAssertion(
                identifier=TableIdentifier.by_id("users"),
                mode=MatchMode.EXACT,
                expected=({"Name": "A"}, {"Email": "b@x"}),
            )

    def test_reordered_keys_accepted(self):
        assertion = TableAssertion(
            identifier=TableIdentifier.by_id("users"),
            mode=MatchMode.EXACT,
            expected=({"Name": "A", "Email": "a@x"}, {"Email": "b@x", "Name": "B"}),
        )
        assert assertion.expected_headers == ["Name", "Email"]

    def test_empty_expected_rejected(self):
        with pytest.raises(ValidationError):
            TableAssertion(identifier=TableIdentifier.by_id("users"), mode=MatchMode.EXACT, expected=())

    def test_mode_from_string(self):
        assertion = TableAssertion(identifier=TableIdentifier.by_id("t"), mode="exact", expected=({"A": "1"},))
        assert assertion.mode is MatchMode.EXACT


# ===========================================================================
# MatchResult message tests
# ===========================================================================


class TestMatchResultMessage:

    def test_not_found(self):
        result = MatchResult(passed=False, identifier=TableIdentifier.by_id("users"), mode=MatchMode.INCLUDE, table_found=False)
        assert result.message == 'unable to find table "users" on page'

    def test_not_found_with_detail(self):
        result = MatchResult(
            passed=False,
            identifier=TableIdentifier.by_text("Report"),
            mode=MatchMode.INCLUDE,
            table_found=False,
            failures=["ambiguous match for table Report, found 2 elements"],
        )
        assert result.message.splitlines() == [
            'unable to find table "Report" on page',
            "ambiguous match for table Report, found 2 elements",
        ]

    def test_found_lists_headers_and_failures(self):
        result = MatchResult(
            passed=False,
            identifier=TableIdentifier.by_id("users"),
            mode=MatchMode.EXACT,
            table_found=True,
            headers=["Name", "Email"],
            failures=["row 1: first", "row 2: second"],
        )
        assert result.message.splitlines() == [
            'found table "users" on page, with headers:',
            "['Name', 'Email']",
            "but rows did not match expected values:",
            "row 1: first",
            "row 2: second",
        ]
