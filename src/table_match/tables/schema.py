"""Pydantic models for table assertions.

TableAssertion is the immutable request built before evaluation starts (the
match_table() builder produces it).  MatchResult is the only object that
outlives an evaluation: headers, rows and matched rows are rebuilt from the
page on every settle-loop attempt.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

ExpectedRow = dict[str, str]
MatchedRow = dict[str, str | None]


class MatchMode(str, Enum):
    """How expected rows are compared against the rows on the page."""

    EXACT = "exact"
    INCLUDE = "include"


class TableMarkers(BaseModel):
    """Markup conventions that separate data rows from structural/decorative ones."""

    model_config = ConfigDict(frozen=True)

    data_row: str = "[data-table-target='row']"
    contents_class: str = "contents"
    accordion_attribute: str = "data-accordion-content"
    header_text: str = "[data-role='header-text']"


class TableIdentifier(BaseModel):
    """Either an element id (exact match) or a free-text locator (caption / label)."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    text: str | None = None

    @model_validator(mode="after")
    def validate_single_kind(self) -> "TableIdentifier":
        """Exactly one of id / text must be set, and it must not be empty."""
        if (self.id is None) == (self.text is None):
            raise ValueError("table identifier needs exactly one of id or text")
        if not (self.id or self.text):
            raise ValueError("table identifier must not be empty")
        return self

    @classmethod
    def by_id(cls, element_id: str) -> "TableIdentifier":
        return cls(id=element_id)

    @classmethod
    def by_text(cls, locator: str) -> "TableIdentifier":
        return cls(text=locator)

    @classmethod
    def coerce(cls, value: "TableIdentifier | str") -> "TableIdentifier":
        """Accept an identifier as-is; treat a bare string as a free-text locator."""
        if isinstance(value, cls):
            return value
        return cls.by_text(value)

    @property
    def is_id(self) -> bool:
        return self.id is not None

    def __str__(self) -> str:
        return self.id if self.id is not None else self.text


class TableAssertion(BaseModel):
    """An immutable 'does this table contain/equal these rows' request."""

    model_config = ConfigDict(frozen=True)

    identifier: TableIdentifier
    mode: MatchMode
    expected: tuple[ExpectedRow, ...]
    markers: TableMarkers = TableMarkers()
    strict_headers: bool = False

    @model_validator(mode="after")
    def validate_expected_headers(self) -> "TableAssertion":
        """Every expected row must use the same set of header labels (order may differ)."""
        if not self.expected:
            raise ValueError("at least one expected row is required")
        headers = set(self.expected[0])
        for i, row in enumerate(self.expected):
            if set(row) != headers:
                raise ValueError(f"all rows must have the same headers (row {i} has {sorted(row)}, expected {sorted(headers)})")
        return self

    @property
    def expected_headers(self) -> list[str]:
        return list(self.expected[0])


class TableContent(BaseModel):
    """Header labels and qualifying data rows read from one table, in document order."""

    headers: list[str]
    rows: list[list[str]]


class MatchResult(BaseModel):
    """Final outcome of a table assertion, handed to the reporting layer."""

    passed: bool
    identifier: TableIdentifier
    mode: MatchMode
    table_found: bool
    headers: list[str] = []
    failures: list[str] = []
    attempts: int = 0

    @property
    def message(self) -> str:
        """Human-readable failure text identifying the table and what went wrong."""
        if not self.table_found:
            lines = [f'unable to find table "{self.identifier}" on page']
            lines.extend(self.failures)
            return "\n".join(lines)
        return "\n".join(
            [
                f'found table "{self.identifier}" on page, with headers:',
                str(self.headers),
                "but rows did not match expected values:",
                *self.failures,
            ]
        )
