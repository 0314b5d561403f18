"""Column alignment and row comparison.

Expected headers are aligned to actual columns by literal prefix: the actual
label must start with the expected label, case-sensitively, so "Name" finds
"Name arrow_drop_down" but not "name".  The leftmost qualifying column wins.
Expected headers without a column are left out of the alignment, which means
the matched rows simply lack that key.

Comparison returns a list of diagnostics, one per failed expectation; an empty
list means the rows match.
"""

from table_match.tables.schema import ExpectedRow, MatchedRow, MatchMode

# ─── Alignment ───────────────────────────────────────────────────────────────


def align_columns(headers: list[str], expected_labels: list[str]) -> dict[str, int]:
    """Map each expected label to the index of the first actual header it prefixes."""
    alignment: dict[str, int] = {}
    for label in expected_labels:
        position = next((i for i, header in enumerate(headers) if header.startswith(label)), None)
        if position is not None:
            alignment[label] = position
    return alignment


def match_row(row: list[str], alignment: dict[str, int]) -> MatchedRow:
    """Project one data row through the alignment (None where the row is too short)."""
    return {label: row[position] if position < len(row) else None for label, position in alignment.items()}


def match_rows(rows: list[list[str]], alignment: dict[str, int]) -> list[MatchedRow]:
    """Project every data row; the result always has one entry per data row."""
    return [match_row(row, alignment) for row in rows]


def unknown_headers(expected_labels: list[str], headers: list[str], alignment: dict[str, int]) -> list[str]:
    """Diagnostics for expected labels that no actual column starts with."""
    return [f"no column header starts with {label!r} (actual headers: {headers})" for label in expected_labels if label not in alignment]


# ─── Comparison ──────────────────────────────────────────────────────────────


def compare_exact(matched: list[MatchedRow], expected: list[ExpectedRow]) -> list[str]:
    """Ordered equality: same length, same order, same key/value pairs per row."""
    failures: list[str] = []
    for i, (actual_row, expected_row) in enumerate(zip(matched, expected)):
        if actual_row != expected_row:
            failures.append(f"row {i + 1}: expected {expected_row}, got {actual_row}")

    if len(matched) < len(expected):
        for i in range(len(matched), len(expected)):
            failures.append(f"row {i + 1}: expected {expected[i]}, got no row")
    elif len(matched) > len(expected):
        for i in range(len(expected), len(matched)):
            failures.append(f"row {i + 1}: unexpected row {matched[i]}")
    return failures


def compare_include(matched: list[MatchedRow], expected: list[ExpectedRow]) -> list[str]:
    """Unordered inclusion: every expected row appears somewhere; extra rows are fine."""
    return [f"expected rows to include {expected_row}, actual rows: {matched}" for expected_row in expected if expected_row not in matched]


def compare(mode: MatchMode, matched: list[MatchedRow], expected: list[ExpectedRow]) -> list[str]:
    """Dispatch to the comparison for *mode*."""
    if mode is MatchMode.EXACT:
        return compare_exact(matched, expected)
    return compare_include(matched, expected)
