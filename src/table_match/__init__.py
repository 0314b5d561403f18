"""Assert on the rows of a rendered HTML table from UI tests.

Subpackages:
  document  -- queryable-document protocol plus BeautifulSoup and Playwright adapters
  tables    -- table resolution, extraction, alignment, comparison, settle loop
"""

from table_match.errors import AmbiguousTable, ConfigurationError, MatchFailure, StaleElement, TableMatchError, TableNotFound
from table_match.tables.pipeline import assert_table, evaluate, expect_table, match_table
from table_match.tables.schema import MatchMode, MatchResult, TableAssertion, TableIdentifier, TableMarkers

__all__ = [
    "AmbiguousTable",
    "ConfigurationError",
    "MatchFailure",
    "MatchMode",
    "MatchResult",
    "StaleElement",
    "TableAssertion",
    "TableIdentifier",
    "TableMarkers",
    "TableMatchError",
    "TableNotFound",
    "assert_table",
    "evaluate",
    "expect_table",
    "match_table",
]
