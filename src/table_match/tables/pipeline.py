"""Table assertion entry points.

Typical use inside a test::

    result = expect_table(page, match_table(TableIdentifier.by_id("users")).with_rows(
        {"Name": "John Doe", "Status": "Active"},
    ))

Evaluation runs in two stages:

  1. Presence wait -- poll until the identifier matches at least one element.
  2. Settle loop   -- resolve, extract, align, and compare; retry the whole cycle
                      while the comparison fails, until the timeout elapses.

Each stage may use the full timeout, so a table that never appears or never
matches is reported after at most twice the timeout.  A missing or ambiguous
table is reported straight away from stage 2; row mismatches and stale
elements (the page re-rendered mid-read) are retried.
"""

import logging

from pydantic import ValidationError

from table_match.config import DEFAULT_MARKERS, DEFAULT_WAIT_TIME
from table_match.document.protocol import QueryableDocument
from table_match.errors import AmbiguousTable, ConfigurationError, MatchFailure, StaleElement, TableNotFound
from table_match.tables.extraction import extract_table
from table_match.tables.matching import align_columns, compare, match_rows, unknown_headers
from table_match.tables.resolver import find_tables, resolve_table
from table_match.tables.schema import ExpectedRow, MatchMode, MatchResult, TableAssertion, TableIdentifier, TableMarkers
from table_match.tables.settle import Poller, TenacityPoller

logger = logging.getLogger(__name__)


# ─── Builder ─────────────────────────────────────────────────────────────────


def build_assertion(
    identifier: TableIdentifier | str,
    mode: MatchMode,
    expected: list[ExpectedRow] | tuple[ExpectedRow, ...],
    markers: TableMarkers = DEFAULT_MARKERS,
    strict_headers: bool = False,
) -> TableAssertion:
    """Validate and freeze an assertion request; malformed input raises ConfigurationError."""
    try:
        return TableAssertion(
            identifier=TableIdentifier.coerce(identifier),
            mode=mode,
            expected=tuple(expected),
            markers=markers,
            strict_headers=strict_headers,
        )
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


class TableMatcher:
    """Fluent builder: ``match_table(identifier).with_rows(...)`` / ``.with_exact_rows(...)``."""

    def __init__(self, identifier: TableIdentifier | str, markers: TableMarkers = DEFAULT_MARKERS, strict_headers: bool = False):
        self.identifier = identifier
        self.markers = markers
        self.strict_headers = strict_headers

    def with_rows(self, *rows: ExpectedRow) -> TableAssertion:
        """The table must include these rows, in any order."""
        return build_assertion(self.identifier, MatchMode.INCLUDE, rows, self.markers, self.strict_headers)

    def with_exact_rows(self, *rows: ExpectedRow) -> TableAssertion:
        """The table must contain exactly these rows, in this order."""
        return build_assertion(self.identifier, MatchMode.EXACT, rows, self.markers, self.strict_headers)


def match_table(identifier: TableIdentifier | str, markers: TableMarkers = DEFAULT_MARKERS, strict_headers: bool = False) -> TableMatcher:
    """Start building a table assertion; a bare string is a free-text (caption) locator."""
    return TableMatcher(identifier, markers=markers, strict_headers=strict_headers)


# ─── Evaluation ──────────────────────────────────────────────────────────────


def _check_table(document: QueryableDocument, assertion: TableAssertion) -> list[str]:
    """One extract-and-compare cycle.  Raises MatchFailure if any expectation is not met."""
    try:
        content = extract_table(resolve_table(document, assertion.identifier), assertion.markers)
    except StaleElement as exc:
        raise MatchFailure([f"table changed while it was being read: {exc}"], []) from exc
    headers, rows = content.headers, content.rows

    expected_labels = assertion.expected_headers
    alignment = align_columns(headers, expected_labels)
    matched = match_rows(rows, alignment)

    failures: list[str] = []
    if assertion.strict_headers:
        failures.extend(unknown_headers(expected_labels, headers, alignment))
    failures.extend(compare(assertion.mode, matched, list(assertion.expected)))

    logger.debug("Cycle for %s: %d rows, alignment %s, %d failures", assertion.identifier, len(rows), alignment, len(failures))
    if failures:
        raise MatchFailure(failures, headers)
    return headers


def _wait_for_presence(document: QueryableDocument, identifier: TableIdentifier, timeout: float, poller: Poller) -> None:
    """Poll until at least one element matches *identifier*; raise TableNotFound on timeout."""

    def attempt() -> None:
        if not find_tables(document, identifier):
            raise TableNotFound(str(identifier))

    poller.poll_until(attempt, timeout, retry_on=(TableNotFound, StaleElement))


def evaluate(
    document: QueryableDocument,
    assertion: TableAssertion,
    timeout: float | None = None,
    poller: Poller | None = None,
) -> MatchResult:
    """Run *assertion* against *document*, retrying until it passes or *timeout* elapses.

    *timeout* bounds the presence wait and the settle loop separately, so a
    failing evaluation can take up to twice *timeout*.
    """
    timeout = DEFAULT_WAIT_TIME if timeout is None else timeout
    poller = poller or TenacityPoller()
    logger.info(
        "Matching table %s (%s, %d expected rows, timeout %.2fs)", assertion.identifier, assertion.mode.value, len(assertion.expected), timeout
    )

    attempts = 0

    def attempt() -> list[str]:
        nonlocal attempts
        attempts += 1
        return _check_table(document, assertion)

    result_kwargs = {"identifier": assertion.identifier, "mode": assertion.mode}
    try:
        _wait_for_presence(document, assertion.identifier, timeout, poller)
        headers = poller.poll_until(attempt, timeout)
    except TableNotFound as exc:
        logger.info("Table %s not resolved: %s", assertion.identifier, exc)
        return MatchResult(passed=False, table_found=False, attempts=attempts, **result_kwargs)
    except (AmbiguousTable, StaleElement) as exc:
        logger.info("Table %s not resolved: %s", assertion.identifier, exc)
        return MatchResult(passed=False, table_found=False, failures=[str(exc)], attempts=attempts, **result_kwargs)
    except MatchFailure as exc:
        logger.warning("Table %s did not match after %d attempts: %d failures", assertion.identifier, attempts, len(exc.failures))
        return MatchResult(passed=False, table_found=True, headers=exc.headers, failures=exc.failures, attempts=attempts, **result_kwargs)

    logger.info("Table %s matched after %d attempts", assertion.identifier, attempts)
    return MatchResult(passed=True, table_found=True, headers=headers, attempts=attempts, **result_kwargs)


def assert_table(
    document: QueryableDocument,
    identifier: TableIdentifier | str,
    mode: MatchMode,
    expected: list[ExpectedRow],
    markers: TableMarkers = DEFAULT_MARKERS,
    timeout: float | None = None,
    poller: Poller | None = None,
    strict_headers: bool = False,
) -> MatchResult:
    """Build and evaluate an assertion in one call."""
    assertion = build_assertion(identifier, mode, expected, markers=markers, strict_headers=strict_headers)
    return evaluate(document, assertion, timeout=timeout, poller=poller)


def expect_table(
    document: QueryableDocument,
    assertion: TableAssertion,
    timeout: float | None = None,
    poller: Poller | None = None,
) -> MatchResult:
    """Evaluate *assertion* and raise AssertionError with the failure message if it does not pass."""
    result = evaluate(document, assertion, timeout=timeout, poller=poller)
    if not result.passed:
        raise AssertionError(result.message)
    return result
