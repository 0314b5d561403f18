"""Exception taxonomy for table resolution and matching.

ConfigurationError is raised before the page is touched and is never retried.
TableNotFound / AmbiguousTable reflect an identifier that does not fit the page
and abort the settle loop.  MatchFailure is the recoverable error: the settle
loop catches it and re-runs extraction until the timeout elapses.  A
StaleElement raised mid-cycle is folded into a MatchFailure.
"""


class TableMatchError(Exception):
    """Base class for every error raised by table_match."""


class ConfigurationError(TableMatchError, ValueError):
    """The assertion itself is malformed (inconsistent expected rows, bad identifier)."""


class TableNotFound(TableMatchError):
    """No element on the page matches the table identifier."""

    def __init__(self, identifier: str):
        super().__init__(f"unable to find table {identifier}")
        self.identifier = identifier


class AmbiguousTable(TableMatchError):
    """More than one element on the page matches the table identifier."""

    def __init__(self, identifier: str, count: int):
        super().__init__(f"ambiguous match for table {identifier}, found {count} elements")
        self.identifier = identifier
        self.count = count


class MatchFailure(TableMatchError):
    """One extract-and-compare cycle did not meet expectations."""

    def __init__(self, failures: list[str], headers: list[str]):
        super().__init__(f"{len(failures)} row expectation(s) not met")
        self.failures = failures
        self.headers = headers


class StaleElement(TableMatchError):
    """The page changed underneath a query (element detached, query timed out).

    Document adapters raise this in place of their driver's own errors so the
    settle loop can treat it as one more failed cycle.
    """
