"""Unit tests for the tenacity-backed settle loop."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from table_match.errors import MatchFailure, TableNotFound
from table_match.tables.settle import TenacityPoller


def flaky(failures_before_success: int, exc_factory=lambda n: MatchFailure([f"attempt {n}"], [])):
    """Return (attempt, calls) where attempt fails *failures_before_success* times, then returns 'ok'."""
    calls = []

    def attempt():
        calls.append(len(calls) + 1)
        if len(calls) <= failures_before_success:
            raise exc_factory(len(calls))
        return "ok"

    return attempt, calls


class TestTenacityPoller:

    def test_first_attempt_succeeds(self):
        attempt, calls = flaky(0)
        assert TenacityPoller(interval=0).poll_until(attempt, timeout=1) == "ok"
        assert calls == [1]

    def test_retries_until_success(self):
        attempt, calls = flaky(3)
        assert TenacityPoller(interval=0).poll_until(attempt, timeout=5) == "ok"
        assert calls == [1, 2, 3, 4]

    def test_timeout_reraises_last_failure(self):
        attempt, calls = flaky(1_000_000)
        with pytest.raises(MatchFailure) as excinfo:
            TenacityPoller(interval=0.01).poll_until(attempt, timeout=0.05)
        assert len(calls) >= 2
        assert excinfo.value.failures == [f"attempt {len(calls)}"]

    def test_zero_timeout_runs_once(self):
        attempt, calls = flaky(1_000_000)
        with pytest.raises(MatchFailure):
            TenacityPoller(interval=0).poll_until(attempt, timeout=0)
        assert calls == [1]

    def test_other_errors_not_retried(self):
        attempt, calls = flaky(5, exc_factory=lambda n: TableNotFound("users"))
        with pytest.raises(TableNotFound):
            TenacityPoller(interval=0).poll_until(attempt, timeout=5)
        assert calls == [1]

    def test_custom_retry_on(self):
        attempt, calls = flaky(2, exc_factory=lambda n: TableNotFound("users"))
        assert TenacityPoller(interval=0).poll_until(attempt, timeout=5, retry_on=(TableNotFound,)) == "ok"
        assert calls == [1, 2, 3]
