"""Settle loop: re-run an attempt until it stops failing or time runs out.

The engine only supplies the attempt; timing is owned by a Poller.  An attempt
signals "not yet" by raising one of the retryable exception types (MatchFailure
by default).  Any other exception propagates immediately.  When the timeout
elapses, the last retryable exception is re-raised so the caller can report
the final cycle's diagnostics.
"""

import logging
from collections.abc import Callable
from typing import Protocol, TypeVar

from tenacity import Retrying, before_sleep_log, retry_if_exception_type, stop_after_delay, wait_fixed

from table_match.config import POLL_INTERVAL
from table_match.errors import MatchFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Poller(Protocol):
    """Blocking 'retry until the attempt succeeds, else time out' capability."""

    def poll_until(
        self,
        attempt: Callable[[], T],
        timeout: float,
        retry_on: tuple[type[BaseException], ...] = (MatchFailure,),
    ) -> T:
        """Return the first successful result of *attempt*, re-raising the last failure on timeout."""


class TenacityPoller:
    """Poller backed by tenacity: fixed-interval waits, stop after a wall-clock delay."""

    def __init__(self, interval: float = POLL_INTERVAL):
        self.interval = interval

    def poll_until(
        self,
        attempt: Callable[[], T],
        timeout: float,
        retry_on: tuple[type[BaseException], ...] = (MatchFailure,),
    ) -> T:
        retrying = Retrying(
            retry=retry_if_exception_type(retry_on),
            stop=stop_after_delay(timeout),
            wait=wait_fixed(self.interval),
            before_sleep=before_sleep_log(logger, logging.DEBUG),
            reraise=True,
        )
        return retrying(attempt)
