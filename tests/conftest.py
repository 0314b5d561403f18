"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from table_match.document.soup import SoupDocument
from table_match.tables.settle import TenacityPoller

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def make_page():
    """Return a callable(html) -> SoupDocument."""
    return SoupDocument


@pytest.fixture
def fast_poller():
    """A poller that retries without sleeping between attempts."""
    return TenacityPoller(interval=0)
