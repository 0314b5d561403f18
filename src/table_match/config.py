"""Shared configuration for table matching (wait times, polling, marker vocabulary)."""

import os
from pathlib import Path

from dotenv import load_dotenv

from table_match.tables.schema import TableMarkers

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Seconds to keep re-checking a table before reporting failure (Capybara's default max wait)
DEFAULT_WAIT_TIME = float(os.getenv("TABLE_MATCH_WAIT_TIME", "2"))

# Seconds to sleep between settle-loop attempts
POLL_INTERVAL = float(os.getenv("TABLE_MATCH_POLL_INTERVAL", "0.05"))

# Milliseconds a single browser query may wait before the cycle is abandoned and retried
QUERY_TIMEOUT = float(os.getenv("TABLE_MATCH_QUERY_TIMEOUT", "500"))

DEFAULT_MARKERS = TableMarkers()
