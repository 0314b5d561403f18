"""Queryable-document capability and its adapters.

Submodules:
  protocol  -- Element / QueryableDocument protocols the table engine talks to
  soup      -- BeautifulSoup adapter for static (server-rendered) HTML
  browser   -- Playwright adapter for live browser pages
"""
