"""Table resolution, extraction, column alignment, and settle-loop matching.

Submodules:
  patterns    -- structural CSS selectors derived from the marker vocabulary
  schema      -- Pydantic models (identifier, markers, assertion, result)
  resolver    -- identifier -> single table element
  extraction  -- header labels and qualifying data rows
  matching    -- prefix column alignment and exact/include comparison
  settle      -- Poller capability and the tenacity-backed default
  pipeline    -- evaluate(), match_table() builder, expect_table()
"""
