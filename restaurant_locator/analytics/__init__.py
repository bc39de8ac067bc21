"""
Search analytics.

Responsibilities:
- Keep an in-memory log of search events.
- Aggregate the log into usage statistics for the admin endpoint.
"""
