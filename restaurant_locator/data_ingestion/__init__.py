"""
Restaurant data ingestion.

Responsibilities:
- Read the raw restaurant CSV export.
- Normalize each row into the canonical restaurant record.
- Write ``restaurants.json`` for the search layer.
"""
