"""
Geographic helpers.

Responsibilities:
- Great-circle distance between coordinates (Haversine).
- Human-readable distance formatting.
- Resolve free-text locations against a static gazetteer.
"""
