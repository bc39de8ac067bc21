"""
Nearby restaurants.

Responsibilities:
- Load the read-only restaurant dataset.
- Filter candidates by cuisine, minimum rating and price tier.
- Rank candidates by great-circle distance from a search origin.
- Serve cached, size-bounded results to the API layer.
"""
