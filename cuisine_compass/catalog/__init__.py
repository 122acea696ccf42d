"""
Static dish catalog.

Responsibilities:
- Define the Dish record and the closed vocabularies it is tagged with.
- Load the versioned CSV catalog once and validate every row.
- Serve the read-only catalog to the recommendation engine.
"""
