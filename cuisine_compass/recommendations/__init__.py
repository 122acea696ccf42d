"""
Menu recommendation engine.

Responsibilities:
- Derive the target cuisine-origin mix from the attendee demographics.
- Filter the static dish catalog by meal, event and dietary constraints.
- Score and rank eligible dishes with deterministic heuristics.
- Select a category-balanced menu and size each dish for the crowd.
"""
