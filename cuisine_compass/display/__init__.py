"""
Presentation helpers for menu recommendations.

Responsibilities:
- Group recommended dishes by category in display order.
- Express cuisine proportions as whole percentages.
- Flatten quantities into a table for printing.
"""
