"""Wise webapp: static front end plus the /api/data product summary."""

__version__ = "1.0.0"
