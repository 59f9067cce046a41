"""
Domain layer - Business entities, models, schemas, and calendar helpers.
"""

from domain import day_window, models, schemas

__all__ = ["day_window", "models", "schemas"]
