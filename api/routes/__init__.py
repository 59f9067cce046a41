"""API routes package"""

from . import dogs, feedings, dashboard, health

__all__ = ["dogs", "feedings", "dashboard", "health"]
