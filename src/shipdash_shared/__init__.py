"""
shipdash_shared — configuration, dataset store and models for shipdash.

Usage:
    from shipdash_shared.config import settings
    from shipdash_shared.db import ShipmentStore
    from shipdash_shared.models import CompanyDetail, StatsResponse
"""

__version__ = "0.1.0"
