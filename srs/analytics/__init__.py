"""
Analytics package exports.
"""

from srs.analytics.service import build_owner_stats, review_stats
from srs.analytics.types import CategoryProgress, ReviewStats

__all__ = [
    "build_owner_stats",
    "review_stats",
    "CategoryProgress",
    "ReviewStats",
]
