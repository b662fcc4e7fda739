"""
Social graph module for the friend recommender.

Provides an undirected friendship graph using NetworkX with:
- User/connection storage
- Breadth-first distance queries
- Friend recommendation strategies
"""

from .schema import RecommendationStrategy, Recommendation
from .store import SocialGraphStore
from .traversal import DistanceEngine, inverse_distance
from .recommendations import RecommendationEngine

__all__ = [
    "RecommendationStrategy",
    "Recommendation",
    "SocialGraphStore",
    "DistanceEngine",
    "inverse_distance",
    "RecommendationEngine",
]
