"""
Graph schema definitions.

Defines the recommendation strategies and the result type shared by the
recommendation engine, the services layer and the API.
"""

from enum import Enum
from typing import Dict, Any
from dataclasses import dataclass


class RecommendationStrategy(str, Enum):
    """Recommendation heuristics available on the social graph."""
    COMMON_FRIENDS = "common-friends"
    NETWORK_DISTANCE = "distance"
    WEIGHTED = "weighted"

    @property
    def metric_label(self) -> str:
        """Label for the metric this strategy reports."""
        return _METRIC_LABELS[self]

    @property
    def section_title(self) -> str:
        """Section title used in text reports."""
        return _TITLES[self]


_METRIC_LABELS: Dict[RecommendationStrategy, str] = {
    RecommendationStrategy.COMMON_FRIENDS: "Common Friends",
    RecommendationStrategy.NETWORK_DISTANCE: "Distance",
    RecommendationStrategy.WEIGHTED: "Score",
}

_TITLES: Dict[RecommendationStrategy, str] = {
    RecommendationStrategy.COMMON_FRIENDS: "By Common Friends",
    RecommendationStrategy.NETWORK_DISTANCE: "By Network Distance",
    RecommendationStrategy.WEIGHTED: "Advanced Recommendation",
}


@dataclass(frozen=True)
class Recommendation:
    """A recommended user and the metric it was ranked by."""
    user_id: int
    score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "score": self.score
        }
