"""
Recommendation service.

Runs the recommendation strategies against the shared social graph.
"""

import logging
from typing import Dict, List, Optional

from .base import BaseService
from ..graph import Recommendation, RecommendationStrategy
from ..report import format_network, format_user_report

logger = logging.getLogger(__name__)


class RecommendationService(BaseService):
    """
    Service for friend recommendations.

    Provides:
    - Single-strategy and all-strategy recommendations
    - Full text report of the network and every user's recommendations
    """

    def _resolve_max_distance(self, max_distance: Optional[int]) -> int:
        if max_distance is None:
            return self.config.recommendation.max_distance
        return max_distance

    def recommend(
        self,
        user_id: int,
        strategy: RecommendationStrategy,
        max_distance: Optional[int] = None
    ) -> List[Recommendation]:
        """
        Recommend friends for a user with one strategy.

        Args:
            user_id: Target user ID
            strategy: Strategy to run
            max_distance: Hop bound (config default if not provided)

        Returns:
            Ordered recommendations, empty for unknown users
        """
        bound = self._resolve_max_distance(max_distance)
        with self.lock.read():
            return self.context.engine.recommend(user_id, strategy, bound)

    def recommend_all(
        self,
        user_id: int,
        max_distance: Optional[int] = None
    ) -> Dict[RecommendationStrategy, List[Recommendation]]:
        """Recommend friends for a user with every strategy."""
        bound = self._resolve_max_distance(max_distance)
        with self.lock.read():
            return self.context.engine.recommend_all(user_id, bound)

    def build_report(self, max_distance: Optional[int] = None) -> List[str]:
        """
        Render the network structure followed by every user's recommendations.

        Args:
            max_distance: Hop bound (config default if not provided)

        Returns:
            Report lines
        """
        bound = self._resolve_max_distance(max_distance)

        with self.lock.read():
            store = self.context.store
            lines = format_network(store.adjacency())

            for user_id in store.users():
                lines.append("")
                results = self.context.engine.recommend_all(user_id, bound)
                lines.extend(format_user_report(user_id, results))

        logger.debug(f"Built report with max distance {bound}")
        return lines
