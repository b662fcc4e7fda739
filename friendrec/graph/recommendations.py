"""
Friend recommendation queries.

Ranks users a target is not yet connected to, using the social graph.
"""

import logging
from typing import Dict, Iterator, List, Tuple
from collections import Counter, defaultdict

from .schema import Recommendation, RecommendationStrategy
from .store import SocialGraphStore
from .traversal import DistanceEngine, inverse_distance

logger = logging.getLogger(__name__)

# Weight of each common friend in the weighted score
COMMON_FRIEND_WEIGHT = 2


class RecommendationEngine:
    """
    Friend recommendation strategies on the social graph.

    Provides:
    - Common friends: how many friends the target shares with a candidate
    - Network distance: how few hops separate target and candidate
    - Weighted: common friends blended with proximity

    Every call recomputes from the current graph and never mutates it.
    Candidates never include the target or its direct friends. Ties are
    broken by ascending user ID.
    """

    def __init__(self, store: SocialGraphStore, distances: DistanceEngine = None):
        """
        Initialize recommendation engine.

        Args:
            store: SocialGraphStore instance
            distances: Optional DistanceEngine (creates one over store if not provided)
        """
        self.store = store
        self.distances = distances or DistanceEngine(store)

    def _friends_of_friends(self, user_id: int) -> Iterator[Tuple[int, int]]:
        """
        Yield (friend, candidate) for every two-hop path from a user.

        Candidates that are the user or one of its friends are skipped.
        """
        friends = self.store.neighbors(user_id)
        for friend in friends:
            for candidate in self.store.neighbors(friend):
                if candidate == user_id or candidate in friends:
                    continue
                yield friend, candidate

    # === Strategies ===

    def recommend_by_common_friends(self, user_id: int) -> List[Recommendation]:
        """
        Recommend users sharing friends with the target.

        Args:
            user_id: Target user ID

        Returns:
            Recommendations scored by number of common friends, highest first
        """
        counts = Counter(
            candidate for _, candidate in self._friends_of_friends(user_id)
        )

        logger.debug(f"Common friends for {user_id}: {len(counts)} candidates")
        return _ranked(counts.items(), descending=True)

    def recommend_by_distance(self, user_id: int, max_distance: int) -> List[Recommendation]:
        """
        Recommend users within a hop bound of the target.

        Args:
            user_id: Target user ID
            max_distance: Maximum hop distance to consider

        Returns:
            Recommendations scored by hop distance, closest first
        """
        frontier = self.distances.bounded_frontier(user_id, max_distance)

        logger.debug(f"Network distance for {user_id}: {len(frontier)} candidates")
        return _ranked(frontier.items(), descending=False)

    def recommend_weighted(self, user_id: int, max_distance: int) -> List[Recommendation]:
        """
        Recommend users by a blend of common friends and proximity.

        Every two-hop path to a candidate adds
        ``common_friends * 2 + 1 / (distance + 1)`` to its score, where
        distance is the unbounded shortest hop count. The reported score is
        the integer part of the total.

        Args:
            user_id: Target user ID
            max_distance: Accepted for parity with the other strategies; it
                does not filter, all candidates are two hops away

        Returns:
            Recommendations scored by truncated weighted score, highest first
        """
        friends = self.store.neighbors(user_id)
        scores: Dict[int, float] = defaultdict(float)

        for _, candidate in self._friends_of_friends(user_id):
            common_friends = len(friends & self.store.neighbors(candidate))
            distance = self.distances.shortest_distance(user_id, candidate)
            scores[candidate] += (
                common_friends * COMMON_FRIEND_WEIGHT + inverse_distance(distance)
            )

        logger.debug(f"Weighted score for {user_id}: {len(scores)} candidates")
        return _ranked(
            ((candidate, int(score)) for candidate, score in scores.items()),
            descending=True
        )

    # === Dispatch ===

    def recommend(
        self,
        user_id: int,
        strategy: RecommendationStrategy,
        max_distance: int
    ) -> List[Recommendation]:
        """
        Run a single strategy by name.

        Args:
            user_id: Target user ID
            strategy: Strategy to run
            max_distance: Hop bound for distance-aware strategies

        Returns:
            Ordered recommendations
        """
        if strategy == RecommendationStrategy.COMMON_FRIENDS:
            return self.recommend_by_common_friends(user_id)
        if strategy == RecommendationStrategy.NETWORK_DISTANCE:
            return self.recommend_by_distance(user_id, max_distance)
        return self.recommend_weighted(user_id, max_distance)

    def recommend_all(
        self,
        user_id: int,
        max_distance: int
    ) -> Dict[RecommendationStrategy, List[Recommendation]]:
        """Run every strategy for a user."""
        return {
            strategy: self.recommend(user_id, strategy, max_distance)
            for strategy in RecommendationStrategy
        }


def _ranked(items, descending: bool) -> List[Recommendation]:
    """Sort (user_id, score) pairs by score, then by ascending user ID."""
    sign = -1 if descending else 1
    ordered = sorted(items, key=lambda item: (sign * item[1], item[0]))
    return [Recommendation(user_id=user_id, score=score) for user_id, score in ordered]
