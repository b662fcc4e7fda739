"""
Breadth-first traversal utilities.

Hop-count distances over the social graph, used by the distance-based and
weighted recommendation strategies.
"""

import logging
from typing import Dict, Optional

import networkx as nx

from .store import SocialGraphStore

logger = logging.getLogger(__name__)

# Closest hop distance at which a user is not already a direct friend
MIN_CANDIDATE_DISTANCE = 2


def inverse_distance(distance: Optional[int]) -> float:
    """
    Proximity term for a hop distance.

    Returns 1 / (distance + 1), or 0.0 when the users are unreachable
    (distance is None).
    """
    if distance is None:
        return 0.0
    return 1.0 / (distance + 1)


class DistanceEngine:
    """
    BFS queries on a SocialGraphStore.

    Both queries visit each reachable user at most once and never fail on
    unknown users.
    """

    def __init__(self, store: SocialGraphStore):
        """
        Initialize the engine.

        Args:
            store: SocialGraphStore instance to traverse
        """
        self.store = store

    def bounded_frontier(self, source: int, max_distance: int) -> Dict[int, int]:
        """
        Expand breadth-first from a user up to a hop bound.

        Args:
            source: User to start from
            max_distance: Maximum hop distance to include

        Returns:
            Mapping of user ID to hop distance for every user within
            max_distance hops that is neither the source nor a direct
            friend of the source
        """
        if not self.store.has_user(source) or max_distance < MIN_CANDIDATE_DISTANCE:
            return {}

        lengths = nx.single_source_shortest_path_length(
            self.store.graph, source, cutoff=max_distance
        )

        frontier = {
            user_id: distance
            for user_id, distance in lengths.items()
            if distance >= MIN_CANDIDATE_DISTANCE
        }
        logger.debug(
            f"Frontier from {source} within {max_distance} hops: {len(frontier)} users"
        )
        return frontier

    def shortest_distance(self, source: int, target: int) -> Optional[int]:
        """
        Find the hop distance between two users.

        Args:
            source: Start user ID
            target: Destination user ID

        Returns:
            Number of hops, or None if no path exists or either user is unknown
        """
        if not self.store.has_user(source) or not self.store.has_user(target):
            return None

        try:
            return nx.shortest_path_length(self.store.graph, source, target)
        except nx.NetworkXNoPath:
            return None
