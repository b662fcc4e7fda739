"""
Graph storage using NetworkX.

Holds the undirected friendship relation between users and exposes
mutation and lookup operations on it.
"""

import logging
from typing import Dict, Any, List, Set

import networkx as nx

logger = logging.getLogger(__name__)


class SocialGraphStore:
    """
    NetworkX-based storage for the social graph.

    Provides:
    - User and connection mutations (connections are undirected)
    - Total lookups: unknown users yield empty results, never errors
    - Graph statistics

    Each store owns its own graph; independent stores never share state.
    """

    def __init__(self):
        self.graph = nx.Graph()  # Undirected graph

    # === User Operations ===

    def add_user(self, user_id: int) -> bool:
        """
        Add a user to the graph.

        Args:
            user_id: Caller-assigned user identifier

        Returns:
            True if added, False if already exists
        """
        if self.graph.has_node(user_id):
            return False

        self.graph.add_node(user_id)
        logger.debug(f"Added user {user_id}")
        return True

    def has_user(self, user_id: int) -> bool:
        """Check if a user exists."""
        return self.graph.has_node(user_id)

    def users(self) -> List[int]:
        """Get all user IDs in ascending order."""
        return sorted(self.graph.nodes)

    def node_count(self) -> int:
        """Get the number of users in the graph."""
        return self.graph.number_of_nodes()

    # === Connection Operations ===

    def add_connection(self, user_id: int, friend_id: int) -> bool:
        """
        Connect two users, creating either of them if missing.

        Self-connections are ignored: the user is created but no edge is
        inserted.

        Args:
            user_id: First user ID
            friend_id: Second user ID

        Returns:
            True if a new connection was added, False otherwise
        """
        self.add_user(user_id)
        self.add_user(friend_id)

        if user_id == friend_id:
            logger.debug(f"Ignoring self-connection for user {user_id}")
            return False

        if self.graph.has_edge(user_id, friend_id):
            return False

        self.graph.add_edge(user_id, friend_id)
        logger.debug(f"Connected {user_id} <-> {friend_id}")
        return True

    def remove_connection(self, user_id: int, friend_id: int) -> bool:
        """
        Remove the connection between two users.

        Missing users or a missing connection are a no-op.

        Returns:
            True if a connection was removed, False otherwise
        """
        if not self.graph.has_edge(user_id, friend_id):
            return False

        self.graph.remove_edge(user_id, friend_id)
        logger.debug(f"Disconnected {user_id} <-> {friend_id}")
        return True

    def connection_count(self) -> int:
        """Get the number of connections in the graph."""
        return self.graph.number_of_edges()

    # === Lookups ===

    def neighbors(self, user_id: int) -> Set[int]:
        """
        Get the direct friends of a user.

        Args:
            user_id: User ID

        Returns:
            New set of friend IDs, empty if the user is unknown
        """
        if not self.graph.has_node(user_id):
            return set()

        return set(self.graph.adj[user_id])

    def adjacency(self) -> Dict[int, List[int]]:
        """Get every user mapped to their sorted friend list."""
        return {
            user_id: sorted(self.graph.adj[user_id])
            for user_id in self.users()
        }

    # === Statistics ===

    def stats(self) -> Dict[str, Any]:
        """Get graph statistics."""
        degrees = [degree for _, degree in self.graph.degree()]
        isolated = sum(1 for degree in degrees if degree == 0)

        return {
            "total_users": self.graph.number_of_nodes(),
            "total_connections": self.graph.number_of_edges(),
            "isolated_users": isolated,
            "max_degree": max(degrees, default=0),
        }
