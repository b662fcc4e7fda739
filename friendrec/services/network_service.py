"""
Network service.

Mutations and lookups on the shared social graph.
"""

import logging
from typing import Dict, Any, List

from .base import BaseService
from ..network_input import NetworkDescription

logger = logging.getLogger(__name__)


class NetworkService(BaseService):
    """
    Service for social graph operations.

    Provides:
    - User and connection management
    - Bulk loading from a parsed network description
    - Friend lookups and graph statistics
    """

    # === Mutations ===

    def add_user(self, user_id: int) -> bool:
        """
        Add a user to the network.

        Returns:
            True if the user was created, False if it already existed
        """
        with self.lock.write():
            return self.store.add_user(user_id)

    def add_connection(self, user_id: int, friend_id: int) -> bool:
        """
        Connect two users, creating them if needed.

        Returns:
            True if a new connection was added
        """
        with self.lock.write():
            return self.store.add_connection(user_id, friend_id)

    def remove_connection(self, user_id: int, friend_id: int) -> bool:
        """
        Disconnect two users.

        Returns:
            True if a connection was removed
        """
        with self.lock.write():
            return self.store.remove_connection(user_id, friend_id)

    def load(self, description: NetworkDescription) -> None:
        """
        Populate the graph from a network description.

        Creates users 0..user_count-1, then adds every connection.

        Args:
            description: Parsed network description
        """
        with self.lock.write():
            for user_id in description.user_ids:
                self.store.add_user(user_id)
            for user_id, friend_id in description.connections:
                self.store.add_connection(user_id, friend_id)

            logger.info(
                f"Loaded network: {self.store.node_count()} users, "
                f"{self.store.connection_count()} connections"
            )

    # === Lookups ===

    def has_user(self, user_id: int) -> bool:
        with self.lock.read():
            return self.store.has_user(user_id)

    def get_friends(self, user_id: int) -> List[int]:
        """Get a user's friends in ascending order (empty for unknown users)."""
        with self.lock.read():
            return sorted(self.store.neighbors(user_id))

    def get_users(self) -> List[int]:
        """Get all user IDs in ascending order."""
        with self.lock.read():
            return self.store.users()

    def get_adjacency(self) -> Dict[int, List[int]]:
        """Get every user with their sorted friend list."""
        with self.lock.read():
            return self.store.adjacency()

    def stats(self) -> Dict[str, Any]:
        """Get graph statistics."""
        with self.lock.read():
            return self.store.stats()
