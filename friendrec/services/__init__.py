"""
Services layer for the friend recommender.

This module provides the core operations as reusable services
that can be consumed by the CLI, the API, or any other interface.
"""

from .base import BaseService, ServiceContext, ReadWriteLock
from .network_service import NetworkService
from .recommendation_service import RecommendationService

__all__ = [
    # Base
    "BaseService",
    "ServiceContext",
    "ReadWriteLock",
    # Services
    "NetworkService",
    "RecommendationService",
]


def create_services(context: ServiceContext = None):
    """
    Factory function to create all services with proper dependencies.

    Args:
        context: Optional ServiceContext (creates one if not provided)

    Returns:
        Tuple of (context, network, recommendations)
    """
    if context is None:
        context = ServiceContext.create()

    network_service = NetworkService(context)
    recommendation_service = RecommendationService(context)

    return (
        context,
        network_service,
        recommendation_service
    )
