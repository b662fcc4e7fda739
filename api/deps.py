"""
API dependencies.

Provides dependency injection for services.
"""

import logging
from typing import Optional, Annotated
from dataclasses import dataclass

from fastapi import Depends

from friendrec.config import load_config, Config
from friendrec.services import (
    ServiceContext,
    NetworkService,
    RecommendationService,
)

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Container for all services."""
    config: Config
    context: ServiceContext
    network: NetworkService
    recommendations: RecommendationService


# Global services instance (singleton)
_services: Optional[Services] = None


def get_services() -> Services:
    """
    Get or create the services singleton.

    This initializes all services on first call.
    """
    global _services

    if _services is None:
        logger.info("Initializing services...")

        config = load_config()
        context = ServiceContext.create(config=config)

        _services = Services(
            config=config,
            context=context,
            network=NetworkService(context),
            recommendations=RecommendationService(context)
        )

        logger.info("Services initialized successfully")

    return _services


def close_services():
    """Drop the services singleton; the graph is not persisted."""
    global _services
    if _services:
        _services = None
        logger.info("Services closed")


# Dependency for getting services
def services_dep() -> Services:
    """FastAPI dependency for services."""
    return get_services()


ServicesDep = Annotated[Services, Depends(services_dep)]
