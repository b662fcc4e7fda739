"""
System endpoints.

Health checks and graph status.
"""

from fastapi import APIRouter

from ..deps import ServicesDep

router = APIRouter()


@router.get("/status")
def get_status(services: ServicesDep):
    """
    Status endpoint.

    Returns service health and the size of the social graph.
    """
    stats = services.network.stats()
    return {
        "status": "healthy",
        "service": "friendrec-api",
        "users": stats["total_users"],
        "connections": stats["total_connections"]
    }


@router.get("/stats")
def get_stats(services: ServicesDep):
    """Detailed graph statistics."""
    return services.network.stats()
