"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from . import users, connections, recommendations, system

router = APIRouter()

# Include all route modules
router.include_router(users.router, prefix="/users", tags=["Users"])
router.include_router(recommendations.router, prefix="/users", tags=["Recommendations"])
router.include_router(connections.router, prefix="/connections", tags=["Connections"])
router.include_router(system.router, prefix="/system", tags=["System"])
