"""
Connections endpoints.

Adds and removes friendships between users.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ..deps import ServicesDep

router = APIRouter()


# Request/Response models

class ConnectionRequest(BaseModel):
    """Connection between two users."""
    user_id: int = Field(..., description="First user")
    friend_id: int = Field(..., description="Second user")


class ConnectionResponse(BaseModel):
    """Result of a connection change."""
    user_id: int
    friend_id: int
    changed: bool


# Endpoints

@router.post("", response_model=ConnectionResponse)
def add_connection(request: ConnectionRequest, services: ServicesDep):
    """
    Connect two users.

    Missing users are created. Re-adding an existing connection or
    connecting a user to itself changes nothing.
    """
    changed = services.network.add_connection(request.user_id, request.friend_id)
    return ConnectionResponse(
        user_id=request.user_id,
        friend_id=request.friend_id,
        changed=changed
    )


@router.delete("/{user_id}/{friend_id}", response_model=ConnectionResponse)
def remove_connection(user_id: int, friend_id: int, services: ServicesDep):
    """
    Disconnect two users.

    Removing a connection that does not exist changes nothing.
    """
    changed = services.network.remove_connection(user_id, friend_id)
    return ConnectionResponse(user_id=user_id, friend_id=friend_id, changed=changed)
