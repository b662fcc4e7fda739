"""
Users endpoints.

Handles user creation, listing and friend lookups.
"""

from typing import List

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from ..deps import ServicesDep

router = APIRouter()


# Response models

class UserResponse(BaseModel):
    """User creation response."""
    user_id: int
    created: bool


class UsersListResponse(BaseModel):
    """List of users response."""
    users: List[int]
    total: int


class FriendsResponse(BaseModel):
    """A user's direct friends."""
    user_id: int
    friends: List[int]
    total: int


# Endpoints

@router.get("", response_model=UsersListResponse)
def list_users(services: ServicesDep):
    """List every user in the network."""
    users = services.network.get_users()
    return UsersListResponse(users=users, total=len(users))


@router.put("/{user_id}", response_model=UserResponse)
def add_user(user_id: int, services: ServicesDep, response: Response):
    """
    Add a user to the network.

    Returns 201 when the user is new, 200 when it already existed.
    """
    created = services.network.add_user(user_id)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return UserResponse(user_id=user_id, created=created)


@router.get("/{user_id}/friends", response_model=FriendsResponse)
def get_friends(user_id: int, services: ServicesDep):
    """
    Get a user's direct friends.

    Unknown users have no friends.
    """
    friends = services.network.get_friends(user_id)
    return FriendsResponse(user_id=user_id, friends=friends, total=len(friends))
