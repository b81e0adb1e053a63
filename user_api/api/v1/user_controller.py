"""
User Controller
===============

FastAPI controller for user management endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from user_api.application.dto.user_dto import (
    ErrorResponse,
    UserRequest,
    UserResponse,
    ValidationErrorResponse,
)
from user_api.api.v1.dependencies import get_user_service
from user_api.api.v1.responses import to_response
from user_api.application.services.user_service import UserService

router = APIRouter(tags=["users"])

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
    description="Get all users ordered by name."
)
async def list_users(
    service: UserService = Depends(get_user_service),
) -> Response:
    """List users."""
    return to_response(service.list_users())


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Get user by ID",
    description="Get details of a specific user."
)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Get a specific user by ID."""
    return to_response(service.get_user(user_id))


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}},
    summary="Create a user",
    description="""
    Create a new user.
    
    The server assigns the id; any id in the body is ignored.
    The response carries a Location header of the form api/users/{id}.
    """
)
async def create_user(
    request: UserRequest,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Create a user."""
    return to_response(service.create_user(request.to_entity()))


@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
    summary="Update a user",
    description="Replace name and email of an existing user. The id in the path wins over any id in the body."
)
async def update_user(
    user_id: int,
    request: UserRequest,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Update a user."""
    return to_response(service.update_user(user_id, request.to_entity()))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a user",
    description="Delete a user by ID."
)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user."""
    return to_response(service.delete_user(user_id))
