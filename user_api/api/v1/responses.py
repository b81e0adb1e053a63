"""
Outcome Mapping
===============

Translates application outcomes into HTTP responses.
"""
from typing import Any

from fastapi import Response, status
from fastapi.responses import JSONResponse

from user_api.application.dto.user_dto import (
    ErrorResponse,
    UserResponse,
    ValidationErrorResponse,
)
from user_api.application.outcomes import (
    BadRequest,
    Created,
    NoContent,
    NotFound,
    Ok,
    Outcome,
)
from user_api.domain.models.user import User


def _serialize(payload: Any) -> Any:
    if isinstance(payload, User):
        return UserResponse.from_entity(payload).model_dump()
    if isinstance(payload, list):
        return [_serialize(item) for item in payload]
    return payload


def to_response(outcome: Outcome) -> Response:
    """
    Build the HTTP response for an outcome.
    
    Args:
        outcome: Result returned by UserService
        
    Returns:
        200/201 with a JSON body, 204 with none, 404 with an error message,
        or 400 with field errors
        
    Raises:
        TypeError: If ``outcome`` is not a known outcome type
    """
    if isinstance(outcome, Ok):
        return JSONResponse(status_code=status.HTTP_200_OK, content=_serialize(outcome.payload))
    if isinstance(outcome, Created):
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=_serialize(outcome.payload),
            headers={"Location": outcome.location},
        )
    if isinstance(outcome, NoContent):
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    if isinstance(outcome, NotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(error=outcome.message).model_dump(),
        )
    if isinstance(outcome, BadRequest):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ValidationErrorResponse(errors=outcome.errors).model_dump(),
        )
    raise TypeError(f"Unsupported outcome type: {type(outcome).__name__}")
