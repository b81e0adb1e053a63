"""
User DTO
========

Pydantic models for user API requests and responses.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from user_api.domain.models.user import User


class UserRequest(BaseModel):
    """
    DTO for creating or updating a user.
    
    Name and email accept null and default to empty strings, so that absent
    values reach the validator and come back as field errors instead of a
    framework 422. The id is never used, so any value is accepted.
    """
    id: Optional[Any] = Field(None, description="Ignored; ids are assigned by the server")
    name: Optional[str] = Field("", description="Display name")
    email: Optional[str] = Field("", description="Email address")
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Alice",
                "email": "alice@example.com",
            }
        }
    )
    
    def to_entity(self) -> User:
        """Convert to a domain User."""
        user_id = self.id if isinstance(self.id, int) and not isinstance(self.id, bool) else None
        return User(id=user_id, name=self.name or "", email=self.email or "")


class UserResponse(BaseModel):
    """DTO for user data."""
    id: int
    name: str
    email: str
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Alice",
                "email": "alice@example.com",
            }
        }
    )
    
    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        """Build the response from a domain User."""
        return cls(id=user.id, name=user.name, email=user.email)


class ErrorResponse(BaseModel):
    """DTO for a single error message."""
    error: str


class ValidationErrorResponse(BaseModel):
    """DTO for field-level validation errors."""
    errors: Dict[str, List[str]]
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "errors": {
                    "name": ["Name is required"],
                    "email": ["Invalid email address: An email address must have an @-sign."],
                }
            }
        }
    )
