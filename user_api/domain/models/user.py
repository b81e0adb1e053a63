"""
User Model
==========

Domain model representing a user in the system.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class User:
    """
    User domain model.
    
    ``id`` is None until the repository assigns one on insert.
    """
    name: str
    email: str
    id: Optional[int] = None
    
    def copy(self) -> "User":
        """Return a detached copy of this user."""
        return replace(self)
    
    def with_id(self, user_id: int) -> "User":
        """Return a copy carrying ``user_id`` instead of the current id."""
        return replace(self, id=user_id)
