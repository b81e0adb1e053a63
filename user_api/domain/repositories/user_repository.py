"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from user_api.domain.models.user import User


class UserRepository(ABC):
    """
    Abstract repository for user persistence operations.
    
    Implementations own the identifier policy: ids are assigned on insert,
    start at 1, increase monotonically and are never reused. All methods
    return copies, so callers can never mutate stored records directly.
    """
    
    @abstractmethod
    def list(self) -> List[User]:
        """
        List all users.
        
        Returns:
            Users ordered by name ascending; equal names keep insertion order
        """
        pass
    
    @abstractmethod
    def get(self, user_id: int) -> Optional[User]:
        """
        Find a user by ID.
        
        Args:
            user_id: User identifier
            
        Returns:
            User entity if found, None otherwise
        """
        pass
    
    @abstractmethod
    def add(self, user: User) -> User:
        """
        Insert a new user.
        
        Any id already set on ``user`` is ignored.
        
        Args:
            user: User entity to insert
            
        Returns:
            Stored user with its assigned id
        """
        pass
    
    @abstractmethod
    def update(self, user: User) -> None:
        """
        Overwrite name and email of the user with ``user.id``.
        
        Does nothing if no such user exists.
        
        Args:
            user: User entity carrying the target id and new field values
        """
        pass
    
    @abstractmethod
    def delete(self, user_id: int) -> None:
        """
        Remove the user with ``user_id``; does nothing if absent.
        
        Args:
            user_id: User identifier
        """
        pass
    
    @abstractmethod
    def count(self) -> int:
        """
        Count stored users.
        
        Returns:
            Number of users currently held
        """
        pass
