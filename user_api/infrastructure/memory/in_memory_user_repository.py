"""
In-Memory User Repository
=========================

Concrete implementation of UserRepository backed by a Python list.

A single lock serializes every operation, which makes id assignment and
insertion one atomic step. Records never leave the repository by reference:
inputs are copied in, results are copied out.
"""
import logging
import threading
from typing import List, Optional

from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """
    In-memory implementation of UserRepository.
    
    Data lives for the lifetime of the instance only.
    """
    
    def __init__(self) -> None:
        """Initialize an empty store whose first assigned id is 1."""
        self._users: List[User] = []
        self._last_id = 0
        self._lock = threading.Lock()
    
    def list(self) -> List[User]:
        """List all users ordered by name."""
        with self._lock:
            # sorted() is stable, so equal names keep insertion order
            return [user.copy() for user in sorted(self._users, key=lambda u: u.name)]
    
    def get(self, user_id: int) -> Optional[User]:
        """Find a user by ID."""
        with self._lock:
            stored = self._find(user_id)
            return stored.copy() if stored else None
    
    def add(self, user: User) -> User:
        """Insert a user under the next sequential id."""
        with self._lock:
            self._last_id += 1
            stored = user.with_id(self._last_id)
            self._users.append(stored)
            logger.debug("Stored user %s", stored.id)
            return stored.copy()
    
    def update(self, user: User) -> None:
        """Overwrite name and email of an existing user."""
        with self._lock:
            stored = self._find(user.id)
            if stored is None:
                return
            stored.name = user.name
            stored.email = user.email
    
    def delete(self, user_id: int) -> None:
        """Remove the user with the given id."""
        with self._lock:
            self._users = [user for user in self._users if user.id != user_id]
    
    def count(self) -> int:
        """Count stored users."""
        with self._lock:
            return len(self._users)
    
    def _find(self, user_id: Optional[int]) -> Optional[User]:
        # Caller must hold the lock
        for user in self._users:
            if user.id == user_id:
                return user
        return None
