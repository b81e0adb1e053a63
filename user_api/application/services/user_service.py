"""
User Service
============

Application service that coordinates user-related operations.
Each method delegates to one use case and returns its outcome unchanged.
"""
from user_api.application.outcomes import Outcome
from user_api.application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository


class UserService:
    """
    Application service for user operations.
    
    Holds no state of its own; everything it returns comes from the
    repository passed in at construction.
    """
    
    def __init__(self, user_repository: UserRepository, validate_on_update: bool = False):
        """
        Initialize service with repository.
        
        Args:
            user_repository: Repository for user persistence
            validate_on_update: Apply create-time validation to updates too
        """
        self._repository = user_repository
        self._list_use_case = ListUsersUseCase(user_repository)
        self._get_use_case = GetUserUseCase(user_repository)
        self._create_use_case = CreateUserUseCase(user_repository)
        self._update_use_case = UpdateUserUseCase(user_repository, validate=validate_on_update)
        self._delete_use_case = DeleteUserUseCase(user_repository)
    
    def list_users(self) -> Outcome:
        """List all users ordered by name."""
        return self._list_use_case.execute()
    
    def get_user(self, user_id: int) -> Outcome:
        """Get a user by ID."""
        return self._get_use_case.execute(user_id)
    
    def create_user(self, user: User) -> Outcome:
        """
        Create a user.
        
        Args:
            user: Name and email of the new user
            
        Returns:
            Created or BadRequest
        """
        return self._create_use_case.execute(user)
    
    def update_user(self, user_id: int, user: User) -> Outcome:
        """
        Update a user's name and email.
        
        Args:
            user_id: Id of the user to update
            user: New field values; its own id is ignored
            
        Returns:
            NoContent, NotFound or (with validation enabled) BadRequest
        """
        return self._update_use_case.execute(user_id, user)
    
    def delete_user(self, user_id: int) -> Outcome:
        """Delete a user by ID."""
        return self._delete_use_case.execute(user_id)
    
    def count_users(self) -> int:
        """Number of stored users."""
        return self._repository.count()
