"""
Get User Use Case
=================
"""
from typing import Union

from user_api.application.outcomes import NotFound, Ok
from user_api.domain.repositories.user_repository import UserRepository


class GetUserUseCase:
    """Use case for fetching a single user."""
    
    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository
    
    def execute(self, user_id: int) -> Union[Ok, NotFound]:
        """
        Execute the get user use case.
        
        Args:
            user_id: User identifier
            
        Returns:
            Ok with the user, or NotFound
        """
        user = self._repository.get(user_id)
        if user is None:
            return NotFound()
        return Ok(user)
