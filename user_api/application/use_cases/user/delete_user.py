"""
Delete User Use Case
====================
"""
import logging
from typing import Union

from user_api.application.outcomes import NoContent, NotFound
from user_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for removing a user."""
    
    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository
    
    def execute(self, user_id: int) -> Union[NoContent, NotFound]:
        """
        Execute the delete user use case.
        
        Args:
            user_id: User identifier
            
        Returns:
            NoContent if the user was removed, NotFound if it did not exist
        """
        if self._repository.get(user_id) is None:
            return NotFound()
        
        self._repository.delete(user_id)
        logger.info("Deleted user %s", user_id)
        return NoContent()
