"""
Create User Use Case
====================

Business use case for registering a new user.
"""
import logging
from typing import Union

from user_api.application.outcomes import USER_LOCATION, BadRequest, Created
from user_api.application.validators import validate_user
from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """
    Use case for creating a user.
    
    This encapsulates input validation and id assignment.
    """
    
    def __init__(self, user_repository: UserRepository):
        """
        Initialize use case with repository.
        
        Args:
            user_repository: Repository for user persistence
        """
        self._repository = user_repository
    
    def execute(self, user: User) -> Union[Created, BadRequest]:
        """
        Execute the create user use case.
        
        Args:
            user: User to create; any id it carries is ignored
            
        Returns:
            Created with the stored user and its location, or BadRequest
            listing every invalid field
        """
        errors = validate_user(user.name, user.email)
        if errors:
            logger.info("Rejected user create: %s", sorted(errors))
            return BadRequest(errors)
        
        created = self._repository.add(user)
        logger.info("Created user %s", created.id)
        return Created(created, USER_LOCATION.format(id=created.id))
