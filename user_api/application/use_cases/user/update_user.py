"""
Update User Use Case
====================

Business use case for replacing a user's name and email.
"""
import logging
from typing import Union

from user_api.application.outcomes import BadRequest, NoContent, NotFound
from user_api.application.validators import validate_user
from user_api.domain.models.user import User
from user_api.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """
    Use case for updating an existing user.
    
    By default the fields are written as given, without the validation
    CreateUserUseCase applies. Whether updates should be held to the same
    rules is undecided; pass ``validate=True`` to enforce them.
    """
    
    def __init__(self, user_repository: UserRepository, validate: bool = False):
        """
        Initialize use case with repository.
        
        Args:
            user_repository: Repository for user persistence
            validate: Run create-time field validation before updating
        """
        self._repository = user_repository
        self._validate = validate
    
    def execute(self, user_id: int, user: User) -> Union[NoContent, NotFound, BadRequest]:
        """
        Execute the update user use case.
        
        Args:
            user_id: Id of the user to update; overrides any id in ``user``
            user: New name and email
            
        Returns:
            NoContent on success, NotFound if the user does not exist,
            BadRequest if validation is enabled and fails
        """
        if self._repository.get(user_id) is None:
            return NotFound()
        
        if self._validate:
            errors = validate_user(user.name, user.email)
            if errors:
                logger.info("Rejected update of user %s: %s", user_id, sorted(errors))
                return BadRequest(errors)
        
        self._repository.update(user.with_id(user_id))
        logger.info("Updated user %s", user_id)
        return NoContent()
