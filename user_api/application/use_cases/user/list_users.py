"""
List Users Use Case
===================
"""
from user_api.application.outcomes import Ok
from user_api.domain.repositories.user_repository import UserRepository


class ListUsersUseCase:
    """Use case for listing all users ordered by name."""
    
    def __init__(self, user_repository: UserRepository):
        self._repository = user_repository
    
    def execute(self) -> Ok:
        return Ok(self._repository.list())
