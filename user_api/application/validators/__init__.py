from .user_validator import validate_user

__all__ = ["validate_user"]
