"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .repository_provider import RepositoryProvider
from .user_provider import UserProvider

__all__ = [
    "RepositoryProvider",
    "UserProvider",
]
