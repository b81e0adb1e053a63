"""
Dependency Injection
====================

Container wiring the repository into the use cases and service.
"""
from .container import DIContainer

__all__ = ["DIContainer"]
