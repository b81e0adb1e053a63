"""
Domain Layer
============

Core business objects and contracts.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: the User entity
- Repository Interfaces: Abstract contracts for data access
"""
