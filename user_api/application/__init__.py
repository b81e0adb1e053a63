"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: one per CRUD operation
- Services: UserService, the entry point used by the API layer
- Outcomes: structured results the API layer turns into responses
- DTOs: Pydantic request/response models
"""
