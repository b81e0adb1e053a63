"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- v1: user routes, dependencies and outcome-to-response mapping
- Middleware: request logging and catch-all error handling
"""
