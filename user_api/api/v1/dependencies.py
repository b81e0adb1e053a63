"""
Dependencies
============

FastAPI dependencies resolving objects from the application's DI container.
"""
from fastapi import Request

from user_api.application.services.user_service import UserService
from user_api.di.container import DIContainer


def get_container(request: Request) -> DIContainer:
    """
    Get the DI container of the application serving this request.
    
    Returns:
        DIContainer created by ``create_application``
    """
    return request.app.state.container


def get_user_service(request: Request) -> UserService:
    """
    Get the user service instance.
    
    Returns:
        UserService bound to this application's store
    """
    return get_container(request).get(UserService)
