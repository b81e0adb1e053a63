"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_api.api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from user_api.api.v1 import user_router
from user_api.api.v1.dependencies import get_user_service
from user_api.application.services.user_service import UserService
from user_api.core.config import Settings, get_settings
from user_api.core.logging_config import setup_logging
from user_api.di.container import DIContainer

logger = logging.getLogger(__name__)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Logging configuration
    - A fresh DI container (and therefore an empty user store)
    - Error handling, request logging and CORS middleware
    - API route registration
    
    Args:
        settings: Settings to use; defaults to the environment-based singleton
    
    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    
    application = FastAPI(
        title=settings.title,
        description="CRUD API for users held in memory",
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.container = DIContainer(settings)
    
    # Last added runs first: CORS → error handling → request logging → routes
    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Register API routers
    application.include_router(user_router, prefix="/api/users")
    
    @application.get("/")
    async def root():
        """Root endpoint - service metadata."""
        return {
            "status": "running",
            "service": settings.title,
            "version": settings.version,
            "docs": "/docs"
        }
    
    @application.get("/health")
    async def health(service: UserService = Depends(get_user_service)):
        """Health check endpoint."""
        return {"status": "healthy", "users": service.count_users()}
    
    logger.info("%s %s ready", settings.title, settings.version)
    return application


# Create application instance
app = create_application()
