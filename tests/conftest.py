"""Test fixtures for user-api tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from user_api.application.services.user_service import UserService
from user_api.core.config import Settings, reset_settings
from user_api.infrastructure.memory.in_memory_user_repository import (
    InMemoryUserRepository,
)
from user_api.main import create_application

TEST_BASE_URL = "http://example.com"


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Construct default settings, ignoring any ambient configuration."""
    monkeypatch.delenv("USER_API_VALIDATE_ON_UPDATE", raising=False)
    monkeypatch.delenv("USER_API_CORS_ORIGINS", raising=False)
    reset_settings()
    return Settings()


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Return an empty in-memory store."""
    return InMemoryUserRepository()


@pytest.fixture
def service(repository: InMemoryUserRepository) -> UserService:
    """Return a user service backed by ``repository``."""
    return UserService(repository)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Return a freshly configured application with an empty store."""
    return create_application(settings)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Return an ``httpx.AsyncClient`` configured to talk to the test app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=TEST_BASE_URL) as client:
        yield client


@pytest.fixture
def make_client() -> Callable[[FastAPI], AsyncClient]:
    """Return a factory for clients talking to an arbitrary app."""

    def make(app: FastAPI) -> AsyncClient:
        return AsyncClient(
            transport=ASGITransport(app=app), base_url=TEST_BASE_URL
        )

    return make
