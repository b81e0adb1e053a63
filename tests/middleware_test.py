"""Tests for request logging and error-handling middleware."""

from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from user_api.api.v1.dependencies import get_user_service


class BrokenUserService:
    """Service double whose every call fails."""

    def list_users(self) -> None:
        raise RuntimeError("store exploded: secret detail")


@pytest.mark.asyncio
async def test_request_is_logged(
    client: AsyncClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="user_api")

    r = await client.get("/api/users/999")
    assert r.status_code == 404

    messages = [
        rec.getMessage()
        for rec in caplog.records
        if rec.name == "user_api.api.middleware"
    ]
    assert len(messages) == 1
    assert messages[0].startswith("GET /api/users/999 -> 404")


@pytest.mark.asyncio
async def test_unexpected_error(
    app: FastAPI, client: AsyncClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="user_api")
    app.dependency_overrides[get_user_service] = BrokenUserService

    r = await client.get("/api/users")

    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}
    assert "secret" not in r.text

    records = [
        rec for rec in caplog.records if rec.name == "user_api.api.middleware"
    ]
    # One access line from the logging middleware, one traceback from the
    # error handler.
    assert any(
        rec.getMessage().startswith("GET /api/users -> 500") for rec in records
    )
    errors = [rec for rec in records if rec.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].exc_info is not None
