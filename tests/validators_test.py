"""Tests for user field validation."""

from __future__ import annotations

import pytest

from user_api.application.validators import validate_user


def test_valid_user() -> None:
    assert validate_user("Alice", "alice@example.com") == {}


def test_empty_name_and_bad_email_both_reported() -> None:
    errors = validate_user("", "x")

    assert set(errors) == {"name", "email"}
    assert errors["name"] == ["Name is required"]
    assert errors["email"][0].startswith("Invalid email address")


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_blank_names_rejected(name: str) -> None:
    assert "name" in validate_user(name, "alice@example.com")


@pytest.mark.parametrize(
    "email",
    ["alice", "alice@", "@example.com", "alice@@example.com", "a b@example.com"],
)
def test_malformed_emails_rejected(email: str) -> None:
    assert "email" in validate_user("Alice", email)


def test_missing_email() -> None:
    assert validate_user("Alice", "") == {"email": ["Email is required"]}


@pytest.mark.parametrize(
    "email", ["user@mail.test", "bob@localhost", "Ünïcode@exämple.com"]
)
def test_special_use_and_unicode_domains_accepted(email: str) -> None:
    assert validate_user("Alice", email) == {}
