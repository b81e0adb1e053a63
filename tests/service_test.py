"""Tests for the user service and its use cases."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from user_api.application.outcomes import (
    BadRequest,
    Created,
    NoContent,
    NotFound,
    Ok,
)
from user_api.application.services.user_service import UserService
from user_api.domain.models.user import User
from user_api.infrastructure.memory.in_memory_user_repository import (
    InMemoryUserRepository,
)


def test_create_on_fresh_store(service: UserService) -> None:
    outcome = service.create_user(User(name="Alice", email="alice@example.com"))

    assert outcome == Created(
        User(id=1, name="Alice", email="alice@example.com"), "api/users/1"
    )


def test_create_rejects_invalid_fields(
    service: UserService, repository: InMemoryUserRepository
) -> None:
    outcome = service.create_user(User(name="", email="x"))

    assert isinstance(outcome, BadRequest)
    assert set(outcome.errors) == {"name", "email"}
    assert repository.count() == 0


def test_list_sorted_by_name(service: UserService) -> None:
    service.create_user(User(name="Bob", email="bob@example.com"))
    service.create_user(User(name="Alice", email="alice@example.com"))

    outcome = service.list_users()

    assert isinstance(outcome, Ok)
    assert [u.name for u in outcome.payload] == ["Alice", "Bob"]


def test_not_found_is_uniform(service: UserService) -> None:
    payload = User(name="X", email="x@y.com")

    assert service.get_user(999) == NotFound("User not found")
    assert service.update_user(999, payload) == NotFound("User not found")
    assert service.delete_user(999) == NotFound("User not found")


def test_update_ignores_payload_id(
    service: UserService, repository: InMemoryUserRepository
) -> None:
    service.create_user(User(name="Alice", email="alice@example.com"))
    service.create_user(User(name="Bob", email="bob@example.com"))

    outcome = service.update_user(2, User(id=999, name="X", email="x@y.com"))

    assert outcome == NoContent()
    assert repository.get(2) == User(id=2, name="X", email="x@y.com")
    assert repository.get(999) is None
    assert repository.get(1) == User(id=1, name="Alice", email="alice@example.com")


def test_update_skips_validation_by_default(
    service: UserService, repository: InMemoryUserRepository
) -> None:
    service.create_user(User(name="Alice", email="alice@example.com"))

    outcome = service.update_user(1, User(name="", email="not-an-email"))

    assert outcome == NoContent()
    assert repository.get(1) == User(id=1, name="", email="not-an-email")


def test_update_validation_when_enabled(
    repository: InMemoryUserRepository,
) -> None:
    service = UserService(repository, validate_on_update=True)
    service.create_user(User(name="Alice", email="alice@example.com"))

    outcome = service.update_user(1, User(name="", email="not-an-email"))

    assert isinstance(outcome, BadRequest)
    assert set(outcome.errors) == {"name", "email"}
    assert repository.get(1) == User(id=1, name="Alice", email="alice@example.com")
    # A missing user is still reported as not found, not as invalid.
    assert service.update_user(5, User(name="", email="")) == NotFound()


def test_delete_twice(service: UserService) -> None:
    service.create_user(User(name="Alice", email="alice@example.com"))

    assert service.delete_user(1) == NoContent()
    assert service.delete_user(1) == NotFound()
    assert service.get_user(1) == NotFound()


def test_ids_increase_across_deletes(service: UserService) -> None:
    ids = []
    for i in range(5):
        outcome = service.create_user(
            User(name=f"user{i}", email=f"user{i}@example.com")
        )
        ids.append(outcome.payload.id)
        if i % 2 == 0:
            service.delete_user(outcome.payload.id)

    assert ids == [1, 2, 3, 4, 5]
    assert service.count_users() == 2


def test_concurrent_creates(service: UserService) -> None:
    count = 100

    def create(i: int) -> int:
        outcome = service.create_user(
            User(name=f"user{i}", email=f"user{i}@example.com")
        )
        assert isinstance(outcome, Created)
        return outcome.payload.id

    with ThreadPoolExecutor(max_workers=10) as executor:
        ids = list(executor.map(create, range(count)))

    assert sorted(ids) == list(range(1, count + 1))
