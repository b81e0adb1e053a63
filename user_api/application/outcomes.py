"""
Outcomes
========

Structured results returned by the user use cases.

Expected failures (missing user, invalid input) are values, not exceptions.
The API layer maps each outcome type onto an HTTP status.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

USER_NOT_FOUND = "User not found"
USER_LOCATION = "api/users/{id}"


@dataclass(frozen=True)
class Ok:
    """Success with a payload."""
    payload: Any


@dataclass(frozen=True)
class Created:
    """A new resource and where to find it."""
    payload: Any
    location: str


@dataclass(frozen=True)
class NoContent:
    """Success with nothing to return."""


@dataclass(frozen=True)
class NotFound:
    """The addressed user does not exist."""
    message: str = USER_NOT_FOUND


@dataclass(frozen=True)
class BadRequest:
    """Input rejected; ``errors`` maps field name to messages."""
    errors: Dict[str, List[str]] = field(default_factory=dict)


Outcome = Union[Ok, Created, NoContent, NotFound, BadRequest]
