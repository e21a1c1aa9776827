"""User model for dashboard accounts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Dashboard account.

    ``password`` is plaintext in the in-memory store and a bcrypt hash in the
    file-backed user registry.
    """

    id: str
    name: str
    email: str
    password: str
