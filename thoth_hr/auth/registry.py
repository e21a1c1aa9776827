"""File-backed user registry: registration and authentication.

Users live in one JSON document, each password bcrypt-hashed. A
registration either writes the whole updated document or leaves it
untouched.
"""

import json
import logging
import os
import secrets
from pathlib import Path
from typing import Any, Callable

from thoth_hr.auth.passwords import hash_password, verify_password
from thoth_hr.config import AuthConfig
from thoth_hr.exceptions import (
    AuthError,
    DuplicateUserError,
    InvalidCredentialsError,
    PersistenceError,
)
from thoth_hr.models import User
from thoth_hr.models.factories import RecordFactory
from thoth_hr.repositories.serialization import record_from_dict, record_to_dict

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
DUPLICATE_USER_MESSAGE = "User already exists"
MISSING_FIELDS_MESSAGE = "Name, email and password are required"
SERVER_ERROR_MESSAGE = "Something went wrong, please try again"


def _normalize_email(email: str) -> str:
    return email.strip().casefold()


class UserRegistry:
    """Registered users stored in a JSON file.

    Parameters
    ----------
    users_file : str | Path
        JSON document holding the list of users.
    rounds : int
        bcrypt cost factor.
    id_factory : Callable[[], str] | None
        Id generator for new users.
    """

    def __init__(
        self,
        users_file: str | Path,
        rounds: int = 10,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.users_file = Path(users_file)
        self.rounds = rounds
        self._factory = RecordFactory(id_factory=id_factory)
        self._dummy_hash: str | None = None

    @classmethod
    def from_config(cls, config: AuthConfig) -> "UserRegistry":
        """Create a registry from auth configuration."""
        return cls(config.users_file, rounds=config.bcrypt_rounds)

    def get_users(self) -> list[User]:
        """Read all registered users; a missing file means none."""
        if not self.users_file.exists():
            return []
        try:
            with open(self.users_file, encoding="utf-8") as f:
                raw = json.load(f)
            return [record_from_dict(User, item, self._factory) for item in raw]
        except (OSError, json.JSONDecodeError, TypeError, AttributeError) as exc:
            raise PersistenceError(f"Cannot read {self.users_file}: {exc}") from exc

    def find_by_email(self, email: str) -> User | None:
        """Return the user registered with ``email``, ignoring case."""
        wanted = _normalize_email(email)
        for user in self.get_users():
            if _normalize_email(user.email) == wanted:
                return user
        return None

    def register(self, name: str, email: str, password: str) -> User:
        """Register a new user with a hashed password.

        Raises
        ------
        DuplicateUserError
            If the email is already registered.
        """
        users = self.get_users()
        wanted = _normalize_email(email)
        if any(_normalize_email(u.email) == wanted for u in users):
            raise DuplicateUserError(DUPLICATE_USER_MESSAGE)

        user = self._factory.user(
            name=name.strip(),
            email=email.strip(),
            password=hash_password(password, self.rounds),
        )
        self._write([*users, user])
        logger.info("Registered user %s", user.id)
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Return the user matching ``email`` and ``password``.

        Raises
        ------
        InvalidCredentialsError
            If the email is unknown or the password does not match; the
            message is the same in both cases.
        """
        user = self.find_by_email(email)
        if user is None:
            # Unknown emails pay the same bcrypt cost as known ones
            verify_password(password, self._placeholder_hash())
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)
        if not verify_password(password, user.password):
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)
        return user

    def _placeholder_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = hash_password(secrets.token_urlsafe(16), self.rounds)
        return self._dummy_hash

    def _write(self, users: list[User]) -> None:
        tmp_path = self.users_file.with_name(self.users_file.name + ".tmp")
        try:
            self.users_file.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump([record_to_dict(u) for u in users], f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.users_file)
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self.users_file}: {exc}") from exc


def public_user(user: User) -> dict[str, str]:
    """User fields safe to return to a client (no password hash)."""
    return {"id": user.id, "name": user.name, "email": user.email}


def handle_register(registry: UserRegistry, body: dict[str, Any]) -> tuple[int, dict[str, Any]]:
    """Registration endpoint: returns ``(status_code, payload)``."""
    name = str(body.get("name") or "").strip()
    email = str(body.get("email") or "").strip()
    password = str(body.get("password") or "")
    if not (name and email and password):
        return 400, {"success": False, "message": MISSING_FIELDS_MESSAGE}

    try:
        user = registry.register(name, email, password)
    except AuthError as exc:
        return 400, {"success": False, "message": str(exc)}
    except PersistenceError:
        logger.exception("Registration failed")
        return 500, {"success": False, "message": SERVER_ERROR_MESSAGE}
    return 201, {"success": True, "user": public_user(user)}


def handle_login(registry: UserRegistry, body: dict[str, Any]) -> tuple[int, dict[str, Any]]:
    """Login endpoint: returns ``(status_code, payload)``."""
    email = str(body.get("email") or "")
    password = str(body.get("password") or "")
    try:
        user = registry.authenticate(email, password)
    except InvalidCredentialsError:
        return 401, {"success": False, "message": INVALID_CREDENTIALS_MESSAGE}
    except PersistenceError:
        logger.exception("Login failed")
        return 500, {"success": False, "message": SERVER_ERROR_MESSAGE}
    return 200, {"success": True, "user": public_user(user)}
