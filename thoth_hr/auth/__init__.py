"""User registration and authentication."""

from thoth_hr.auth.passwords import hash_password, verify_password
from thoth_hr.auth.registry import UserRegistry, handle_login, handle_register, public_user

__all__ = [
    "UserRegistry",
    "handle_login",
    "handle_register",
    "hash_password",
    "public_user",
    "verify_password",
]
