"""Password hashing with bcrypt."""

import bcrypt


def _to_bcrypt_secret(password: str) -> bytes:
    """bcrypt only uses the first 72 bytes; truncate explicitly."""
    secret = password.encode("utf-8")
    if len(secret) > 72:
        secret = secret[:72]
    return secret


def hash_password(password: str, rounds: int = 10) -> str:
    """Return a bcrypt hash as a UTF-8 string."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_to_bcrypt_secret(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_to_bcrypt_secret(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
