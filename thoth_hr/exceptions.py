"""Custom exception hierarchy for thoth-hr."""


class ThothHrError(Exception):
    """Base exception for all thoth-hr errors."""


class ConfigurationError(ThothHrError):
    """Raised when configuration is invalid or missing."""


class PersistenceError(ThothHrError):
    """Raised when a snapshot repository cannot load or save."""


class SnapshotFormatError(PersistenceError):
    """Raised when a persisted snapshot cannot be decoded."""


class AuthError(ThothHrError):
    """Base exception for user registration and authentication failures."""


class DuplicateUserError(AuthError):
    """Raised when registering an email that is already taken."""


class InvalidCredentialsError(AuthError):
    """Raised when an email/password pair does not match a registered user."""
