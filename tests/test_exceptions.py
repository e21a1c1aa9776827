"""Tests for custom exception hierarchy."""

from thoth_hr.exceptions import (
    AuthError,
    ConfigurationError,
    DuplicateUserError,
    InvalidCredentialsError,
    PersistenceError,
    SnapshotFormatError,
    ThothHrError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_base_is_exception(self) -> None:
        assert isinstance(ThothHrError("test"), Exception)

    def test_configuration_error_is_base(self) -> None:
        assert isinstance(ConfigurationError("test"), ThothHrError)

    def test_snapshot_format_is_persistence_error(self) -> None:
        err = SnapshotFormatError("test")
        assert isinstance(err, PersistenceError)
        assert isinstance(err, ThothHrError)

    def test_auth_errors(self) -> None:
        assert isinstance(DuplicateUserError("test"), AuthError)
        assert isinstance(InvalidCredentialsError("test"), AuthError)
        assert isinstance(AuthError("test"), ThothHrError)

    def test_exception_message(self) -> None:
        err = DuplicateUserError("User already exists")
        assert str(err) == "User already exists"
