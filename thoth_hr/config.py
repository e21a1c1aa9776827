"""Configuration management for thoth-hr."""

from dataclasses import dataclass, field
from pathlib import Path

from thoth_hr.exceptions import ConfigurationError

STORAGE_BACKENDS = ("memory", "json", "postgres")
DEFAULT_NAMESPACE = "thoth-hr-store"


@dataclass
class StorageConfig:
    """Snapshot persistence configuration."""

    backend: str = "json"
    json_path: Path = field(default_factory=lambda: Path("data/thoth-hr-store.json"))
    namespace: str = DEFAULT_NAMESPACE
    pretty_json: bool = False

    def __post_init__(self) -> None:
        if self.backend not in STORAGE_BACKENDS:
            raise ConfigurationError(
                f"Unknown storage backend {self.backend!r}, expected one of {STORAGE_BACKENDS}"
            )


@dataclass
class PostgresConfig:
    """PostgreSQL connection configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "thoth_hr"
    user: str = "postgres"
    password: str = "postgres"
    table: str = "kv_store"

    @property
    def connection_string(self) -> str:
        """Get connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class AuthConfig:
    """User registry configuration."""

    users_file: Path = field(default_factory=lambda: Path("users.json"))
    bcrypt_rounds: int = 10


@dataclass
class HrConfig:
    """Main configuration for thoth-hr."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "HrConfig":
        """Create config from environment variables."""
        import os

        storage = StorageConfig(
            backend=os.getenv("THOTH_STORAGE_BACKEND", "json"),
            json_path=Path(os.getenv("THOTH_STORE_PATH", "data/thoth-hr-store.json")),
            namespace=os.getenv("THOTH_STORE_NAMESPACE", DEFAULT_NAMESPACE),
            pretty_json=os.getenv("THOTH_PRETTY_JSON", "false").lower() == "true",
        )

        try:
            postgres = PostgresConfig(
                host=os.getenv("POSTGRES_HOST", "localhost"),
                port=int(os.getenv("POSTGRES_PORT", "5432")),
                database=os.getenv("POSTGRES_DB", "thoth_hr"),
                user=os.getenv("POSTGRES_USER", "postgres"),
                password=os.getenv("POSTGRES_PASSWORD", "postgres"),
                table=os.getenv("THOTH_PG_TABLE", "kv_store"),
            )
            auth = AuthConfig(
                users_file=Path(os.getenv("THOTH_USERS_FILE", "users.json")),
                bcrypt_rounds=int(os.getenv("THOTH_BCRYPT_ROUNDS", "10")),
            )
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric setting: {exc}") from exc

        return cls(
            storage=storage,
            postgres=postgres,
            auth=auth,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
