"""Build the configured snapshot repository."""

from thoth_hr.config import HrConfig
from thoth_hr.exceptions import ConfigurationError
from thoth_hr.repositories.base import SnapshotRepository
from thoth_hr.repositories.json_file import JsonFileRepository
from thoth_hr.repositories.memory import InMemoryRepository


def create_repository(config: HrConfig) -> SnapshotRepository:
    """Return the repository selected by ``config.storage.backend``.

    Raises
    ------
    ConfigurationError
        If the backend name is unknown.
    """
    storage = config.storage
    if storage.backend == "memory":
        return InMemoryRepository()
    if storage.backend == "json":
        return JsonFileRepository(
            storage.json_path,
            namespace=storage.namespace,
            pretty=storage.pretty_json,
        )
    if storage.backend == "postgres":
        from thoth_hr.repositories.postgres import PostgresRepository

        return PostgresRepository(config.postgres, namespace=storage.namespace)
    raise ConfigurationError(f"Unknown storage backend: {storage.backend}")
