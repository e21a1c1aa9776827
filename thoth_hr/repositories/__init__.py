"""Snapshot repositories: where the store's state is persisted."""

from thoth_hr.repositories.base import SnapshotRepository
from thoth_hr.repositories.factory import create_repository
from thoth_hr.repositories.json_file import JsonFileRepository
from thoth_hr.repositories.memory import InMemoryRepository

__all__ = [
    "InMemoryRepository",
    "JsonFileRepository",
    "SnapshotRepository",
    "create_repository",
]
