"""Pytest configuration and fixtures."""

import itertools
from datetime import datetime

import pytest

from thoth_hr.models import Snapshot
from thoth_hr.models.factories import RecordFactory
from thoth_hr.repositories import InMemoryRepository
from thoth_hr.store import HrDataStore

FIXED_NOW = datetime(2024, 6, 15, 9, 30)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fixed_now() -> datetime:
    """Timestamp returned by the test clock."""
    return FIXED_NOW


@pytest.fixture
def factory() -> RecordFactory:
    """Factory with sequential ids and a fixed clock."""
    counter = itertools.count(1)
    return RecordFactory(id_factory=lambda: f"id-{next(counter):04d}", clock=lambda: FIXED_NOW)


@pytest.fixture
def repository() -> InMemoryRepository:
    """Empty in-memory repository."""
    return InMemoryRepository()


@pytest.fixture
def store(repository: InMemoryRepository, factory: RecordFactory) -> HrDataStore:
    """Store starting from an empty snapshot."""
    return HrDataStore(repository, seed=Snapshot(), factory=factory)


@pytest.fixture
def sample_member_id() -> str:
    """Sample member ID."""
    return "m1"
