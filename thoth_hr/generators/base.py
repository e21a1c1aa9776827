"""Base generator class for all data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker

from thoth_hr.models.factories import RecordFactory


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: Faker instance creation, seed-based
    reproducibility, and a :class:`RecordFactory` whose ids come from Faker
    so seeded runs produce stable ids.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)
        self.factory = RecordFactory(id_factory=lambda: self.fake.uuid4().replace("-", ""))
