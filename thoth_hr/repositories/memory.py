"""In-memory repository for tests and throwaway stores."""

from typing import Any

from thoth_hr.models import Snapshot
from thoth_hr.models.factories import RecordFactory
from thoth_hr.repositories.base import SnapshotRepository
from thoth_hr.repositories.serialization import snapshot_from_dict, unwrap_state, wrap_state


class InMemoryRepository(SnapshotRepository):
    """Keep the encoded snapshot envelope in memory.

    The snapshot is stored encoded, as a real backend would hold it, so a
    load always goes through decoding.

    Parameters
    ----------
    payload : dict[str, Any] | None
        Pre-existing envelope (or bare state) to load from.
    factory : RecordFactory | None
        Factory used when decoding.
    """

    def __init__(
        self,
        payload: dict[str, Any] | None = None,
        factory: RecordFactory | None = None,
    ) -> None:
        self.payload = payload
        self.factory = factory
        self.save_count = 0

    def load(self) -> Snapshot | None:
        if self.payload is None:
            return None
        return snapshot_from_dict(unwrap_state(self.payload), self.factory)

    def save(self, snapshot: Snapshot) -> None:
        self.payload = wrap_state(snapshot)
        self.save_count += 1
