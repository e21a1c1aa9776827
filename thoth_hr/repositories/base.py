"""Repository interface for persisting store snapshots."""

from abc import ABC, abstractmethod

from thoth_hr.models import Snapshot


class SnapshotRepository(ABC):
    """Durable home for a whole-state snapshot.

    Implementations raise :class:`~thoth_hr.exceptions.PersistenceError`
    when the backend cannot be read or written.
    """

    @abstractmethod
    def load(self) -> Snapshot | None:
        """Return the persisted snapshot, or ``None`` if nothing was saved yet."""

    @abstractmethod
    def save(self, snapshot: Snapshot) -> None:
        """Persist ``snapshot``, replacing any previous one."""
