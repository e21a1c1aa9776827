"""In-memory domain store with snapshot persistence."""

from thoth_hr.store.hr import HrDataStore

__all__ = ["HrDataStore"]
