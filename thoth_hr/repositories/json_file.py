"""JSON file repository: a key-value document on local disk."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from thoth_hr.config import DEFAULT_NAMESPACE
from thoth_hr.exceptions import PersistenceError
from thoth_hr.models import Snapshot
from thoth_hr.models.factories import RecordFactory
from thoth_hr.repositories.base import SnapshotRepository
from thoth_hr.repositories.serialization import snapshot_from_dict, unwrap_state, wrap_state

logger = logging.getLogger(__name__)


class JsonFileRepository(SnapshotRepository):
    """Persist the snapshot under a namespace key of a JSON document.

    Other keys in the document are left untouched, so several stores can
    share one file.
    """

    def __init__(
        self,
        path: str | Path,
        namespace: str = DEFAULT_NAMESPACE,
        pretty: bool = False,
        factory: RecordFactory | None = None,
    ) -> None:
        """Initialize JSON file repository.

        Parameters
        ----------
        path : str | Path
            Location of the JSON document.
        namespace : str
            Key the snapshot envelope is stored under.
        pretty : bool
            Pretty-print JSON output.
        factory : RecordFactory | None
            Factory used when decoding.
        """
        self.path = Path(path)
        self.namespace = namespace
        self.pretty = pretty
        self.factory = factory

    def load(self) -> Snapshot | None:
        document = self._read_document()
        if self.namespace not in document:
            return None
        snapshot = snapshot_from_dict(unwrap_state(document[self.namespace]), self.factory)
        logger.debug("Loaded snapshot %s from %s", snapshot.summary(), self.path)
        return snapshot

    def save(self, snapshot: Snapshot) -> None:
        document = self._read_document()
        document[self.namespace] = wrap_state(snapshot)

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(document, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self.path}: {exc}") from exc

    def _read_document(self) -> dict[str, Any]:
        """Read the whole key-value document; a missing file is empty."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(document, dict):
            raise PersistenceError(f"{self.path} does not hold a JSON object")
        return document
