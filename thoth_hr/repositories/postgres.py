"""PostgreSQL repository: one JSONB row per namespace."""

import logging

import psycopg
from psycopg import sql
from psycopg.types.json import Jsonb

from thoth_hr.config import DEFAULT_NAMESPACE, PostgresConfig
from thoth_hr.exceptions import PersistenceError
from thoth_hr.models import Snapshot
from thoth_hr.models.factories import RecordFactory
from thoth_hr.repositories.base import SnapshotRepository
from thoth_hr.repositories.serialization import snapshot_from_dict, unwrap_state, wrap_state

logger = logging.getLogger(__name__)


class PostgresRepository(SnapshotRepository):
    """Persist the snapshot envelope in a key-value table.

    The table is created on first use::

        CREATE TABLE kv_store (
            key TEXT PRIMARY KEY,
            value JSONB NOT NULL,
            updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
    """

    def __init__(
        self,
        config: PostgresConfig | None = None,
        namespace: str = DEFAULT_NAMESPACE,
        factory: RecordFactory | None = None,
    ) -> None:
        self.config = config or PostgresConfig()
        self.namespace = namespace
        self.factory = factory
        self._table_ready = False

    def load(self) -> Snapshot | None:
        query = sql.SQL("SELECT value FROM {} WHERE key = %s").format(
            sql.Identifier(self.config.table)
        )
        try:
            with psycopg.connect(self.config.connection_string) as conn:
                self._ensure_table(conn)
                with conn.cursor() as cur:
                    cur.execute(query, (self.namespace,))
                    row = cur.fetchone()
        except psycopg.Error as exc:
            raise PersistenceError(f"Cannot load snapshot {self.namespace!r}: {exc}") from exc

        if row is None:
            return None
        return snapshot_from_dict(unwrap_state(row[0]), self.factory)

    def save(self, snapshot: Snapshot) -> None:
        query = sql.SQL(
            "INSERT INTO {} (key, value, updated_at) VALUES (%s, %s, now()) "
            "ON CONFLICT (key) DO UPDATE SET value = EXCLUDED.value, updated_at = now()"
        ).format(sql.Identifier(self.config.table))
        try:
            with psycopg.connect(self.config.connection_string) as conn:
                self._ensure_table(conn)
                with conn.cursor() as cur:
                    cur.execute(query, (self.namespace, Jsonb(wrap_state(snapshot))))
        except psycopg.Error as exc:
            raise PersistenceError(f"Cannot save snapshot {self.namespace!r}: {exc}") from exc
        logger.debug("Saved snapshot %s to table %s", snapshot.summary(), self.config.table)

    def _ensure_table(self, conn: psycopg.Connection) -> None:
        if self._table_ready:
            return
        with conn.cursor() as cur:
            cur.execute(
                sql.SQL(
                    "CREATE TABLE IF NOT EXISTS {} ("
                    "key TEXT PRIMARY KEY, "
                    "value JSONB NOT NULL, "
                    "updated_at TIMESTAMPTZ NOT NULL DEFAULT now())"
                ).format(sql.Identifier(self.config.table))
            )
        self._table_ready = True
