"""
db.py — DuckDB-backed shipment store.

The dataset is a single JSON array file, ingested once into an in-memory
DuckDB table named ``shipments``. A ``ShipmentStore`` is constructed once per
process (the API keeps it on ``app.state``) and handed to every service call.

Usage:
    from shipdash_shared.db import ShipmentStore

    store = ShipmentStore.from_settings()
    store.initialize()                      # optional; queries do it lazily
    rows = store.query("SELECT COUNT(*) AS total FROM shipments")
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Optional

import duckdb
import structlog

from shipdash_shared.config import Settings, settings as default_settings

logger = structlog.get_logger(__name__)

TABLE_NAME = "shipments"

_INDEXES: dict[str, str] = {
    "idx_importer_name": "importer_name",
    "idx_exporter_name": "exporter_name",
    "idx_shipment_date": "shipment_date",
}


class DatasetError(RuntimeError):
    """The shipment dataset file is missing or could not be ingested."""


class ShipmentStore:
    """
    Owns the DuckDB database holding the ``shipments`` table.

    The table and its indexes are created exactly once, either eagerly via
    ``initialize()`` or lazily on the first query. After that the table is
    read-only; every query runs on its own cursor which is closed as soon as
    the rows have been fetched.

    Args:
        dataset_path: Path to the JSON array of shipment records.
        database:     DuckDB database path (``":memory:"`` by default).
        threads:      DuckDB worker thread count.
    """

    def __init__(
        self,
        dataset_path: str | Path,
        *,
        database: str = ":memory:",
        threads: int = 4,
    ) -> None:
        self.dataset_path = Path(dataset_path)
        self.database = database
        self.threads = threads
        self._lock = threading.Lock()
        self._conn: Optional[duckdb.DuckDBPyConnection] = None

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "ShipmentStore":
        cfg = config or default_settings
        return cls(cfg.dataset_path, database=cfg.duckdb_path, threads=cfg.duckdb_threads)

    @property
    def initialized(self) -> bool:
        return self._conn is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """
        Create the ``shipments`` table from the dataset file. Idempotent.

        Raises:
            DatasetError: the dataset file does not exist or DuckDB rejects it.
        """
        with self._lock:
            if self._conn is not None:
                return

            path = self.dataset_path.resolve()
            if not path.is_file():
                raise DatasetError(f"Shipment dataset not found: {path}")

            conn = duckdb.connect(self.database)
            try:
                conn.execute(f"SET threads TO {int(self.threads)}")
                literal = str(path).replace("'", "''")
                conn.execute(
                    f"""
                    CREATE TABLE IF NOT EXISTS {TABLE_NAME} AS
                    SELECT * FROM read_json_auto('{literal}')
                    """
                )
                for index_name, column in _INDEXES.items():
                    conn.execute(
                        f"CREATE INDEX IF NOT EXISTS {index_name} ON {TABLE_NAME}({column})"
                    )
                (row_count,) = conn.execute(f"SELECT COUNT(*) FROM {TABLE_NAME}").fetchone()
            except duckdb.Error as exc:
                conn.close()
                raise DatasetError(f"Failed to load shipment dataset {path}: {exc}") from exc

            self._conn = conn
            logger.info(
                "shipment_table_loaded",
                path=str(path),
                database=self.database,
                rows=row_count,
            )

    def close(self) -> None:
        """Drop the database connection; the next query reloads the dataset."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.info("shipment_store_closed")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @contextmanager
    def cursor(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Yield a per-call cursor on the shared database, always closed on exit."""
        self.initialize()
        with self._lock:
            conn = self._conn
            if conn is None:
                raise DatasetError("Shipment store is closed")
            cur = conn.cursor()
        try:
            yield cur
        finally:
            cur.close()

    def query(self, sql: str, params: Sequence[Any] | None = None) -> list[dict[str, Any]]:
        """Run a read-only query with bound parameters and return rows as dicts."""
        with self.cursor() as cur:
            if params:
                cur.execute(sql, list(params))
            else:
                cur.execute(sql)
            columns = [col[0] for col in cur.description]
            return [dict(zip(columns, row)) for row in cur.fetchall()]

    def scalar(self, sql: str, params: Sequence[Any] | None = None) -> Any:
        """Return the first column of the first row, or None for an empty result."""
        rows = self.query(sql, params)
        if not rows:
            return None
        return next(iter(rows[0].values()))
