"""SQLite-backed record store standing in for the validation spreadsheet."""

import json
import logging
import sqlite3
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from landcover_pipeline.models.record import FlatOutputRecord
from landcover_pipeline.validation import ValidationUpdate

logger = logging.getLogger(__name__)


class StoredRecord:
    """A stored row and its locator."""

    def __init__(self, row_id: int, record: FlatOutputRecord):
        self.row_id = row_id
        self.record = record


class RunRecord:
    """Record of a transformation run."""

    def __init__(
        self,
        id: int,
        country_code: str,
        started_at: datetime,
        finished_at: Optional[datetime],
        status: str,
        items_received: int,
        items_appended: int,
        items_skipped: int,
    ):
        self.id = id
        self.country_code = country_code
        self.started_at = started_at
        self.finished_at = finished_at
        self.status = status
        self.items_received = items_received
        self.items_appended = items_appended
        self.items_skipped = items_skipped


class RecordStore:
    """
    Append-only store of flat rows, addressed by row id.
    Rows are deduplicated by submission uuid; only validation-workflow columns are
    ever updated after append.
    """

    def __init__(self, db_path: str | Path = "landcover.db"):
        self._db_path = Path(db_path)
        self._ensure_schema()

    def _connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        schema_path = Path(__file__).parent / "schema.sql"
        with self._connection() as conn:
            conn.executescript(schema_path.read_text())

    def _deserialize(self, row: sqlite3.Row) -> StoredRecord:
        record = FlatOutputRecord.model_validate(json.loads(row["data"]))
        return StoredRecord(row_id=row["row_id"], record=record)

    def append(self, records: Iterable[FlatOutputRecord]) -> tuple[int, int]:
        """
        Append rows in order. Returns (appended, skipped); rows whose uuid is already
        stored are skipped.
        """
        now = datetime.now(timezone.utc).isoformat()
        appended = 0
        skipped = 0
        with self._connection() as conn:
            for record in records:
                if record.uuid:
                    existing = conn.execute(
                        "SELECT row_id FROM records WHERE uuid = ?", (record.uuid,)
                    ).fetchone()
                    if existing:
                        logger.debug("Skipping %s: already stored as row %d", record.uuid, existing["row_id"])
                        skipped += 1
                        continue
                conn.execute(
                    """
                    INSERT INTO records (uuid, country_code, validation_status, data, appended_at)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (
                        record.uuid,
                        record.country_code,
                        record.validation_status,
                        json.dumps(record.model_dump(mode="json")),
                        now,
                    ),
                )
                appended += 1
            conn.commit()
        return appended, skipped

    def get_all(self) -> list[StoredRecord]:
        """Return all rows in append order."""
        with self._connection() as conn:
            rows = conn.execute("SELECT * FROM records ORDER BY row_id").fetchall()
        return [self._deserialize(r) for r in rows]

    def get_by_status(self, status: str) -> list[StoredRecord]:
        """Return rows with the given validation status."""
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT * FROM records WHERE validation_status = ? ORDER BY row_id",
                (status,),
            ).fetchall()
        return [self._deserialize(r) for r in rows]

    def get_by_country(self, country_code: str) -> list[StoredRecord]:
        """Return rows for one country."""
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT * FROM records WHERE country_code = ? ORDER BY row_id",
                (country_code.upper(),),
            ).fetchall()
        return [self._deserialize(r) for r in rows]

    def get_row(self, row_id: int) -> Optional[StoredRecord]:
        """Get single row by id."""
        with self._connection() as conn:
            row = conn.execute("SELECT * FROM records WHERE row_id = ?", (row_id,)).fetchone()
        return self._deserialize(row) if row else None

    def find_by_uuid(self, uuid: str) -> Optional[StoredRecord]:
        """Get the row holding a submission uuid."""
        with self._connection() as conn:
            row = conn.execute("SELECT * FROM records WHERE uuid = ?", (uuid,)).fetchone()
        return self._deserialize(row) if row else None

    def update_validation(self, row_id: int, update: ValidationUpdate) -> Optional[FlatOutputRecord]:
        """
        Write verdict values into the row's workflow columns. Values for columns the
        row schema does not have are ignored. Returns the updated record, or None if
        the row does not exist.
        """
        stored = self.get_row(row_id)
        if stored is None:
            return None
        columns = set(FlatOutputRecord.columns())
        changes = {k: v for k, v in update.model_dump().items() if k in columns}
        record = stored.record.model_copy(update=changes)
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            conn.execute(
                "UPDATE records SET validation_status = ?, data = ?, updated_at = ? WHERE row_id = ?",
                (record.validation_status, json.dumps(record.model_dump(mode="json")), now, row_id),
            )
            conn.commit()
        return record

    def start_run(self, country_code: str) -> RunRecord:
        """Record start of a transformation run. Returns RunRecord with id."""
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            cursor = conn.execute(
                "INSERT INTO runs (country_code, started_at, status) VALUES (?, ?, 'running')",
                (country_code, now),
            )
            conn.commit()
            run_id = cursor.lastrowid
        return RunRecord(
            id=run_id or 0,
            country_code=country_code,
            started_at=datetime.fromisoformat(now),
            finished_at=None,
            status="running",
            items_received=0,
            items_appended=0,
            items_skipped=0,
        )

    def finish_run(
        self,
        run_id: int,
        items_received: int,
        items_appended: int,
        items_skipped: int,
        status: str = "completed",
    ) -> None:
        """Record completion of a transformation run."""
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            conn.execute(
                """
                UPDATE runs SET finished_at = ?, status = ?, items_received = ?,
                    items_appended = ?, items_skipped = ?
                WHERE id = ?
                """,
                (now, status, items_received, items_appended, items_skipped, run_id),
            )
            conn.commit()

    def get_run(self, run_id: int) -> Optional[RunRecord]:
        """Get a run by id."""
        with self._connection() as conn:
            row = conn.execute("SELECT * FROM runs WHERE id = ?", (run_id,)).fetchone()
        if not row:
            return None
        return RunRecord(
            id=row["id"],
            country_code=row["country_code"],
            started_at=datetime.fromisoformat(row["started_at"]),
            finished_at=datetime.fromisoformat(row["finished_at"]) if row["finished_at"] else None,
            status=row["status"],
            items_received=row["items_received"],
            items_appended=row["items_appended"],
            items_skipped=row["items_skipped"],
        )
