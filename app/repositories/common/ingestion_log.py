"""Ingestion log repository - one row per job run."""

import json
from datetime import datetime

from app.repositories.base import BaseRepository


class IngestionLogRepository(BaseRepository):
    """Repository for ingestion_log rows."""

    def create(self, job_name: str, triggered_by: str, started_at: datetime) -> int:
        """Insert a `running` entry and return its id."""
        self._check_writable()
        row = self.fetchone(
            """
            INSERT INTO ingestion_log (job_name, triggered_by, status, started_at)
            VALUES (?, ?, 'running', ?)
            RETURNING id
            """,
            [job_name, triggered_by, started_at],
        )
        return row[0]

    def get_started_at(self, log_id: int) -> datetime | None:
        row = self.fetchone("SELECT started_at FROM ingestion_log WHERE id = ?", [log_id])
        return row[0] if row else None

    def finish(
        self,
        log_id: int,
        status: str,
        finished_at: datetime,
        duration_ms: int | None,
        details: dict | None = None,
        error_message: str | None = None,
    ) -> None:
        self._check_writable()
        self.execute(
            """
            UPDATE ingestion_log
            SET status = ?, finished_at = ?, duration_ms = ?, details = ?, error_message = ?
            WHERE id = ?
            """,
            [
                status,
                finished_at,
                duration_ms,
                json.dumps(details, ensure_ascii=False) if details is not None else None,
                error_message,
                log_id,
            ],
        )

    def get(self, log_id: int) -> dict | None:
        cursor = self.execute(
            """
            SELECT id, job_name, triggered_by, status, started_at, finished_at,
                   duration_ms, details, error_message
            FROM ingestion_log WHERE id = ?
            """,
            [log_id],
        )
        row = cursor.fetchone()
        if row is None:
            return None
        result = dict(zip([d[0] for d in cursor.description], row, strict=True))
        if result["details"] is not None:
            result["details"] = json.loads(result["details"])
        return result
