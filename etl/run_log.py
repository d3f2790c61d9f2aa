"""Persistent run log - start/success/error entries in ingestion_log."""

from datetime import datetime

import duckdb
from loguru import logger

from app.repositories import IngestionLogRepository
from settings import CRON_SECRET

CRON = "cron"
MANUAL = "manual"
RUNNING, SUCCESS, ERROR = "running", "success", "error"


def detect_trigger(authorization: str | None, cron_secret: str | None = CRON_SECRET) -> str:
    """`cron` when the header carries the cron secret (raw or Bearer), else `manual`."""
    if not authorization or not cron_secret:
        return MANUAL
    if authorization in (cron_secret, f"Bearer {cron_secret}"):
        return CRON
    return MANUAL


def log_start(repo: IngestionLogRepository, job_name: str, triggered_by: str) -> int | None:
    """Record a `running` entry; None when the log itself could not be written."""
    try:
        log_id = repo.create(job_name, triggered_by, datetime.now())
    except duckdb.Error as e:
        logger.error("Failed to write ingestion log (start) for {}: {}", job_name, e)
        return None
    logger.info("Run {} started: {} ({})", log_id, job_name, triggered_by)
    return log_id


def _finish(repo: IngestionLogRepository, log_id: int | None, status: str, **fields) -> None:
    if log_id is None:
        return
    finished_at = datetime.now()
    try:
        # duration from the persisted start, so it survives a restart mid-run
        started_at = repo.get_started_at(log_id)
        duration_ms = int((finished_at - started_at).total_seconds() * 1000) if started_at else None
        repo.finish(log_id, status, finished_at, duration_ms, **fields)
    except duckdb.Error as e:
        logger.error("Failed to write ingestion log ({}) for run {}: {}", status, log_id, e)
        return
    logger.info("Run {} {} in {} ms", log_id, status, duration_ms)


def log_success(repo: IngestionLogRepository, log_id: int | None, details: dict) -> None:
    _finish(repo, log_id, SUCCESS, details=details)


def log_error(repo: IngestionLogRepository, log_id: int | None, message: str) -> None:
    _finish(repo, log_id, ERROR, details={"error": message}, error_message=message)
