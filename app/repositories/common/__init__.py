"""Common repositories."""

from app.repositories.common.ingestion_log import IngestionLogRepository

__all__ = ["IngestionLogRepository"]
