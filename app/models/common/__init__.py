"""Common models - base classes, caches and shared tables."""

from app.models.common.base import BaseEntity
from app.models.common.cache import CacheEntry, TtlCache
from app.models.common.ingestion_log import INGESTION_LOG_DDL, INGESTION_LOG_SEQ_DDL

__all__ = [
    "BaseEntity",
    "CacheEntry",
    "TtlCache",
    "INGESTION_LOG_DDL",
    "INGESTION_LOG_SEQ_DDL",
]
