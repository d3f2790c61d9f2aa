"""Ingestion trigger API."""

from web.api.ingestion.views import ingest_deputies_view, ingest_scrutins_view, ingest_view

__all__ = [
    "ingest_view",
    "ingest_scrutins_view",
    "ingest_deputies_view",
]
