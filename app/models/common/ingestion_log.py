"""Ingestion run log table."""

INGESTION_LOG_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS ingestion_log_seq START 1"

INGESTION_LOG_DDL = """
CREATE TABLE IF NOT EXISTS ingestion_log (
    id INTEGER PRIMARY KEY DEFAULT nextval('ingestion_log_seq'),
    job_name VARCHAR NOT NULL,
    triggered_by VARCHAR NOT NULL,
    status VARCHAR NOT NULL,
    started_at TIMESTAMP NOT NULL,
    finished_at TIMESTAMP,
    duration_ms BIGINT,
    details JSON,
    error_message VARCHAR
)
"""
