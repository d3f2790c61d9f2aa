"""Sitting (séance / réunion) and its child tables."""

SITTING_DDL = """
CREATE TABLE IF NOT EXISTS sitting (
    id VARCHAR PRIMARY KEY,
    legislature INTEGER,
    date DATE NOT NULL,
    start_time VARCHAR,
    end_time VARCHAR,
    type VARCHAR NOT NULL,
    title VARCHAR NOT NULL,
    description VARCHAR,
    location VARCHAR,
    organe_ref VARCHAR
)
"""

AGENDA_ITEM_DDL = """
CREATE TABLE IF NOT EXISTS agenda_item (
    sitting_id VARCHAR NOT NULL,
    numero INTEGER NOT NULL,
    scheduled_time VARCHAR,
    title VARCHAR NOT NULL,
    description VARCHAR,
    category VARCHAR NOT NULL,
    reference_code VARCHAR,
    official_url VARCHAR,
    PRIMARY KEY (sitting_id, numero)
)
"""

SOURCE_METADATA_DDL = """
CREATE TABLE IF NOT EXISTS source_metadata (
    sitting_id VARCHAR PRIMARY KEY,
    original_source_url VARCHAR NOT NULL,
    last_synced_at TIMESTAMP NOT NULL,
    checksum VARCHAR NOT NULL
)
"""

SITTING_ATTENDANCE_DDL = """
CREATE TABLE IF NOT EXISTS sitting_attendance (
    sitting_id VARCHAR NOT NULL,
    acteur_ref VARCHAR NOT NULL,
    presence VARCHAR NOT NULL,
    PRIMARY KEY (sitting_id, acteur_ref)
)
"""
