"""Bill (texte législatif) and bill-scrutin link models."""

BILL_DDL = """
CREATE TABLE IF NOT EXISTS bill (
    id VARCHAR PRIMARY KEY,
    title VARCHAR NOT NULL,
    short_title VARCHAR,
    type VARCHAR,
    origin VARCHAR,
    legislature INTEGER,
    official_url VARCHAR
)
"""

BILL_SCRUTIN_DDL = """
CREATE TABLE IF NOT EXISTS bill_scrutin (
    bill_id VARCHAR NOT NULL,
    scrutin_id VARCHAR NOT NULL,
    role VARCHAR,
    PRIMARY KEY (bill_id, scrutin_id)
)
"""
