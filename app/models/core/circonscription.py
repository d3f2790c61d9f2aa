"""Circonscription (electoral constituency) model."""

CIRCONSCRIPTION_DDL = """
CREATE TABLE IF NOT EXISTS circonscription (
    id VARCHAR PRIMARY KEY,
    label VARCHAR NOT NULL,
    geometry JSON
)
"""
