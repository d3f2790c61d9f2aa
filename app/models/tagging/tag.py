"""Thematic tags and their assignments to scrutins and bills."""

THEMATIC_TAG_DDL = """
CREATE TABLE IF NOT EXISTS thematic_tag (
    id VARCHAR PRIMARY KEY,
    slug VARCHAR NOT NULL,
    label VARCHAR NOT NULL
)
"""

SCRUTIN_THEMATIC_TAG_DDL = """
CREATE TABLE IF NOT EXISTS scrutin_thematic_tag (
    scrutin_id VARCHAR NOT NULL,
    tag_id VARCHAR NOT NULL,
    confidence DOUBLE NOT NULL,
    source VARCHAR NOT NULL,
    PRIMARY KEY (scrutin_id, tag_id)
)
"""

BILL_THEMATIC_TAG_DDL = """
CREATE TABLE IF NOT EXISTS bill_thematic_tag (
    bill_id VARCHAR NOT NULL,
    tag_id VARCHAR NOT NULL,
    confidence DOUBLE NOT NULL,
    source VARCHAR NOT NULL,
    PRIMARY KEY (bill_id, tag_id)
)
"""
