"""Individual deputy position in a scrutin."""

SCRUTIN_VOTE_DDL = """
CREATE TABLE IF NOT EXISTS scrutin_vote (
    scrutin_id VARCHAR NOT NULL,
    acteur_ref VARCHAR NOT NULL,
    position VARCHAR NOT NULL,
    PRIMARY KEY (scrutin_id, acteur_ref)
)
"""
