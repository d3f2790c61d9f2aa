"""Scrutin (roll-call vote) model."""

SCRUTIN_DDL = """
CREATE TABLE IF NOT EXISTS scrutin (
    id VARCHAR PRIMARY KEY,
    numero INTEGER NOT NULL,
    legislature INTEGER,
    sitting_id VARCHAR,
    date_scrutin DATE NOT NULL,
    type_vote_code VARCHAR,
    type_vote_libelle VARCHAR,
    sort_code VARCHAR NOT NULL,
    sort_libelle VARCHAR,
    titre VARCHAR NOT NULL,
    objet_libelle VARCHAR,
    demandeur_texte VARCHAR,
    pour INTEGER DEFAULT 0,
    contre INTEGER DEFAULT 0,
    abstentions INTEGER DEFAULT 0,
    non_votants INTEGER DEFAULT 0,
    official_url VARCHAR
)
"""
