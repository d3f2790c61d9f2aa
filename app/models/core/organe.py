"""Organe (commission, group, delegation...) and membership models."""

ORGANE_DDL = """
CREATE TABLE IF NOT EXISTS organe (
    id VARCHAR PRIMARY KEY,
    libelle VARCHAR,
    libelle_abrege VARCHAR,
    type_organe VARCHAR NOT NULL,
    official_url VARCHAR
)
"""

DEPUTY_ORGANE_DDL = """
CREATE TABLE IF NOT EXISTS deputy_organe (
    acteur_ref VARCHAR NOT NULL,
    organe_ref VARCHAR NOT NULL,
    date_debut DATE,
    date_fin DATE,
    PRIMARY KEY (acteur_ref, organe_ref)
)
"""
