"""Deputy (député) model."""

DEPUTY_DDL = """
CREATE TABLE IF NOT EXISTS deputy (
    acteur_ref VARCHAR PRIMARY KEY,
    civil_nom VARCHAR NOT NULL,
    civil_prenom VARCHAR NOT NULL,
    date_naissance DATE,
    lieu_naissance VARCHAR,
    profession VARCHAR,
    sexe VARCHAR,
    groupe_politique VARCHAR,
    groupe_ref VARCHAR,
    circonscription VARCHAR,
    ref_circonscription VARCHAR,
    departement VARCHAR,
    date_debut_mandat DATE,
    date_fin_mandat DATE,
    legislature INTEGER,
    official_url VARCHAR
)
"""
