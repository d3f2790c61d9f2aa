"""Dossier législatif schemas and decoders."""

from pydantic import BaseModel

from an_client.fields import decode_each, dig, text, unwrap_entities


class DossierSchema(BaseModel):
    uid: str
    legislature: str | None = None
    titre: str
    titre_chemin: str | None = None
    procedure_libelle: str | None = None


def decode_dossier(raw: dict) -> DossierSchema | None:
    """Canonical dossier; None without uid or title."""
    uid = text(raw.get("uid"))
    titre = text(dig(raw, "titreDossier", "titre"))
    if not uid or not titre:
        return None
    return DossierSchema(
        uid=uid,
        legislature=text(raw.get("legislature")),
        titre=titre,
        titre_chemin=text(dig(raw, "titreDossier", "titreChemin")),
        procedure_libelle=text(dig(raw, "procedureParlementaire", "libelle")),
    )


def _raw_dossiers(doc) -> list[dict]:
    # composite export wraps each dossier as {"dossierParlementaire": {...}}
    wrapped = unwrap_entities(doc, "dossiersLegislatifs", "dossier")
    if wrapped:
        return [d for w in wrapped for d in unwrap_entities(w, "dossiersParlementaires", "dossierParlementaire")]
    return unwrap_entities(doc, "dossiersParlementaires", "dossierParlementaire")


def decode_dossiers(documents: list) -> list[DossierSchema]:
    return decode_each([raw for doc in documents for raw in _raw_dossiers(doc)], decode_dossier, "dossier")
