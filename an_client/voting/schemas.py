"""Scrutin schemas and decoders."""

from datetime import date

from pydantic import BaseModel, Field

from an_client.fields import as_list, decode_each, dig, text, to_date, to_int, unwrap_entities


class GroupBallotSchema(BaseModel):
    """Nominative ballot of one political group: acteur refs per category."""

    organe_ref: str | None = None
    pours: list[str] = Field(default_factory=list)
    contres: list[str] = Field(default_factory=list)
    abstentions: list[str] = Field(default_factory=list)
    non_votants: list[str] = Field(default_factory=list)


class ScrutinSchema(BaseModel):
    uid: str
    numero: int
    legislature: int | None = None
    date_scrutin: date
    seance_ref: str | None = None
    type_vote_code: str | None = None
    type_vote_libelle: str | None = None
    sort_code: str | None = None
    sort_libelle: str | None = None
    titre: str | None = None
    objet_libelle: str | None = None
    demandeur_texte: str | None = None
    pour: int = 0
    contre: int = 0
    abstentions: int = 0
    non_votants: int = 0
    groupes: list[GroupBallotSchema] = Field(default_factory=list)


def _refs(block) -> list[str]:
    """acteurRef of every votant in a `{"votant": ...}` block."""
    refs = []
    for votant in as_list(dig(block, "votant")):
        ref = text(votant.get("acteurRef")) if isinstance(votant, dict) else None
        if ref:
            refs.append(ref)
    return refs


def decode_group_ballot(raw: dict) -> GroupBallotSchema:
    nominatif = dig(raw, "vote", "decompteNominatif") or {}
    return GroupBallotSchema(
        organe_ref=text(raw.get("organeRef")),
        pours=_refs(nominatif.get("pours")),
        contres=_refs(nominatif.get("contres")),
        abstentions=_refs(nominatif.get("abstentions")),
        non_votants=_refs(nominatif.get("nonVotants")),
    )


def decode_scrutin(raw: dict) -> ScrutinSchema | None:
    uid = text(raw.get("uid"))
    day = to_date(raw.get("dateScrutin"))
    if not uid or day is None:
        return None
    decompte = dig(raw, "syntheseVote", "decompte") or {}
    groupes = as_list(dig(raw, "ventilationVotes", "organe", "groupes", "groupe"))
    return ScrutinSchema(
        uid=uid,
        numero=to_int(raw.get("numero")),
        legislature=to_int(raw.get("legislature")) or None,
        date_scrutin=day,
        seance_ref=text(raw.get("seanceRef")),
        type_vote_code=text(dig(raw, "typeVote", "codeTypeVote")),
        type_vote_libelle=text(dig(raw, "typeVote", "libelleTypeVote")),
        sort_code=text(dig(raw, "sort", "code")),
        sort_libelle=text(dig(raw, "sort", "libelle")),
        titre=text(raw.get("titre")),
        objet_libelle=text(dig(raw, "objet", "libelle")),
        demandeur_texte=text(dig(raw, "demandeur", "texte")),
        pour=to_int(decompte.get("pour")),
        contre=to_int(decompte.get("contre")),
        abstentions=to_int(decompte.get("abstentions")),
        non_votants=to_int(decompte.get("nonVotants")) + to_int(decompte.get("nonVotantsVolontaires")),
        groupes=[decode_group_ballot(g) for g in groupes if isinstance(g, dict)],
    )


def decode_scrutins(documents: list) -> list[ScrutinSchema]:
    raws = [raw for doc in documents for raw in unwrap_entities(doc, "scrutins", "scrutin")]
    return decode_each(raws, decode_scrutin, "scrutin")
