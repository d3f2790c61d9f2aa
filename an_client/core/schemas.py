"""Acteur / organe schemas (AMO archive) and their decoders."""

from datetime import date

from pydantic import BaseModel, Field

from an_client.fields import as_list, decode_each, dig, text, to_date, unwrap_entities


class MandateSchema(BaseModel):
    """One mandate of an acteur (seat, group, commission...). Never persisted as such."""

    uid: str | None = None
    type_organe: str | None = None
    organe_ref: str | None = None
    date_debut: date | None = None
    date_fin: date | None = None
    legislature: str | None = None
    qualite: str | None = None
    # election.lieu / election.refCirconscription
    departement: str | None = None
    num_departement: str | None = None
    num_circo: str | None = None
    region: str | None = None
    ref_circonscription: str | None = None

    @property
    def has_election_place(self) -> bool:
        return any(
            (self.departement, self.num_departement, self.num_circo, self.region, self.ref_circonscription)
        )


class ActeurSchema(BaseModel):
    """Deputy identity plus raw mandates."""

    uid: str
    nom: str
    prenom: str
    date_naissance: date | None = None
    lieu_naissance: str | None = None
    profession: str | None = None
    sexe: str | None = None
    mandats: list[MandateSchema] = Field(default_factory=list)


class OrganeSchema(BaseModel):
    uid: str
    libelle: str | None = None
    libelle_abrege: str | None = None
    type_organe: str = "ORGANE"
    legislature: str | None = None


def _libelle(value) -> str | None:
    """Lieu fields are either strings or `{"libelle": ...}` objects."""
    if isinstance(value, dict) and "libelle" in value:
        return text(value.get("libelle"))
    return text(value)


def decode_mandate(raw: dict) -> MandateSchema:
    lieu = dig(raw, "election", "lieu") or {}
    return MandateSchema(
        uid=text(raw.get("uid")),
        type_organe=text(raw.get("typeOrgane")),
        organe_ref=text(raw.get("organeRef")) or text(dig(raw, "organes", "organeRef")),
        date_debut=to_date(raw.get("dateDebut")),
        date_fin=to_date(raw.get("dateFin")),
        legislature=text(raw.get("legislature")),
        qualite=(
            text(dig(raw, "infosQualite", "libelleQualiteSex")) or text(dig(raw, "infosQualite", "libQualiteSex"))
        ),
        departement=_libelle(lieu.get("departement")),
        num_departement=text(lieu.get("numDepartement")),
        num_circo=text(lieu.get("numCirco")),
        region=_libelle(lieu.get("region")),
        ref_circonscription=text(dig(raw, "election", "refCirconscription")),
    )


def decode_acteur(raw: dict) -> ActeurSchema | None:
    """Canonical acteur, or None when it has no uid or no name at all."""
    uid = text(raw.get("uid"))
    if not uid:
        return None
    ident = dig(raw, "etatCivil", "ident") or {}
    nom, prenom = text(ident.get("nom")), text(ident.get("prenom"))
    if not nom and not prenom:
        return None
    naissance = dig(raw, "etatCivil", "infoNaissance") or {}
    return ActeurSchema(
        uid=uid,
        nom=nom or "Inconnu",
        prenom=prenom or "Inconnu",
        date_naissance=to_date(naissance.get("dateNais")),
        lieu_naissance=text(naissance.get("lieuNais")) or text(naissance.get("villeNais")),
        profession=text(dig(raw, "profession", "libelleCourant")),
        sexe=text(raw.get("sexe")) or text(ident.get("civ")),
        mandats=[decode_mandate(m) for m in as_list(dig(raw, "mandats", "mandat")) if isinstance(m, dict)],
    )


def decode_organe(raw: dict) -> OrganeSchema | None:
    uid = text(raw.get("uid"))
    if not uid:
        return None
    return OrganeSchema(
        uid=uid,
        libelle=text(raw.get("libelle")),
        libelle_abrege=text(raw.get("libelleAbrege")) or text(raw.get("libelleAbrev")),
        type_organe=(
            text(raw.get("codeType")) or text(raw.get("codeTypeOrgane")) or text(raw.get("typeOrgane")) or "ORGANE"
        ),
        legislature=text(raw.get("legislature")),
    )


def decode_acteurs(documents: list) -> list[ActeurSchema]:
    """All acteurs in a set of AMO documents (composite or one-per-file)."""
    raws = [raw for doc in documents for raw in unwrap_entities(doc, "acteurs", "acteur") if "etatCivil" in raw]
    return decode_each(raws, decode_acteur, "acteur")


def decode_organes(documents: list) -> list[OrganeSchema]:
    raws = [raw for doc in documents for raw in unwrap_entities(doc, "organes", "organe") if "etatCivil" not in raw]
    return decode_each(raws, decode_organe, "organe")
