"""Reunion (séance / réunion de commission) schemas and decoders."""

import re
from datetime import date

from pydantic import BaseModel, Field

from an_client.fields import as_list, decode_each, dig, text, to_date, unwrap_entities

SEANCE_TYPE = "seance_type"
COMMISSION_TYPE = "reunionCommission_type"
CONFIRMED = "Confirmé"

_LEGISLATURE_RE = re.compile(r"L(\d+)")
_TIME_RE = re.compile(r"T(\d{2}:\d{2}:\d{2})")


class AgendaPointSchema(BaseModel):
    numero: int
    title: str
    category: str = "autre"
    reference_code: str | None = None


class ParticipantSchema(BaseModel):
    acteur_ref: str
    presence: str


class ReunionSchema(BaseModel):
    """A confirmed sitting with its agenda points and internal participants."""

    uid: str
    legislature: int | None = None
    date_seance: date
    start_time: str | None = None
    end_time: str | None = None
    type: str
    title: str
    location: str | None = None
    organe_ref: str | None = None
    points: list[AgendaPointSchema] = Field(default_factory=list)
    participants: list[ParticipantSchema] = Field(default_factory=list)


def legislature_from_uid(uid: str) -> int | None:
    """`RUANR5L15S2018IDS20922` -> 15."""
    match = _LEGISLATURE_RE.search(uid)
    return int(match.group(1)) if match else None


def time_of(timestamp) -> str | None:
    """HH:MM:SS part of an ISO timestamp, as published (local time)."""
    match = _TIME_RE.search(text(timestamp) or "")
    return match.group(1) if match else None


def reunion_type(raw: dict) -> str | None:
    """`@xsi:type`, or for legacy entries without it: IDS in the uid means a plenary sitting."""
    xsi_type = text(raw.get("@xsi:type"))
    if xsi_type:
        return xsi_type
    uid = text(raw.get("uid")) or ""
    return SEANCE_TYPE if "IDS" in uid else COMMISSION_TYPE


def _title(raw: dict) -> str:
    resume = text(dig(raw, "ODJ", "resumeODJ", "item"))
    if resume:
        return resume
    convocation = as_list(dig(raw, "ODJ", "convocationODJ", "item"))
    if convocation and text(convocation[0]):
        return text(convocation[0])
    quantieme = text(dig(raw, "identifiants", "quantieme"))
    if quantieme:
        return f"{quantieme} séance"
    return "Séance publique"


def _points(raw: dict) -> list[AgendaPointSchema]:
    confirmed = [
        p
        for p in as_list(dig(raw, "ODJ", "pointsODJ", "pointODJ"))
        if isinstance(p, dict) and text(dig(p, "cycleDeVie", "etat")) == CONFIRMED
    ]
    points = []
    for index, point in enumerate(confirmed):
        refs = as_list(dig(point, "dossiersLegislatifsRefs", "dossierRef"))
        points.append(
            AgendaPointSchema(
                numero=index + 1,
                title=text(point.get("objet")) or "Point à l'ordre du jour",
                category=text(point.get("typePointODJ")) or "autre",
                reference_code=text(refs[0]) if refs else None,
            )
        )
    return points


def _participants(raw: dict) -> list[ParticipantSchema]:
    participants = []
    for p in as_list(dig(raw, "participants", "participantsInternes", "participantInterne")):
        ref = text(p.get("acteurRef")) if isinstance(p, dict) else None
        if ref:
            participants.append(ParticipantSchema(acteur_ref=ref, presence=text(p.get("presence")) or "inconnu"))
    return participants


def decode_reunion(raw: dict) -> ReunionSchema | None:
    """Canonical reunion; None when unconfirmed, undated, or of another kind."""
    uid = text(raw.get("uid"))
    if not uid or text(dig(raw, "cycleDeVie", "etat")) != CONFIRMED:
        return None
    kind = reunion_type(raw)
    if kind not in (SEANCE_TYPE, COMMISSION_TYPE):
        return None
    day = to_date(dig(raw, "identifiants", "DateSeance")) or to_date(raw.get("timeStampDebut"))
    if day is None:
        return None
    return ReunionSchema(
        uid=uid,
        legislature=legislature_from_uid(uid),
        date_seance=day,
        start_time=time_of(raw.get("timeStampDebut")),
        end_time=time_of(raw.get("timeStampFin")),
        type=kind,
        title=_title(raw),
        location=text(dig(raw, "lieu", "libelleLong")),
        organe_ref=text(raw.get("organeReuniRef")),
        points=_points(raw),
        participants=_participants(raw),
    )


def decode_reunions(documents: list) -> list[ReunionSchema]:
    raws = [raw for doc in documents for raw in unwrap_entities(doc, "reunions", "reunion")]
    return decode_each(raws, decode_reunion, "reunion")
