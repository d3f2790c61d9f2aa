"""Core domain entities - resolved deputy fields."""

from dataclasses import dataclass
from datetime import date

from app.models.common import BaseEntity


@dataclass
class Constituency(BaseEntity):
    """A constituency resolved from one mandate's election data."""

    label: str | None
    canonical_id: str | None
    departement: str | None


@dataclass
class ResolvedMandate(BaseEntity):
    """Fields derived for a deputy from their mandate records."""

    circonscription: str | None = None
    ref_circonscription: str | None = None
    departement: str | None = None
    date_debut: date | None = None
    date_fin: date | None = None
    legislature: int | None = None
    groupe_ref: str | None = None
