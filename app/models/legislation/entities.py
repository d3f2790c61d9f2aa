"""Legislation domain entities."""

from dataclasses import dataclass
from enum import StrEnum

from app.models.common import BaseEntity


class BillType(StrEnum):
    PROJET_DE_LOI = "projet_de_loi"
    PROPOSITION_DE_LOI = "proposition_de_loi"
    RESOLUTION = "resolution"


class BillOrigin(StrEnum):
    GOUVERNEMENT = "gouvernement"
    PARLEMENTAIRE = "parlementaire"


class LinkRole(StrEnum):
    """Role of a scrutin relative to the bill it is linked to."""

    ENSEMBLE = "ensemble"
    AMENDEMENT = "amendement"
    ARTICLE = "article"
    MOTION = "motion"


@dataclass
class BillReference(BaseEntity):
    """Bill key derived from a scrutin's subject text."""

    slug: str
    title: str
