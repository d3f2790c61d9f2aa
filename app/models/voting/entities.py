"""Voting domain entities."""

from dataclasses import dataclass
from enum import StrEnum

from app.models.common import BaseEntity


class VotePosition(StrEnum):
    """Position of a deputy in a scrutin."""

    POUR = "pour"
    CONTRE = "contre"
    ABSTENTION = "abstention"
    NON_VOTANT = "non_votant"


class ScrutinOutcome(StrEnum):
    """Normalized scrutin outcome (sort.code)."""

    ADOPTE = "adopté"
    REJETE = "rejeté"


@dataclass
class ExtractedVote(BaseEntity):
    """One deputy's position, flattened out of the group ballot tree."""

    acteur_ref: str
    position: VotePosition
