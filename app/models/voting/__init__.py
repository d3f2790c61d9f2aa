"""Voting domain models - scrutins and deputy positions."""

from app.models.voting.entities import ExtractedVote, ScrutinOutcome, VotePosition
from app.models.voting.scrutin import SCRUTIN_DDL
from app.models.voting.vote import SCRUTIN_VOTE_DDL

__all__ = [
    "SCRUTIN_DDL",
    "SCRUTIN_VOTE_DDL",
    "ExtractedVote",
    "ScrutinOutcome",
    "VotePosition",
]
