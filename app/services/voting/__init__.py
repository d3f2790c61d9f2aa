"""Voting services."""

from app.services.voting.extraction import extract_votes, normalize_outcome, scrutin_row, vote_rows

__all__ = [
    "extract_votes",
    "normalize_outcome",
    "scrutin_row",
    "vote_rows",
]
