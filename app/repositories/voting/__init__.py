"""Voting repositories."""

from app.repositories.voting.scrutins import ScrutinRepository

__all__ = ["ScrutinRepository"]
