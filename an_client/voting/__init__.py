"""Voting client - scrutins and their nominative ballots."""

from an_client.voting.client import VotingClient
from an_client.voting.schemas import GroupBallotSchema, ScrutinSchema

__all__ = ["VotingClient", "GroupBallotSchema", "ScrutinSchema"]
