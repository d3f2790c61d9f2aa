"""Scrutins archive client."""

from datetime import date

from an_client.base import BaseClient
from an_client.voting.schemas import ScrutinSchema, decode_scrutins
from settings import scrutins_archive_url


def scrutin_entries(name: str) -> bool:
    return name.endswith(".json") and "__" not in name


class VotingClient(BaseClient):
    """Client for the per-legislature Scrutins archive."""

    async def scrutins(self, legislature: str) -> list[ScrutinSchema]:
        documents = await self.fetch_archive(
            f"scrutins:{legislature}", scrutins_archive_url(legislature), scrutin_entries
        )
        return decode_scrutins(documents)

    async def scrutins_between(self, start: date, end: date, legislature: str) -> list[ScrutinSchema]:
        """Scrutins dated within [start, end], inclusive."""
        return [s for s in await self.scrutins(legislature) if start <= s.date_scrutin <= end]
