"""Agenda (reunions) archive client."""

import asyncio
from datetime import date

from an_client.agenda.schemas import ReunionSchema, decode_reunions
from an_client.base import BaseClient
from settings import LEGISLATURES_WITH_AGENDAS, agenda_archive_url


def reunion_entries(name: str) -> bool:
    """Per-file reunions, or the single JSON file of legacy archives."""
    return name.endswith(".json") and "__" not in name


class AgendaClient(BaseClient):
    """Client for the per-legislature Agenda archives."""

    async def reunions(self, legislature: str) -> list[ReunionSchema]:
        """All confirmed reunions of one legislature, or of every one with `all`."""
        if legislature == "all":
            batches = await asyncio.gather(*[self.reunions(leg) for leg in LEGISLATURES_WITH_AGENDAS])
            return [r for batch in batches for r in batch]
        documents = await self.fetch_archive(f"agenda:{legislature}", agenda_archive_url(legislature), reunion_entries)
        return decode_reunions(documents)

    async def reunions_between(self, start: date, end: date, legislature: str) -> list[ReunionSchema]:
        return [r for r in await self.reunions(legislature) if start <= r.date_seance <= end]
