"""Acteurs / organes (AMO) archive client."""

from an_client.base import BaseClient
from an_client.core.schemas import ActeurSchema, OrganeSchema, decode_acteurs, decode_organes
from settings import amo_archive_url


def amo_entries(name: str) -> bool:
    """acteur/ and organe/ JSON members (or a single composite export file)."""
    return name.endswith(".json") and "__" not in name and "mandat/" not in name


class CoreClient(BaseClient):
    """Client for the AMO acteurs/mandats/organes archive."""

    async def documents(self) -> list:
        return await self.fetch_archive("amo", amo_archive_url(), amo_entries)

    async def acteurs(self) -> list[ActeurSchema]:
        return decode_acteurs(await self.documents())

    async def organes(self) -> list[OrganeSchema]:
        return decode_organes(await self.documents())
