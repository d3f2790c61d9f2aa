"""Dossiers législatifs archive client."""

from an_client.base import BaseClient
from an_client.legislation.schemas import DossierSchema, decode_dossiers
from settings import DEFAULT_LEGISLATURE, dossiers_archive_url


def dossier_entries(name: str) -> bool:
    """dossierParlementaire members only; the archive also ships documents and actes."""
    return name.endswith(".json") and "__" not in name and ("dossierParlementaire/" in name or "/" not in name)


class LegislationClient(BaseClient):
    """Client for the Dossiers_Legislatifs archive."""

    async def dossiers(self, legislature: str) -> list[DossierSchema]:
        """Dossiers of `legislature` (`all` keeps every dossier of the current archive)."""
        archive_leg = DEFAULT_LEGISLATURE if legislature == "all" else legislature
        documents = await self.fetch_archive(
            f"dossiers:{archive_leg}", dossiers_archive_url(archive_leg), dossier_entries
        )
        dossiers = decode_dossiers(documents)
        if legislature == "all":
            return dossiers
        return [d for d in dossiers if d.legislature == legislature]
