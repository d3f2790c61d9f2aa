"""Circonscription repository."""

from app.repositories.base import BaseRepository


class CirconscriptionRepository(BaseRepository):
    """Repository for constituency rows keyed by canonical id."""

    def upsert_circonscriptions(self, rows: list[dict]) -> int:
        return self.upsert("circonscription", rows, key=["id"])

    def get_label(self, circonscription_id: str) -> str | None:
        row = self.fetchone("SELECT label FROM circonscription WHERE id = ?", [circonscription_id])
        return row[0] if row else None
