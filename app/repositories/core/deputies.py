"""Deputy repository - deputies and their resolved mandate fields."""

from app.repositories.base import BaseRepository


class DeputyRepository(BaseRepository):
    """Repository for deputy rows keyed by acteur_ref."""

    def upsert_deputies(self, rows: list[dict]) -> int:
        return self.upsert("deputy", rows, key=["acteur_ref"])

    def get(self, acteur_ref: str) -> dict | None:
        cursor = self.execute("SELECT * FROM deputy WHERE acteur_ref = ?", [acteur_ref])
        row = cursor.fetchone()
        if row is None:
            return None
        return dict(zip([d[0] for d in cursor.description], row, strict=True))
