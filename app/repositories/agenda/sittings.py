"""Sitting repository - sittings, agenda items, attendance, source metadata."""

from datetime import date

from app.repositories.base import BaseRepository


class SittingRepository(BaseRepository):
    """Repository for sittings and the rows hanging off them."""

    def upsert_sittings(self, rows: list[dict]) -> int:
        return self.upsert("sitting", rows, key=["id"])

    def replace_agenda_items(self, sitting_ids: list[str], rows: list[dict]) -> int:
        """Delete every agenda item of `sitting_ids`, then insert `rows`."""
        self.delete_in("agenda_item", "sitting_id", sitting_ids)
        return self.insert("agenda_item", rows)

    def replace_attendance(self, sitting_ids: list[str], rows: list[dict]) -> int:
        self.delete_in("sitting_attendance", "sitting_id", sitting_ids)
        return self.upsert("sitting_attendance", rows, key=["sitting_id", "acteur_ref"])

    def upsert_source_metadata(self, rows: list[dict]) -> int:
        return self.upsert("source_metadata", rows, key=["sitting_id"])

    def find_sitting_id(self, seance_ref: str | None, on_date: date | None) -> str | None:
        """Sitting for a scrutin: by its seance ref, else the first sitting that day."""
        if seance_ref:
            row = self.fetchone("SELECT id FROM sitting WHERE id = ?", [seance_ref])
            if row:
                return row[0]
        if on_date:
            row = self.fetchone("SELECT id FROM sitting WHERE date = ? ORDER BY id LIMIT 1", [on_date])
            if row:
                return row[0]
        return None

    def agenda_items(self, sitting_id: str) -> list[tuple]:
        return self.fetchall(
            "SELECT numero, title, category, reference_code FROM agenda_item WHERE sitting_id = ? ORDER BY numero",
            [sitting_id],
        )
