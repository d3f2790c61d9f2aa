"""Bill repository - bills and bill-scrutin links."""

from collections.abc import Iterator

from app.repositories.base import BaseRepository


class BillRepository(BaseRepository):
    """Repository for bill and bill_scrutin rows."""

    def upsert_bills(self, rows: list[dict]) -> int:
        return self.upsert("bill", rows, key=["id"])

    def ensure_bill(self, row: dict) -> None:
        """Create the bill if absent; an existing title is kept."""
        self.upsert("bill", [row], key=["id"], update=False)

    def link_scrutin(self, bill_id: str, scrutin_id: str, role: str | None) -> None:
        self.upsert(
            "bill_scrutin",
            [{"bill_id": bill_id, "scrutin_id": scrutin_id, "role": role}],
            key=["bill_id", "scrutin_id"],
        )

    def get_title(self, bill_id: str) -> str | None:
        row = self.fetchone("SELECT title FROM bill WHERE id = ?", [bill_id])
        return row[0] if row else None

    def get_text(self, bill_id: str) -> tuple[str, str | None] | None:
        """(title, short_title) used for tagging."""
        return self.fetchone("SELECT title, short_title FROM bill WHERE id = ?", [bill_id])

    def iter_texts(self) -> Iterator[tuple[str, str, str | None]]:
        for page in self.paginate("SELECT id, title, short_title FROM bill ORDER BY id"):
            yield from page

    def scrutins_for(self, bill_id: str) -> list[tuple[str, str | None]]:
        return self.fetchall(
            "SELECT scrutin_id, role FROM bill_scrutin WHERE bill_id = ? ORDER BY scrutin_id",
            [bill_id],
        )
