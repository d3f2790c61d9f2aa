"""Scrutin repository - roll-call votes and deputy positions."""

from collections.abc import Iterator

from app.repositories.base import BaseRepository


class ScrutinRepository(BaseRepository):
    """Repository for scrutins and scrutin_vote rows."""

    def upsert_scrutin(self, row: dict) -> int:
        return self.upsert("scrutin", [row], key=["id"])

    def replace_votes(self, scrutin_id: str, rows: list[dict]) -> int:
        """Votes are a full snapshot per scrutin: delete then insert."""
        self.delete_in("scrutin_vote", "scrutin_id", [scrutin_id])
        return self.insert("scrutin_vote", rows)

    def vote_count(self, scrutin_id: str) -> int:
        return self.fetchone("SELECT COUNT(*) FROM scrutin_vote WHERE scrutin_id = ?", [scrutin_id])[0]

    def get_text(self, scrutin_id: str) -> tuple[str, str | None] | None:
        """(titre, objet_libelle) used for tagging."""
        return self.fetchone("SELECT titre, objet_libelle FROM scrutin WHERE id = ?", [scrutin_id])

    def iter_texts(self) -> Iterator[tuple[str, str, str | None]]:
        """(id, titre, objet_libelle) for every scrutin."""
        for page in self.paginate("SELECT id, titre, objet_libelle FROM scrutin ORDER BY id"):
            yield from page
