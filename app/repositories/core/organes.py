"""Organe repository - organes and deputy memberships."""

from loguru import logger

from app.repositories.base import BaseRepository


class OrganeRepository(BaseRepository):
    """Repository for organes and deputy_organe memberships."""

    def upsert_organes(self, rows: list[dict]) -> int:
        return self.upsert("organe", rows, key=["id"])

    def upsert_memberships(self, rows: list[dict]) -> int:
        return self.upsert("deputy_organe", rows, key=["acteur_ref", "organe_ref"])

    def get_valid_ids(self) -> set[str]:
        """All stored organe ids, read page by page."""
        ids: set[str] = set()
        for page in self.paginate("SELECT id FROM organe ORDER BY id"):
            ids.update(r[0] for r in page)
        logger.debug("get_valid_ids: {} organes", len(ids))
        return ids

    def memberships_for(self, acteur_ref: str) -> list[tuple[str, str]]:
        """(organe_ref, type_organe) pairs for a deputy."""
        return self.fetchall(
            """
            SELECT d.organe_ref, o.type_organe
            FROM deputy_organe d JOIN organe o ON o.id = d.organe_ref
            WHERE d.acteur_ref = ?
            ORDER BY d.organe_ref
            """,
            [acteur_ref],
        )
