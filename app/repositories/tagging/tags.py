"""Tag repository - thematic tag catalog and assignments."""

from collections.abc import Sequence

from loguru import logger

from app.repositories.base import BaseRepository

# entity kind -> (assignment table, entity id column)
ASSIGNMENT_TABLES = {
    "scrutin": ("scrutin_thematic_tag", "scrutin_id"),
    "bill": ("bill_thematic_tag", "bill_id"),
}


class TagRepository(BaseRepository):
    """Repository for thematic tags and their scrutin/bill assignments."""

    def upsert_tags(self, rows: list[dict]) -> int:
        return self.upsert("thematic_tag", rows, key=["id"])

    def get_catalog(self) -> list[tuple[str, str]]:
        """(id, slug) of every tag."""
        return self.fetchall("SELECT id, slug FROM thematic_tag ORDER BY slug")

    def tagged_ids(self, kind: str) -> set[str]:
        """Ids of entities that already have at least one tag, read page by page."""
        table, column = ASSIGNMENT_TABLES[kind]
        ids: set[str] = set()
        for page in self.paginate(f"SELECT DISTINCT {column} FROM {table} ORDER BY {column}"):
            ids.update(r[0] for r in page)
        logger.debug("tagged_ids({}): {}", kind, len(ids))
        return ids

    def delete_assignments(self, kind: str, entity_ids: Sequence[str]) -> None:
        table, column = ASSIGNMENT_TABLES[kind]
        self.delete_in(table, column, entity_ids)

    def upsert_assignments(self, kind: str, rows: list[dict]) -> int:
        table, column = ASSIGNMENT_TABLES[kind]
        return self.upsert(table, rows, key=[column, "tag_id"])

    def assignments_for(self, kind: str, entity_id: str) -> list[tuple[str, float, str]]:
        """(tag_id, confidence, source) of one entity."""
        table, column = ASSIGNMENT_TABLES[kind]
        return self.fetchall(
            f"SELECT tag_id, confidence, source FROM {table} WHERE {column} = ? ORDER BY tag_id",
            [entity_id],
        )
