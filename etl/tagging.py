"""Tagging ETL - seed the tag catalog and batch-tag scrutins or bills."""

import duckdb
from loguru import logger

from app.repositories import BillRepository, ScrutinRepository, TagRepository
from app.services.tagging import ThematicTagger, assignment_rows, match_all
from etl.helpers import write_chunks
from settings import TAG_CHUNK_SIZE
from settings.tags import THEMATIC_TAGS


def seed_tags(conn: duckdb.DuckDBPyConnection) -> dict:
    """Load the thematic tag catalog (id = slug)."""
    rows = [{"id": t["slug"], "slug": t["slug"], "label": t["label"]} for t in THEMATIC_TAGS]
    written = TagRepository(conn).upsert_tags(rows)
    logger.info("Thematic tags seeded: {}", written)
    return {"tags": written}


def tag_all(conn: duckdb.DuckDBPyConnection, kind: str, force: bool = False) -> dict:
    """Tag every scrutin or bill; without `force`, only the untagged ones."""
    tags = TagRepository(conn)
    source = ScrutinRepository(conn) if kind == "scrutin" else BillRepository(conn)
    tagger = ThematicTagger(tags)
    catalog = tagger.catalog()
    if not catalog:
        return {"processed": 0, "tagged": 0, "assignments": 0}

    already = set() if force else tags.tagged_ids(kind)
    entities = list(source.iter_texts())
    plan = match_all(entities, catalog, skip=already)
    logger.info(
        "Tagging {}s: {} of {} to process{}", kind, len(plan), len(entities), " [FORCE]" if force else ""
    )

    ids = list(plan)
    rows = [row for entity_id, matches in plan.items() for row in assignment_rows(kind, entity_id, matches)]

    def delete(chunk: list[str]) -> int:
        tags.delete_assignments(kind, chunk)
        return len(chunk)

    write_chunks(ids, TAG_CHUNK_SIZE, delete, f"Delete {kind} tags")
    written = write_chunks(rows, TAG_CHUNK_SIZE, lambda chunk: tags.upsert_assignments(kind, chunk), f"{kind} tags")
    tagged = len({r[f"{kind}_id"] for r in rows})
    return {"processed": len(ids), "tagged": tagged, "assignments": written}


def tag_one(conn: duckdb.DuckDBPyConnection, kind: str, entity_id: str) -> dict:
    """Re-tag a single scrutin or bill."""
    tagger = ThematicTagger(TagRepository(conn), scrutins=ScrutinRepository(conn), bills=BillRepository(conn))
    if kind == "scrutin":
        written = tagger.tag_scrutin(entity_id)
    else:
        written = tagger.tag_bill(entity_id)
    return {"id": entity_id, "assignments": written}
