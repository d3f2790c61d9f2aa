"""Agenda ETL - sittings, agenda items, attendance and source metadata."""

import hashlib
import json
from collections import defaultdict
from datetime import date, datetime

import duckdb
from loguru import logger

from an_client.agenda import AgendaClient, ReunionSchema
from an_client.legislation import LegislationClient
from app.repositories import OrganeRepository, SittingRepository
from etl.helpers import IngestOptions, agenda_dates, enrich, guarded
from etl.legislation import ingest_dossiers
from settings import AGENDA_PAGE_URL, SITE_BASE_URL


def checksum(reunion: ReunionSchema) -> str:
    payload = json.dumps(reunion.model_dump(mode="json"), sort_keys=True, ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def build_sitting_bundle(reunion: ReunionSchema, synced_at: datetime | None = None) -> dict:
    """Sitting row plus its agenda items, attendance and source metadata."""
    leg = reunion.legislature
    description = reunion.title
    if reunion.points:
        description += f" - {len(reunion.points)} point(s) à l'ordre du jour"
    sitting = {
        "id": reunion.uid,
        "legislature": leg,
        "date": reunion.date_seance,
        "start_time": reunion.start_time,
        "end_time": reunion.end_time,
        "type": reunion.type,
        "title": reunion.title,
        "description": description,
        "location": reunion.location,
        "organe_ref": reunion.organe_ref,
    }
    agenda_items = [
        {
            "sitting_id": reunion.uid,
            "numero": p.numero,
            "scheduled_time": None,
            "title": p.title,
            "description": p.title,
            "category": p.category,
            "reference_code": p.reference_code,
            "official_url": f"{SITE_BASE_URL}/{leg}/dossiers_/{p.reference_code}" if p.reference_code else None,
        }
        for p in reunion.points
    ]
    attendance = [
        {"sitting_id": reunion.uid, "acteur_ref": p.acteur_ref, "presence": p.presence} for p in reunion.participants
    ]
    source_metadata = {
        "sitting_id": reunion.uid,
        "original_source_url": f"{AGENDA_PAGE_URL}/{reunion.date_seance.isoformat()}",
        "last_synced_at": synced_at or datetime.now(),
        "checksum": checksum(reunion),
    }
    return {
        "sitting": sitting,
        "agenda_items": agenda_items,
        "attendance": attendance,
        "source_metadata": source_metadata,
    }


def filter_hosted(reunions: list[ReunionSchema], valid_organes: set[str]) -> list[ReunionSchema]:
    """Drop reunions hosted by an organe missing from the store."""
    kept, dropped = [], set()
    for reunion in reunions:
        if reunion.organe_ref is not None and reunion.organe_ref not in valid_organes:
            dropped.add(reunion.organe_ref)
            continue
        kept.append(reunion)
    if dropped:
        logger.warning("Dropped {} reunion(s) with unknown organes: {}", len(reunions) - len(kept), sorted(dropped))
    return kept


def write_day(repo: SittingRepository, day: date, bundles: list[dict]) -> tuple[int, int]:
    """Upsert sittings, replace their items and attendance, upsert metadata. Returns (sittings, items)."""
    sittings = [b["sitting"] for b in bundles]
    ids = [s["id"] for s in sittings]
    written = guarded(f"Sittings {day}", repo.upsert_sittings, sittings)
    if written is None:
        return 0, 0

    items = [i for b in bundles for i in b["agenda_items"]]
    items_written = guarded(f"Agenda items {day}", repo.replace_agenda_items, ids, items) or 0
    attendance = [a for b in bundles for a in b["attendance"]]
    guarded(f"Attendance {day}", repo.replace_attendance, ids, attendance)
    enrich(f"Source metadata {day}", repo.upsert_source_metadata, [b["source_metadata"] for b in bundles])
    return written, items_written


async def ingest_agenda(
    client: AgendaClient,
    conn: duckdb.DuckDBPyConnection,
    options: IngestOptions,
) -> dict:
    """Sync sittings for the requested dates. Returns {totalSittings, totalItems}."""
    dates = agenda_dates(options)
    logger.info(
        "Agenda: {} day(s) {}..{} (legislature {}){}",
        len(dates),
        dates[0],
        dates[-1],
        options.legislature,
        " [DRY RUN]" if options.dry_run else "",
    )
    valid_organes = OrganeRepository(conn).get_valid_ids()
    repo = SittingRepository(conn)

    by_day: dict[date, dict[str, ReunionSchema]] = defaultdict(dict)
    for reunion in await client.reunions_between(dates[0], dates[-1], options.legislature):
        by_day[reunion.date_seance][reunion.uid] = reunion

    total_sittings = total_items = 0
    for day in dates:
        reunions = filter_hosted(list(by_day[day].values()), valid_organes)
        if not reunions:
            continue
        bundles = [build_sitting_bundle(r) for r in reunions]
        if options.dry_run:
            items = sum(len(b["agenda_items"]) for b in bundles)
            logger.info("Dry run - {}: would upsert {} sitting(s), {} item(s)", day, len(bundles), items)
            total_sittings += len(bundles)
            total_items += items
            continue
        sittings, items = write_day(repo, day, bundles)
        total_sittings += sittings
        total_items += items
        logger.debug("{}: {} sittings, {} items", day, sittings, items)

    logger.info("Agenda: {} sittings, {} agenda items", total_sittings, total_items)
    return {"totalSittings": total_sittings, "totalItems": total_items}


async def ingest(
    agenda: AgendaClient,
    legislation: LegislationClient,
    conn: duckdb.DuckDBPyConnection,
    options: IngestOptions,
) -> dict:
    """Sittings then dossiers: the `ingest` job."""
    result = await ingest_agenda(agenda, conn, options)
    dossiers = await ingest_dossiers(legislation, conn, options)
    return {"success": True, **result, "totalDossiers": dossiers["totalDossiers"]}
