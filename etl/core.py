"""Core ETL - deputies, organes, deputy-organe memberships."""

from datetime import date

import duckdb
from loguru import logger

from an_client.core import CoreClient
from app.repositories import DeputyRepository, OrganeRepository
from app.services.resolution import deputy_row, membership_rows
from etl.helpers import IngestOptions, write_chunks
from settings import (
    DEFAULT_LEGISLATURE,
    DEPUTY_BATCH_SIZE,
    MEMBERSHIP_BATCH_SIZE,
    ORGANE_BATCH_SIZE,
    SITE_BASE_URL,
)


async def ingest_deputies(
    client: CoreClient,
    conn: duckdb.DuckDBPyConnection,
    options: IngestOptions,
    today: date | None = None,
) -> dict:
    """Resolve every acteur's current seat and group, upsert deputies."""
    today = today or date.today()
    acteurs = await client.acteurs()
    organes = {o.uid: o for o in await client.organes()}
    rows = [deputy_row(a, organes, today) for a in acteurs]
    logger.info("Deputies: {} acteurs, {} organes", len(rows), len(organes))

    if options.dry_run:
        for row in rows[:5]:
            logger.info(
                "Dry run - would upsert {} {} ({})", row["civil_prenom"], row["civil_nom"], row["circonscription"]
            )
        return {"deputies": len(rows)}

    written = write_chunks(rows, DEPUTY_BATCH_SIZE, DeputyRepository(conn).upsert_deputies, "Deputies")
    return {"deputies": written}


async def ingest_organes(
    client: CoreClient,
    conn: duckdb.DuckDBPyConnection,
    options: IngestOptions,
) -> dict:
    organes = await client.organes()
    rows = [
        {
            "id": o.uid,
            "libelle": o.libelle,
            "libelle_abrege": o.libelle_abrege,
            "type_organe": o.type_organe,
            "official_url": f"{SITE_BASE_URL}/{o.legislature or DEFAULT_LEGISLATURE}/organes/{o.uid}",
        }
        for o in organes
    ]
    logger.info("Organes: {}", len(rows))
    if options.dry_run:
        return {"organes": len(rows)}

    written = write_chunks(rows, ORGANE_BATCH_SIZE, OrganeRepository(conn).upsert_organes, "Organes")
    return {"organes": written}


async def ingest_deputy_organes(
    client: CoreClient,
    conn: duckdb.DuckDBPyConnection,
    options: IngestOptions,
) -> dict:
    """Commission rosters: allow-listed memberships to organes present in the store."""
    repo = OrganeRepository(conn)
    valid_organes = repo.get_valid_ids()
    if not valid_organes:
        logger.warning("No organes in store; run the organes job first")
    acteurs = await client.acteurs()
    rows = [row for a in acteurs for row in membership_rows(a, valid_organes)]
    logger.info("Memberships: {} for {} acteurs", len(rows), len(acteurs))
    if options.dry_run:
        return {"memberships": len(rows)}

    written = write_chunks(rows, MEMBERSHIP_BATCH_SIZE, repo.upsert_memberships, "Memberships")
    return {"memberships": written}
