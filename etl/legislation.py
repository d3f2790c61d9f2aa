"""Legislation ETL - bills from dossiers and bill links for scrutins."""

import duckdb
from loguru import logger

from an_client.legislation import LegislationClient
from app.repositories import BillRepository
from app.services.legislation import bill_reference, dossier_bill_row, link_role, reference_bill_row
from etl.helpers import IngestOptions, write_chunks
from settings import BILL_BATCH_SIZE


async def ingest_dossiers(
    client: LegislationClient,
    conn: duckdb.DuckDBPyConnection,
    options: IngestOptions,
) -> dict:
    """Upsert one bill per dossier of the selected legislature."""
    dossiers = await client.dossiers(options.legislature)
    rows = [dossier_bill_row(d) for d in dossiers]
    logger.info("Dossiers: {} for legislature {}", len(rows), options.legislature)

    if options.dry_run:
        for row in rows[:10]:
            logger.info("Dry run - would upsert bill {}: {}", row["id"], row["short_title"])
        return {"totalDossiers": len(rows)}

    repo = BillRepository(conn)
    written = write_chunks(rows, BILL_BATCH_SIZE, repo.upsert_bills, "Bills")
    return {"totalDossiers": written}


def link_scrutin_to_bill(repo: BillRepository, scrutin: dict) -> str | None:
    """Create (if absent) the bill named in a scrutin's subject and link them. Returns the bill id."""
    reference = bill_reference(scrutin["titre"], scrutin.get("objet_libelle"))
    if reference is None:
        return None
    repo.ensure_bill(reference_bill_row(reference, scrutin.get("legislature")))
    repo.link_scrutin(reference.slug, scrutin["id"], link_role(scrutin["titre"]))
    logger.debug("Scrutin {} linked to bill {}", scrutin["id"], reference.slug)
    return reference.slug
