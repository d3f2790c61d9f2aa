"""Job runner - run-logged execution of every ingestion job."""

import asyncio
from collections.abc import Awaitable, Callable

import duckdb
from loguru import logger

from an_client import AgendaClient, CoreClient, GeoClient, LegislationClient, VotingClient
from app.repositories import IngestionLogRepository, get_write_connection
from etl.agenda import ingest
from etl.circonscriptions import ingest_circonscriptions
from etl.core import ingest_deputies, ingest_deputy_organes, ingest_organes
from etl.helpers import IngestOptions
from etl.legislation import ingest_dossiers
from etl.run_log import MANUAL, log_error, log_start, log_success
from etl.tagging import seed_tags, tag_all
from etl.validation import validate_store
from etl.voting import ingest_scrutins

Job = Callable[[duckdb.DuckDBPyConnection, IngestOptions], Awaitable[dict]]


async def _ingest(conn, options):
    async with AgendaClient() as agenda, LegislationClient() as legislation:
        return await ingest(agenda, legislation, conn, options)


async def _scrutins(conn, options):
    async with VotingClient() as client:
        return await ingest_scrutins(client, conn, options)


async def _deputies(conn, options):
    async with CoreClient() as client:
        return await ingest_deputies(client, conn, options)


async def _organes(conn, options):
    async with CoreClient() as client:
        return await ingest_organes(client, conn, options)


async def _deputy_organes(conn, options):
    async with CoreClient() as client:
        return await ingest_deputy_organes(client, conn, options)


async def _dossiers(conn, options):
    async with LegislationClient() as client:
        return await ingest_dossiers(client, conn, options)


async def _circonscriptions(conn, options):
    async with GeoClient() as client:
        return await ingest_circonscriptions(client, conn, options)


async def _tag_scrutins(conn, options):
    return tag_all(conn, "scrutin", force=options.force)


async def _tag_bills(conn, options):
    return tag_all(conn, "bill", force=options.force)


async def _seed_tags(conn, options):
    return seed_tags(conn)


JOBS: dict[str, Job] = {
    "ingest": _ingest,
    "ingest-scrutins": _scrutins,
    "ingest-deputies": _deputies,
    "ingest-organes": _organes,
    "ingest-deputy-organes": _deputy_organes,
    "ingest-dossiers": _dossiers,
    "ingest-circonscriptions": _circonscriptions,
    "tag-scrutins": _tag_scrutins,
    "tag-bills": _tag_bills,
    "seed-tags": _seed_tags,
}

# dependency order for a full refresh
ALL_JOBS = (
    "ingest-organes",
    "ingest-deputies",
    "ingest-deputy-organes",
    "ingest-circonscriptions",
    "seed-tags",
    "ingest",
    "ingest-scrutins",
    "tag-bills",
)


async def run_job(
    job_name: str,
    conn: duckdb.DuckDBPyConnection,
    options: IngestOptions,
    triggered_by: str = MANUAL,
    jobs: dict[str, Job] | None = None,
) -> dict:
    """Run one job between a start entry and a success/error entry (dry runs are not logged)."""
    job = (jobs or JOBS)[job_name]
    if options.dry_run:
        return await job(conn, options)

    log = IngestionLogRepository(conn)
    log_id = log_start(log, job_name, triggered_by)
    with logger.contextualize(job=job_name):
        try:
            result = await job(conn, options)
        except Exception as e:
            logger.error("Job {} failed: {}", job_name, e)
            log_error(log, log_id, str(e))
            raise
    log_success(log, log_id, result)
    return result


def sync(
    job_name: str,
    options: IngestOptions | None = None,
    triggered_by: str = MANUAL,
    conn: duckdb.DuckDBPyConnection | None = None,
) -> dict:
    """Synchronous entry point for one job."""
    options = options or IngestOptions()
    own_conn = conn is None
    conn = conn or get_write_connection()
    try:
        return asyncio.run(run_job(job_name, conn, options, triggered_by))
    finally:
        if own_conn:
            conn.close()


def sync_all(options: IngestOptions | None = None) -> dict:
    """Every job in dependency order, then validation. A failed job does not stop the others."""
    options = options or IngestOptions()
    results = {}
    with get_write_connection() as conn:
        for job_name in ALL_JOBS:
            try:
                results[job_name] = asyncio.run(run_job(job_name, conn, options))
            except Exception as e:
                results[job_name] = {"error": str(e)}
        results["validation"] = validate_store(conn)
    logger.info("Sync complete!")
    return results
