"""Constituency ETL - contours from data.gouv.fr."""

import json

import duckdb
from loguru import logger

from an_client.geo import CirconscriptionFeature, GeoClient
from app.repositories import CirconscriptionRepository
from app.services.resolution.circonscriptions import feature_id, format_label
from etl.helpers import IngestOptions, write_chunks
from settings import DEPUTY_BATCH_SIZE


def circonscription_rows(features: list[CirconscriptionFeature]) -> list[dict]:
    """(id, label, geometry) per constituency; the last feature wins on a duplicate id."""
    rows: dict[str, dict] = {}
    for feature in features:
        parsed = feature_id(feature.code_circonscription, feature.code_departement)
        if parsed is None:
            logger.debug("Skipping feature {}", feature.code_circonscription)
            continue
        circonscription_id, num = parsed
        rows[circonscription_id] = {
            "id": circonscription_id,
            "label": format_label(feature.nom_departement, num),
            "geometry": json.dumps(feature.geometry) if feature.geometry else None,
        }
    return list(rows.values())


async def ingest_circonscriptions(
    client: GeoClient,
    conn: duckdb.DuckDBPyConnection,
    options: IngestOptions,
) -> dict:
    rows = circonscription_rows(await client.circonscriptions())
    logger.info("Circonscriptions: {}", len(rows))
    if options.dry_run:
        return {"circonscriptions": len(rows)}

    repo = CirconscriptionRepository(conn)
    written = write_chunks(rows, DEPUTY_BATCH_SIZE, repo.upsert_circonscriptions, "Circonscriptions")
    return {"circonscriptions": written}
