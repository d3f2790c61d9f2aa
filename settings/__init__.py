"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("AGORA_DB_PATH", "agora.duckdb")

# Logging
LOG_DIR = Path(os.getenv("AGORA_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("AGORA_LOG_LEVEL", "INFO")

# Open data archives
ARCHIVE_BASE_URL = os.getenv(
    "ARCHIVE_BASE_URL",
    "https://data.assemblee-nationale.fr/static/openData/repository",
)
API_TIMEOUT = 120
ARCHIVE_CACHE_TTL = 60 * 60
TAG_CACHE_TTL = 5 * 60

AMO_ARCHIVE_PATH = (
    "17/amo/tous_acteurs_mandats_organes_xi_legislature/"
    "AMO30_tous_acteurs_tous_mandats_tous_organes_historique.json.zip"
)
CIRCONSCRIPTIONS_GEOJSON_URL = (
    "https://static.data.gouv.fr/resources/contours-geographiques-des-circonscriptions-legislatives/"
    "20240613-191520/circonscriptions-legislatives-p10.geojson"
)
SITE_BASE_URL = "https://www.assemblee-nationale.fr/dyn"
AGENDA_PAGE_URL = "https://www2.assemblee-nationale.fr/agendas/les-agendas"

# Legislatures
DEFAULT_LEGISLATURE = os.getenv("AGORA_LEGISLATURE", "17")
LEGISLATURES_WITH_AGENDAS = ("14", "15", "16", "17")
ROMAN_BY_LEGISLATURE = {"14": "XIV", "15": "XV"}

# Sync
PAGE_SIZE = 1000
DEPUTY_BATCH_SIZE = 500
ORGANE_BATCH_SIZE = 200
MEMBERSHIP_BATCH_SIZE = 300
BILL_BATCH_SIZE = 500
TAG_CHUNK_SIZE = 500
SCRUTINS_LOOKBACK_DAYS = 7
AGENDA_LOOKBACK_DAYS = 1
AGENDA_LOOKAHEAD_DAYS = 6

# Trigger secrets
CRON_SECRET = os.getenv("CRON_SECRET")
INGESTION_SECRET = os.getenv("INGESTION_SECRET")


def agenda_archive_url(legislature: str) -> str:
    """Agenda ZIP for a legislature (older ones carry a roman suffix)."""
    roman = ROMAN_BY_LEGISLATURE.get(legislature)
    filename = f"Agenda_{roman}.json.zip" if roman else "Agenda.json.zip"
    return f"{ARCHIVE_BASE_URL}/{legislature}/vp/reunions/{filename}"


def amo_archive_url() -> str:
    return f"{ARCHIVE_BASE_URL}/{AMO_ARCHIVE_PATH}"


def scrutins_archive_url(legislature: str) -> str:
    return f"{ARCHIVE_BASE_URL}/{legislature}/loi/scrutins/Scrutins.json.zip"


def dossiers_archive_url(legislature: str) -> str:
    return f"{ARCHIVE_BASE_URL}/{legislature}/loi/dossiers_legislatifs/Dossiers_Legislatifs.json.zip"
