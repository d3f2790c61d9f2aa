"""ETL package - data sync from the Assemblée nationale open data to the store."""

from etl.helpers import IngestOptions
from etl.sync import JOBS, run_job, sync, sync_all

__all__ = [
    "IngestOptions",
    "JOBS",
    "run_job",
    "sync",
    "sync_all",
]
