"""Repositories package - data access layer for our database."""

from app.repositories.agenda import SittingRepository
from app.repositories.base import BaseRepository
from app.repositories.common import IngestionLogRepository
from app.repositories.core import CirconscriptionRepository, DeputyRepository, OrganeRepository
from app.repositories.db import (
    close_db,
    connect,
    get_db,
    get_write_connection,
    init_tables,
)
from app.repositories.legislation import BillRepository
from app.repositories.tagging import TagRepository
from app.repositories.voting import ScrutinRepository

__all__ = [
    # DB
    "get_db",
    "close_db",
    "connect",
    "init_tables",
    "get_write_connection",
    # Base
    "BaseRepository",
    # Common
    "IngestionLogRepository",
    # Core
    "DeputyRepository",
    "OrganeRepository",
    "CirconscriptionRepository",
    # Agenda
    "SittingRepository",
    # Voting
    "ScrutinRepository",
    # Legislation
    "BillRepository",
    # Tagging
    "TagRepository",
]
