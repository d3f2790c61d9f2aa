"""Assemblée nationale open-data client package."""

from an_client.agenda import AgendaClient
from an_client.base import ArchiveFetchError, BaseClient, archive_cache, parse_archive
from an_client.core import CoreClient
from an_client.geo import GeoClient
from an_client.legislation import LegislationClient
from an_client.voting import VotingClient

__all__ = [
    # Base
    "ArchiveFetchError",
    "BaseClient",
    "archive_cache",
    "parse_archive",
    # Clients
    "AgendaClient",
    "CoreClient",
    "GeoClient",
    "LegislationClient",
    "VotingClient",
]
