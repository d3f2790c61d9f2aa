"""Legislation client - dossiers législatifs."""

from an_client.legislation.client import LegislationClient
from an_client.legislation.schemas import DossierSchema

__all__ = ["LegislationClient", "DossierSchema"]
