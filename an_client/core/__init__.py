"""Core AMO client - acteurs, mandates, organes."""

from an_client.core.client import CoreClient
from an_client.core.schemas import ActeurSchema, MandateSchema, OrganeSchema

__all__ = ["CoreClient", "ActeurSchema", "MandateSchema", "OrganeSchema"]
