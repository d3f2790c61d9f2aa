"""Geo client - constituency contours."""

from an_client.geo.client import GeoClient
from an_client.geo.schemas import CirconscriptionFeature

__all__ = ["GeoClient", "CirconscriptionFeature"]
