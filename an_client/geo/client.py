"""Constituency contours client (data.gouv.fr GeoJSON)."""

from an_client.base import BaseClient
from an_client.geo.schemas import CirconscriptionFeature, decode_features
from settings import CIRCONSCRIPTIONS_GEOJSON_URL


class GeoClient(BaseClient):
    """Client for the legislative constituency contours."""

    async def circonscriptions(self) -> list[CirconscriptionFeature]:
        collection = await self.fetch_json("circonscriptions", CIRCONSCRIPTIONS_GEOJSON_URL)
        return decode_features(collection)
