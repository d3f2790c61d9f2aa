"""Constituency GeoJSON feature schema."""

from pydantic import BaseModel

from an_client.fields import decode_each, text

POLYGON_TYPES = ("Polygon", "MultiPolygon")


class CirconscriptionFeature(BaseModel):
    code_departement: str
    nom_departement: str
    code_circonscription: str
    geometry: dict | None = None


def decode_feature(feature: dict) -> CirconscriptionFeature | None:
    props = feature.get("properties") or {}
    code_dep = text(props.get("codeDepartement"))
    nom_dep = text(props.get("nomDepartement"))
    code_circ = text(props.get("codeCirconscription"))
    if not code_dep or not nom_dep or not code_circ:
        return None
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict) or geometry.get("type") not in POLYGON_TYPES:
        geometry = None
    return CirconscriptionFeature(
        code_departement=code_dep,
        nom_departement=nom_dep,
        code_circonscription=code_circ,
        geometry=geometry,
    )


def decode_features(collection: dict) -> list[CirconscriptionFeature]:
    features = [f for f in collection.get("features") or [] if isinstance(f, dict)]
    return decode_each(features, decode_feature, "feature")
