"""Tagging domain models - thematic tags and assignments."""

from app.models.tagging.entities import TagDefinition, TagMatch
from app.models.tagging.tag import BILL_THEMATIC_TAG_DDL, SCRUTIN_THEMATIC_TAG_DDL, THEMATIC_TAG_DDL

__all__ = [
    "THEMATIC_TAG_DDL",
    "SCRUTIN_THEMATIC_TAG_DDL",
    "BILL_THEMATIC_TAG_DDL",
    "TagDefinition",
    "TagMatch",
]
