"""Tagging domain entities."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass
class TagDefinition(BaseEntity):
    """A catalog tag with the keywords that trigger it."""

    id: str
    slug: str
    keywords: list[str] = field(default_factory=list)


@dataclass
class TagMatch(BaseEntity):
    """A tag matched against an entity's text."""

    tag_id: str
    confidence: float
