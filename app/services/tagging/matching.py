"""Keyword matching for thematic tags."""

from app.models.tagging import TagDefinition, TagMatch
from app.services.text import normalize_text

BASE_CONFIDENCE = 0.5
WEIGHT_SCALE = 0.1


def keyword_weight(keyword: str) -> float:
    """Longer keywords are more specific."""
    if len(keyword) > 10:
        return 1.5
    if len(keyword) > 5:
        return 1.2
    return 1.0


def confidence(matched_keywords: list[str]) -> float:
    """Score in [0.5, 1.0], non-decreasing in the number of matched keywords."""
    weighted = sum(keyword_weight(k) for k in matched_keywords)
    return round(min(BASE_CONFIDENCE + WEIGHT_SCALE * weighted, 1.0), 2)


def match_tags(text: str, catalog: list[TagDefinition]) -> list[TagMatch]:
    """Tags whose keywords occur in `text` (accent and case insensitive)."""
    normalized = normalize_text(text)
    if not normalized.strip():
        return []
    matches = []
    for tag in catalog:
        matched = [k for k in tag.keywords if normalize_text(k) in normalized]
        if matched:
            matches.append(TagMatch(tag_id=tag.id, confidence=confidence(matched)))
    return matches


def entity_text(*parts: str | None) -> str:
    return " ".join(p for p in parts if p)
