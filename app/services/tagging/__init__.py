"""Tagging services."""

from app.services.tagging.matching import confidence, keyword_weight, match_tags
from app.services.tagging.service import ThematicTagger, assignment_rows, match_all

__all__ = [
    "ThematicTagger",
    "assignment_rows",
    "confidence",
    "keyword_weight",
    "match_all",
    "match_tags",
]
