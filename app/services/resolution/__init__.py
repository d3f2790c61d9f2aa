"""Entity resolution - constituencies, deputies, memberships."""

from app.services.resolution.circonscriptions import canonical_id, display_name, labels_for_id, looks_like_id
from app.services.resolution.deputies import deputy_row, membership_rows, resolve_mandate

__all__ = [
    "canonical_id",
    "display_name",
    "labels_for_id",
    "looks_like_id",
    "deputy_row",
    "membership_rows",
    "resolve_mandate",
]
