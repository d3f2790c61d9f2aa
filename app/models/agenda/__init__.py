"""Agenda domain models - sittings, agenda items, attendance."""

from app.models.agenda.sitting import (
    AGENDA_ITEM_DDL,
    SITTING_ATTENDANCE_DDL,
    SITTING_DDL,
    SOURCE_METADATA_DDL,
)

__all__ = [
    "SITTING_DDL",
    "AGENDA_ITEM_DDL",
    "SOURCE_METADATA_DDL",
    "SITTING_ATTENDANCE_DDL",
]
