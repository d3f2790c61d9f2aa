"""Agenda client - plenary sittings and commission reunions."""

from an_client.agenda.client import AgendaClient
from an_client.agenda.schemas import AgendaPointSchema, ParticipantSchema, ReunionSchema

__all__ = ["AgendaClient", "AgendaPointSchema", "ParticipantSchema", "ReunionSchema"]
