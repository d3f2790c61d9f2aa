"""Agenda repositories."""

from app.repositories.agenda.sittings import SittingRepository

__all__ = ["SittingRepository"]
