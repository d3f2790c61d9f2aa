"""Tagging repositories."""

from app.repositories.tagging.tags import ASSIGNMENT_TABLES, TagRepository

__all__ = ["ASSIGNMENT_TABLES", "TagRepository"]
