"""Legislation repositories."""

from app.repositories.legislation.bills import BillRepository

__all__ = ["BillRepository"]
