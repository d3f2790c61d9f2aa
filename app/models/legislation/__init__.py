"""Legislation domain models - bills and their links to scrutins."""

from app.models.legislation.bill import BILL_DDL, BILL_SCRUTIN_DDL
from app.models.legislation.entities import BillOrigin, BillReference, BillType, LinkRole

__all__ = [
    "BILL_DDL",
    "BILL_SCRUTIN_DDL",
    "BillOrigin",
    "BillReference",
    "BillType",
    "LinkRole",
]
