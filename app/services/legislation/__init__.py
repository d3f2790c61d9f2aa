"""Legislation services."""

from app.services.legislation.bills import (
    bill_reference,
    dossier_bill_row,
    extract_bill_title,
    infer_type_and_origin,
    link_role,
    reference_bill_row,
)

__all__ = [
    "bill_reference",
    "dossier_bill_row",
    "extract_bill_title",
    "infer_type_and_origin",
    "link_role",
    "reference_bill_row",
]
