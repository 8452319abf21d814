from __future__ import annotations

from sqlalchemy.orm import Session

from accubooks.services.invoice_components import (
    InvoiceCreationMixin,
    InvoiceQueryMixin,
    InvoiceStatusMixin,
)


class InvoiceService(
    InvoiceCreationMixin,
    InvoiceQueryMixin,
    InvoiceStatusMixin,
):
    """Facade that wires mixins with shared dependencies."""

    def __init__(self, db: Session):
        self.db = db


def build_invoice_service(db: Session) -> InvoiceService:
    return InvoiceService(db)
