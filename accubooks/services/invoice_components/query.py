"""Query/list helpers for invoices."""
from __future__ import annotations

import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from accubooks.core.exceptions import InvalidInvoiceStatusError, InvoiceNotFoundError
from accubooks.models import models
from accubooks.models.enums import InvoiceStatus

logger = logging.getLogger(__name__)


class InvoiceQueryMixin:
    db: Session

    def list_invoices(
        self,
        company_id: int,
        search: str | None = None,
        status: str | None = None,
    ) -> list[models.Invoice]:
        query = (
            self.db.query(models.Invoice)
            .filter(models.Invoice.company_id == company_id)
            .options(selectinload(models.Invoice.items))
        )
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    models.Invoice.customer_name.ilike(pattern),
                    models.Invoice.invoice_number.ilike(pattern),
                )
            )
        if status:
            try:
                status_value = InvoiceStatus(status).value
            except ValueError as exc:
                raise InvalidInvoiceStatusError(new_status=status) from exc
            query = query.filter(models.Invoice.status == status_value)
        return query.order_by(models.Invoice.invoice_date.desc(), models.Invoice.id.desc()).all()

    def get_invoice(self, company_id: int, invoice_id: int) -> models.Invoice:
        invoice = (
            self.db.query(models.Invoice)
            .options(selectinload(models.Invoice.items))
            .filter(models.Invoice.id == invoice_id, models.Invoice.company_id == company_id)
            .one_or_none()
        )
        if not invoice:
            raise InvoiceNotFoundError(invoice_id)
        return invoice

    def delete_invoice(self, company_id: int, invoice_id: int) -> None:
        invoice = self.get_invoice(company_id, invoice_id)
        self.db.delete(invoice)
        self.db.commit()
        logger.info("Deleted invoice %s (%s) for company %s", invoice_id, invoice.invoice_number, company_id)
