"""Invoice workflow transitions.

Draft -> Sent -> Paid, with Sent -> Overdue -> Paid. Nothing moves an
invoice to Overdue automatically; the caller decides.
"""
from __future__ import annotations

import datetime as dt
import logging

from sqlalchemy.orm import Session

from accubooks import metrics
from accubooks.core.exceptions import InvalidInvoiceStatusError
from accubooks.models import models
from accubooks.models.enums import InvoiceStatus

logger = logging.getLogger(__name__)


class InvoiceStatusMixin:
    db: Session

    def update_status(self, company_id: int, invoice_id: int, status: str) -> models.Invoice:
        try:
            new_status = InvoiceStatus(status)
        except ValueError as exc:
            raise InvalidInvoiceStatusError(new_status=str(status)) from exc

        invoice = self.get_invoice(company_id, invoice_id)
        previous_status = InvoiceStatus(invoice.status)
        if new_status not in previous_status.allowed_transitions:
            raise InvalidInvoiceStatusError(previous_status.value, new_status.value)

        invoice.status = new_status.value
        invoice.status_updated_at = dt.datetime.now(dt.timezone.utc)
        self.db.commit()
        self.db.refresh(invoice)

        metrics.invoice_status_changed(new_status.value)
        logger.info(
            "Invoice %s status transitioned %s -> %s",
            invoice.invoice_number,
            previous_status.value,
            new_status.value,
        )
        return invoice
