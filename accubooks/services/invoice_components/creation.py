"""Invoice create/update workflow mixin.

Items and totals are recomputed from scratch on every save and written in a
single commit: the stored item set is replaced wholesale, never patched.
"""
from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from accubooks import metrics
from accubooks.core.exceptions import DuplicateInvoiceNumberError, InvalidInputError, ProductNotFoundError
from accubooks.models import models
from accubooks.models.enums import InvoiceStatus, SupplyType
from accubooks.services.gst import InvoiceTotals, LineItemInput, aggregate_invoice
from accubooks.utils.id_generator import generate_id

logger = logging.getLogger(__name__)

HEADER_FIELDS = ("customer_name", "customer_gstin", "invoice_date", "due_date", "notes")


class InvoiceCreationMixin:
    """Handles invoice creation and recompute-and-replace updates."""

    db: Session

    def _resolve_item(self, company_id: int, index: int, item: dict[str, object]) -> dict[str, object]:
        """Fill description, rate and GST rate from the linked product when omitted."""
        resolved = dict(item)
        product_id = item.get("product_service_id")
        product = None
        if product_id is not None:
            product = (
                self.db.query(models.ProductService)
                .filter(models.ProductService.id == product_id, models.ProductService.company_id == company_id)
                .one_or_none()
            )
            if product is None:
                raise ProductNotFoundError(product_id)

        defaults = {
            "item_description": product.item_name if product else None,
            "rate": product.default_sale_price if product else None,
            "gst_rate_percentage": product.default_gst_rate if product else None,
        }
        for field, default in defaults.items():
            if resolved.get(field) is None:
                if default is None:
                    raise InvalidInputError(f"{field} is required when no product is selected", field=f"items[{index}].{field}")
                resolved[field] = default
        if resolved.get("quantity") is None:
            resolved["quantity"] = Decimal("1")
        return resolved

    def _build_items(
        self,
        company_id: int,
        items_data: list[dict[str, object]],
        supply_type: str,
    ) -> tuple[list[models.InvoiceItem], InvoiceTotals]:
        resolved = [self._resolve_item(company_id, index, item) for index, item in enumerate(items_data)]
        totals = aggregate_invoice(
            [
                LineItemInput(
                    quantity=item["quantity"],
                    rate=item["rate"],
                    gst_rate_percent=item["gst_rate_percentage"],
                )
                for item in resolved
            ],
            supply_type,
        )
        items = [
            models.InvoiceItem(
                position=position,
                product_service_id=source.get("product_service_id"),
                item_description=source["item_description"],
                quantity=computed.quantity,
                rate=computed.rate,
                gst_rate_percentage=computed.gst_rate_percent,
                item_total_amount=computed.item_total,
                cgst_amount=computed.cgst,
                sgst_amount=computed.sgst,
                igst_amount=computed.igst,
                item_gst_total=computed.gst_amount,
            )
            for position, (source, computed) in enumerate(zip(resolved, totals.items))
        ]
        return items, totals

    def _ensure_number_available(self, company_id: int, invoice_number: str, invoice_id: int | None = None) -> None:
        query = self.db.query(models.Invoice.id).filter(
            models.Invoice.company_id == company_id,
            models.Invoice.invoice_number == invoice_number,
        )
        if invoice_id is not None:
            query = query.filter(models.Invoice.id != invoice_id)
        if query.first() is not None:
            raise DuplicateInvoiceNumberError(invoice_number)

    def _commit_invoice(self, invoice: models.Invoice) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise DuplicateInvoiceNumberError(invoice.invoice_number) from exc
        except Exception:
            self.db.rollback()
            raise

    def create_invoice(self, company_id: int, data: dict[str, object]) -> models.Invoice:
        invoice_number = data.get("invoice_number") or generate_id("INV")
        self._ensure_number_available(company_id, invoice_number)
        items, totals = self._build_items(company_id, data.get("items") or [], data["place_of_supply_type"])

        invoice = models.Invoice(
            company_id=company_id,
            invoice_number=invoice_number,
            status=InvoiceStatus.DRAFT.value,
            place_of_supply_type=SupplyType(data["place_of_supply_type"]).value,
            sub_total_amount=totals.sub_total,
            total_gst_amount=totals.total_gst,
            total_invoice_amount=totals.grand_total,
            **{field: data.get(field) for field in HEADER_FIELDS},
        )
        invoice.items = items
        self.db.add(invoice)
        self._commit_invoice(invoice)
        self.db.refresh(invoice)

        metrics.invoice_saved("create", totals.grand_total)
        logger.info(
            "Created invoice %s (%s) for company %s: items=%d grand_total=%s",
            invoice.id,
            invoice.invoice_number,
            company_id,
            len(items),
            totals.grand_total,
        )
        return invoice

    def update_invoice(self, company_id: int, invoice_id: int, data: dict[str, object]) -> models.Invoice:
        invoice = self.get_invoice(company_id, invoice_id)

        invoice_number = data.get("invoice_number") or invoice.invoice_number
        if invoice_number != invoice.invoice_number:
            self._ensure_number_available(company_id, invoice_number, invoice.id)
        items, totals = self._build_items(company_id, data.get("items") or [], data["place_of_supply_type"])

        invoice.invoice_number = invoice_number
        for field in HEADER_FIELDS:
            setattr(invoice, field, data.get(field))
        invoice.place_of_supply_type = SupplyType(data["place_of_supply_type"]).value
        # delete-orphan cascade removes the previous items in the same flush
        invoice.items = items
        invoice.sub_total_amount = totals.sub_total
        invoice.total_gst_amount = totals.total_gst
        invoice.total_invoice_amount = totals.grand_total
        self._commit_invoice(invoice)
        self.db.refresh(invoice)

        metrics.invoice_saved("update", totals.grand_total)
        logger.info(
            "Updated invoice %s for company %s: items=%d grand_total=%s",
            invoice.id,
            company_id,
            len(items),
            totals.grand_total,
        )
        return invoice
