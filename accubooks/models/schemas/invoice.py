"""Invoice-related schemas."""
from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from accubooks.models.enums import InvoiceStatus, SupplyType

from .utils import GSTIN, AmountIn, Fixed2, GSTRateIn, Money, QuantityIn


class InvoiceItemIn(BaseModel):
    # Description, rate and GST rate fall back to the product's defaults
    product_service_id: int | None = None
    item_description: str | None = Field(None, min_length=1)
    quantity: QuantityIn = Decimal("1")
    rate: AmountIn | None = None
    gst_rate_percentage: GSTRateIn | None = None


class InvoiceCreate(BaseModel):
    customer_name: str = Field(..., min_length=1, max_length=200)
    customer_gstin: GSTIN = None
    invoice_number: str | None = Field(None, min_length=1, max_length=40)
    invoice_date: dt.date = Field(default_factory=dt.date.today)
    due_date: dt.date | None = None
    place_of_supply_type: SupplyType
    notes: str | None = None
    items: list[InvoiceItemIn] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _due_after_invoice_date(self) -> InvoiceCreate:
        if self.due_date is not None and self.due_date < self.invoice_date:
            raise ValueError("due_date cannot be before invoice_date")
        return self


class InvoiceUpdate(InvoiceCreate):
    """Full replacement; items are recomputed and replaced wholesale."""


class InvoiceItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_service_id: int | None = None
    item_description: str
    quantity: Fixed2
    rate: Money
    gst_rate_percentage: Fixed2
    item_total_amount: Money
    cgst_amount: Money
    sgst_amount: Money
    igst_amount: Money
    item_gst_total: Money


class InvoiceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    invoice_number: str
    customer_name: str
    customer_gstin: str | None = None
    invoice_date: dt.date
    due_date: dt.date | None = None
    place_of_supply_type: str
    status: str
    sub_total_amount: Money
    total_gst_amount: Money
    total_invoice_amount: Money
    created_at: dt.datetime | None = None


class InvoiceOutDetailed(InvoiceOut):
    notes: str | None = None
    status_updated_at: dt.datetime | None = None
    items: list[InvoiceItemOut] = Field(default_factory=list)


class InvoiceStatusUpdate(BaseModel):
    status: InvoiceStatus
