"""
Pydantic schemas for the expense API.

GST fields on the way out are computed; clients only send the amount before
GST, the rate and the supply type.
"""
from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from accubooks.models.enums import SupplyType

from .utils import GSTIN, AmountIn, Fixed2, GSTRateIn, Money


class ExpenseCreate(BaseModel):
    vendor_name: str | None = Field(None, max_length=200)
    vendor_gstin: GSTIN = None
    expense_date: dt.date = Field(default_factory=dt.date.today)
    expense_description: str = Field(..., min_length=1)
    expense_account_id: int
    amount_before_gst: AmountIn
    gst_rate_applied_on_purchase: GSTRateIn = Decimal("0")
    place_of_supply_type_for_purchase: SupplyType = SupplyType.NOT_APPLICABLE


class ExpenseUpdate(BaseModel):
    vendor_name: str | None = Field(None, max_length=200)
    vendor_gstin: GSTIN = None
    expense_date: dt.date | None = None
    expense_description: str | None = Field(None, min_length=1)
    expense_account_id: int | None = None
    amount_before_gst: AmountIn | None = None
    gst_rate_applied_on_purchase: GSTRateIn | None = None
    place_of_supply_type_for_purchase: SupplyType | None = None


class ExpenseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    vendor_name: str | None = None
    vendor_gstin: str | None = None
    expense_date: dt.date
    expense_description: str
    expense_account_id: int
    account_name: str | None = None
    amount_before_gst: Money
    gst_rate_applied_on_purchase: Fixed2
    place_of_supply_type_for_purchase: str
    gst_paid_amount: Money
    cgst_input_credit: Money
    sgst_input_credit: Money
    igst_input_credit: Money
    total_expense_amount: Money
    created_at: dt.datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def populate_account_name(cls, data: Any) -> Any:
        """Extract account_name from the account relationship."""
        if hasattr(data, "account") and data.account is not None:
            return {
                **{k: getattr(data, k, None) for k in cls.model_fields.keys() if k != "account_name"},
                "account_name": data.account.account_name,
            }
        return data
