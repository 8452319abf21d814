"""Products/services catalog schemas."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from .utils import AmountIn, Fixed2, GSTRateIn, Money


class ProductCreate(BaseModel):
    item_name: str = Field(..., min_length=1, max_length=200)
    hsn_sac_code: str | None = Field(None, max_length=20)
    default_sale_price: AmountIn = Decimal("0")
    default_gst_rate: GSTRateIn = Decimal("0")


class ProductUpdate(BaseModel):
    item_name: str | None = Field(None, min_length=1, max_length=200)
    hsn_sac_code: str | None = Field(None, max_length=20)
    default_sale_price: AmountIn | None = None
    default_gst_rate: GSTRateIn | None = None


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    item_name: str
    hsn_sac_code: str | None = None
    default_sale_price: Money
    default_gst_rate: Fixed2
