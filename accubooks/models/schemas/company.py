"""Company profile schemas."""
from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from .utils import GSTIN


class CompanyProfileCreate(BaseModel):
    company_name: str = Field(..., min_length=1, max_length=200)
    company_address: str | None = None
    gstin: GSTIN = None
    logo_url: str | None = Field(None, max_length=500)
    fiscal_year_start_month: int | None = Field(None, ge=1, le=12)


class CompanyProfileUpdate(BaseModel):
    company_name: str | None = Field(None, min_length=1, max_length=200)
    company_address: str | None = None
    gstin: GSTIN = None
    logo_url: str | None = Field(None, max_length=500)
    fiscal_year_start_month: int | None = Field(None, ge=1, le=12)


class CompanyProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_name: str
    company_address: str | None = None
    gstin: str | None = None
    logo_url: str | None = None
    fiscal_year_start_month: int
    created_at: dt.datetime | None = None
