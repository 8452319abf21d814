"""Chart of accounts schemas."""
from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from accubooks.models.enums import AccountType


class AccountCreate(BaseModel):
    account_name: str = Field(..., min_length=1, max_length=200)
    account_type: AccountType


class AccountUpdate(BaseModel):
    account_name: str | None = Field(None, min_length=1, max_length=200)
    account_type: AccountType | None = None


class AccountOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    account_name: str
    account_type: str
    is_default: bool
    created_at: dt.datetime | None = None
