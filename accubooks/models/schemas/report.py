"""Report response schemas."""
from __future__ import annotations

import datetime as dt
from typing import Literal

from pydantic import BaseModel

from .utils import Money

NetStatus = Literal["payable", "credit", "nil"]


class PeriodOut(BaseModel):
    start_date: dt.date
    end_date: dt.date


class ReportPeriodOut(PeriodOut):
    # None at the edges of the supported calendar range
    previous_period: PeriodOut | None = None
    next_period: PeriodOut | None = None


class AccountAmountOut(BaseModel):
    account_id: int
    account_name: str
    amount: Money


class ProfitLossOut(BaseModel):
    period: ReportPeriodOut
    total_sales: Money
    expenses_by_account: list[AccountAmountOut]
    total_expenses: Money
    net_profit: Money
    result: Literal["profit", "loss", "break_even"]


class GSTHeadsOut(BaseModel):
    taxable_value: Money
    cgst: Money
    sgst: Money
    igst: Money


class NetAmountOut(BaseModel):
    amount: Money
    status: NetStatus


class NetPayableOut(BaseModel):
    cgst: NetAmountOut
    sgst: NetAmountOut
    igst: NetAmountOut
    total: NetAmountOut


class GSTSummaryOut(BaseModel):
    period: ReportPeriodOut
    sales: GSTHeadsOut
    purchases: GSTHeadsOut
    net_payable: NetPayableOut
    invoice_count: int
    expense_count: int


class DashboardOut(BaseModel):
    period: ReportPeriodOut
    total_sales: Money
    total_expenses: Money
    net: Money
    invoice_count: int
    invoice_status_counts: dict[str, int]
    expense_count: int
