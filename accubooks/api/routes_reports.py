"""Report endpoints: Profit & Loss, GST summary and dashboard.

All three accept the same period selection: a calendar month (default: the
current one), the company's fiscal year, or an explicit inclusive range.
"""
from datetime import date
from typing import Annotated, Literal, TypeAlias

from fastapi import APIRouter, Depends, Query

from accubooks.api.dependencies import CompanyDep, DbDep
from accubooks.models import schemas
from accubooks.services.tax_reporting import (
    ReportingService,
    ReportPeriod,
    adjacent_periods,
    calculate_period_range,
)

router = APIRouter(prefix="/reports", tags=["reports"])


def get_report_period(
    company: CompanyDep,
    period_type: Literal["month", "fiscal_year", "custom"] = "month",
    year: int | None = Query(None, ge=1, le=9998),
    month: int | None = Query(None, ge=1, le=12),
    start_date: date | None = None,
    end_date: date | None = None,
) -> ReportPeriod:
    return calculate_period_range(
        period_type=period_type,
        year=year,
        month=month,
        start_date=start_date,
        end_date=end_date,
        fiscal_year_start_month=company.fiscal_year_start_month,
    )


ReportPeriodDep: TypeAlias = Annotated[ReportPeriod, Depends(get_report_period)]


def _bounds(period: ReportPeriod | None) -> dict | None:
    if period is None:
        return None
    return {"start_date": period.start, "end_date": period.end}


def _period_out(period: ReportPeriod) -> dict:
    previous, following = adjacent_periods(period)
    return {
        **_bounds(period),
        "previous_period": _bounds(previous),
        "next_period": _bounds(following),
    }


@router.get("/profit-loss", response_model=schemas.ProfitLossOut)
def profit_and_loss(company: CompanyDep, period: ReportPeriodDep, db: DbDep):
    """Sales of non-draft invoices against expenses per Expense account."""
    report = ReportingService(db).profit_and_loss(company, period)
    return {"period": _period_out(period), **report}


@router.get("/gst-summary", response_model=schemas.GSTSummaryOut)
def gst_summary(company: CompanyDep, period: ReportPeriodDep, db: DbDep):
    """Output GST on sales, input credit on purchases and the signed net per head."""
    report = ReportingService(db).gst_summary(company, period)
    return {"period": _period_out(period), **report}


@router.get("/dashboard", response_model=schemas.DashboardOut)
def dashboard(company: CompanyDep, period: ReportPeriodDep, db: DbDep):
    report = ReportingService(db).dashboard(company, period)
    return {"period": _period_out(period), **report}
