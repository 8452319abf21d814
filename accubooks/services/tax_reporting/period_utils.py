"""Report period calculation utilities.

A report period is a closed date interval [start, end]. Month-aligned periods
(whole calendar months) can be stepped backwards and forwards by whole months.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Optional

from accubooks.core.exceptions import InvalidReportPeriodError

PERIOD_TYPES = ("month", "fiscal_year", "custom")


@dataclass(frozen=True)
class ReportPeriod:
    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidReportPeriodError("start_date must not be after end_date")

    @property
    def is_month_aligned(self) -> bool:
        return self.start.day == 1 and self.end.day == _last_day(self.end.year, self.end.month)

    @property
    def month_span(self) -> int:
        """Number of calendar months touched by the period."""
        return _month_index(self.end) - _month_index(self.start) + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def _last_day(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def _month_index(day: date) -> int:
    return day.year * 12 + day.month - 1


def _add_months(day: date, months: int) -> date:
    """Move ``day`` by whole months, clamping to the end of shorter months."""
    index = _month_index(day) + months
    year, month = divmod(index, 12)
    month += 1
    if not date.min.year <= year <= date.max.year:
        raise InvalidReportPeriodError(f"year out of range: {year}")
    return date(year, month, min(day.day, _last_day(year, month)))


def month_period(year: int, month: int) -> ReportPeriod:
    if not 1 <= month <= 12:
        raise InvalidReportPeriodError(f"month must be between 1 and 12, got {month}")
    if not 1 <= year <= 9998:
        raise InvalidReportPeriodError(f"year out of range: {year}")
    return ReportPeriod(date(year, month, 1), date(year, month, _last_day(year, month)))


def current_month(today: Optional[date] = None) -> ReportPeriod:
    today = today or date.today()
    return month_period(today.year, today.month)


def fiscal_year_period(start_month: int, containing: Optional[date] = None) -> ReportPeriod:
    """Fiscal year that contains ``containing`` (default: today).

    With ``start_month=4`` the 2025 fiscal year runs 2025-04-01 to 2026-03-31.
    """
    if not 1 <= start_month <= 12:
        raise InvalidReportPeriodError(f"fiscal year start month must be between 1 and 12, got {start_month}")
    containing = containing or date.today()
    start_year = containing.year if containing.month >= start_month else containing.year - 1
    if start_year < date.min.year:
        raise InvalidReportPeriodError(f"year out of range: {start_year}")
    start = date(start_year, start_month, 1)
    end = _add_months(start, 12).replace(day=1)
    end = date.fromordinal(end.toordinal() - 1)
    return ReportPeriod(start, end)


def shift_period(period: ReportPeriod, months: int) -> ReportPeriod:
    """Move ``period`` by whole months.

    Month-aligned periods stay month-aligned and keep their month span; other
    ranges move both ends by the same number of months.
    """
    if period.is_month_aligned:
        start = _add_months(period.start, months)
        last = _add_months(start, period.month_span - 1)
        return ReportPeriod(start, date(last.year, last.month, _last_day(last.year, last.month)))
    return ReportPeriod(_add_months(period.start, months), _add_months(period.end, months))


def calculate_period_range(
    period_type: str = "month",
    year: Optional[int] = None,
    month: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    fiscal_year_start_month: int = 4,
    today: Optional[date] = None,
) -> ReportPeriod:
    """Resolve report query parameters into a period.

    Args:
        period_type: 'month', 'fiscal_year' or 'custom'
        year: Month or fiscal year to report on (defaults to the current one)
        month: Required with ``year`` for month periods
        start_date: Required for custom periods
        end_date: Required for custom periods
        fiscal_year_start_month: First month of the company's fiscal year
        today: Reference date, for tests

    Raises:
        InvalidReportPeriodError: If parameters are missing or inconsistent
    """
    today = today or date.today()

    if period_type == "custom":
        if start_date is None or end_date is None:
            raise InvalidReportPeriodError("start_date and end_date are required for custom periods")
        return ReportPeriod(start_date, end_date)

    if period_type == "month":
        if year is None and month is None:
            return current_month(today)
        if year is None or month is None:
            raise InvalidReportPeriodError("year and month must be given together")
        return month_period(year, month)

    if period_type == "fiscal_year":
        if year is None:
            return fiscal_year_period(fiscal_year_start_month, today)
        if not 1 <= year <= 9998:
            raise InvalidReportPeriodError(f"year out of range: {year}")
        return fiscal_year_period(fiscal_year_start_month, date(year, fiscal_year_start_month, 1))

    raise InvalidReportPeriodError(f"period_type must be one of {', '.join(PERIOD_TYPES)}")


def _neighbour(period: ReportPeriod, months: int) -> Optional[ReportPeriod]:
    try:
        return shift_period(period, months)
    except InvalidReportPeriodError:
        return None


def adjacent_periods(period: ReportPeriod) -> tuple[Optional[ReportPeriod], Optional[ReportPeriod]]:
    """Previous and next period of the same length, for report navigation.

    A neighbour that would fall outside the calendar range is None.
    """
    step = period.month_span if period.is_month_aligned else 1
    return _neighbour(period, -step), _neighbour(period, step)
