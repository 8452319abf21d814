"""Report generation.

Sub-modules:
- computations: pure Profit & Loss, GST summary and dashboard reducers
- period_utils: report period resolution and month navigation
- reporting_service: company-scoped fetch feeding the reducers
"""
from .computations import (
    compute_dashboard,
    compute_gst_summary,
    compute_profit_and_loss,
    net_label,
    result_label,
)
from .period_utils import (
    ReportPeriod,
    adjacent_periods,
    calculate_period_range,
    current_month,
    fiscal_year_period,
    month_period,
    shift_period,
)
from .reporting_service import ReportingService

__all__ = [
    # Computation functions
    "compute_profit_and_loss",
    "compute_gst_summary",
    "compute_dashboard",
    "result_label",
    "net_label",
    # Periods
    "ReportPeriod",
    "month_period",
    "current_month",
    "fiscal_year_period",
    "shift_period",
    "adjacent_periods",
    "calculate_period_range",
    # Service class
    "ReportingService",
]
