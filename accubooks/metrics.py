"""Metrics facade.

Service code should ONLY call the semantic helpers here so the backend can
change freely.

Metrics:
- invoices_saved_total            Invoices created or updated, by operation
- invoice_status_changes_total    Invoice workflow transitions, by target status
- invoice_amount_inr              Grand totals of saved invoices
- expenses_recorded_total         Expenses created or updated, by operation
- reports_generated_total         Reports served, by report type
"""

from __future__ import annotations

import logging

from prometheus_client import Counter, Histogram

logger = logging.getLogger("metrics")

_INVOICES_SAVED = Counter("invoices_saved_total", "Invoices created or updated", ["operation"])
_INVOICE_STATUS_CHANGES = Counter(
    "invoice_status_changes_total", "Invoice status transitions", ["to_status"]
)
_INVOICE_AMOUNT = Histogram(
    "invoice_amount_inr",
    "Invoice grand totals in Rupees",
    buckets=(100, 500, 1000, 5000, 10000, 50000, 100000, 500000, 1000000, 5000000),
)
_EXPENSES_RECORDED = Counter("expenses_recorded_total", "Expenses created or updated", ["operation"])
_REPORTS_GENERATED = Counter("reports_generated_total", "Reports served", ["report"])


def invoice_saved(operation: str, grand_total=None):
    _INVOICES_SAVED.labels(operation=operation).inc()
    if grand_total is not None:
        _INVOICE_AMOUNT.observe(float(grand_total))


def invoice_status_changed(to_status: str):
    _INVOICE_STATUS_CHANGES.labels(to_status=to_status).inc()


def expense_recorded(operation: str):
    _EXPENSES_RECORDED.labels(operation=operation).inc()


def report_generated(report: str):
    _REPORTS_GENERATED.labels(report=report).inc()
