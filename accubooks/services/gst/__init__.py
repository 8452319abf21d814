"""Tax & ledger calculator.

Pure functions with no database access and no logging:
- gst_split: CGST/SGST vs IGST split for one taxable amount
- invoice_totals: per-item GST and invoice totals
- expense_gst: GST paid on purchases as input credit
"""
from .expense_gst import ExpenseGST, compute_expense
from .gst_split import GSTBreakdown, split_gst
from .invoice_totals import ComputedLineItem, InvoiceTotals, LineItemInput, aggregate_invoice
from .rules import GST_RATE_MAX, GST_RATE_MIN

__all__ = [
    "GST_RATE_MIN",
    "GST_RATE_MAX",
    "GSTBreakdown",
    "split_gst",
    "LineItemInput",
    "ComputedLineItem",
    "InvoiceTotals",
    "aggregate_invoice",
    "ExpenseGST",
    "compute_expense",
]
