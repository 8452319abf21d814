"""Report reducers.

Pure computation over already-fetched rows: Profit & Loss, GST summary and
the dashboard totals. No database access here; the reporting service scopes
the fetch by company and date range and hands the rows over.

Rows are duck-typed (ORM objects or anything with the same attributes), so
the reducers can be exercised without a database.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable

from accubooks.models.enums import InvoiceStatus

ZERO = Decimal("0")
GST_HEADS = ("cgst", "sgst", "igst")

# Dashboard counts Sent and Paid invoices as realised sales
DASHBOARD_SALE_STATUSES = (InvoiceStatus.SENT.value, InvoiceStatus.PAID.value)


def _is_sale(invoice: Any) -> bool:
    return InvoiceStatus(invoice.status).counts_as_sale


def result_label(amount: Decimal) -> str:
    """Profit & Loss outcome label. The sign of net profit is never clamped."""
    if amount > 0:
        return "profit"
    if amount < 0:
        return "loss"
    return "break_even"


def net_label(amount: Decimal) -> str:
    """GST net position label: positive is payable, negative carries forward."""
    if amount > 0:
        return "payable"
    if amount < 0:
        return "credit"
    return "nil"


def compute_profit_and_loss(
    invoices: Iterable[Any],
    expenses: Iterable[Any],
    expense_accounts: Iterable[Any],
) -> dict:
    """
    Profit & Loss for one period.

    Args:
        invoices: Invoices dated within the period (drafts are skipped here)
        expenses: Expenses dated within the period; rows booked to an
            account outside ``expense_accounts`` are skipped
        expense_accounts: Every Expense-type account of the company

    Returns:
        dict with total_sales, expenses_by_account (ordered by account name,
        zero rows included), total_expenses, net_profit, result
    """
    total_sales = sum((inv.sub_total_amount for inv in invoices if _is_sale(inv)), ZERO)

    by_account: dict[int, dict] = {}
    for account in sorted(expense_accounts, key=lambda a: (a.account_name, a.id)):
        by_account[account.id] = {
            "account_id": account.id,
            "account_name": account.account_name,
            "amount": ZERO,
        }

    for expense in expenses:
        row = by_account.get(expense.expense_account_id)
        if row is None:
            # Only Expense-type accounts are reported
            continue
        row["amount"] += expense.amount_before_gst

    expenses_by_account = sorted(by_account.values(), key=lambda r: (r["account_name"], r["account_id"]))
    total_expenses = sum((row["amount"] for row in expenses_by_account), ZERO)
    net_profit = total_sales - total_expenses

    return {
        "total_sales": total_sales,
        "expenses_by_account": expenses_by_account,
        "total_expenses": total_expenses,
        "net_profit": net_profit,
        "result": result_label(net_profit),
    }


def compute_gst_summary(invoices: Iterable[Any], expenses: Iterable[Any]) -> dict:
    """
    GST summary for one period.

    Output tax comes from the line items of non-draft invoices, input credit
    from every expense. ``net_payable`` keeps its sign per head.
    """
    sales = {"taxable_value": ZERO, "cgst": ZERO, "sgst": ZERO, "igst": ZERO}
    invoice_count = 0
    for invoice in invoices:
        if not _is_sale(invoice):
            continue
        invoice_count += 1
        for item in invoice.items:
            sales["taxable_value"] += item.item_total_amount
            sales["cgst"] += item.cgst_amount
            sales["sgst"] += item.sgst_amount
            sales["igst"] += item.igst_amount

    purchases = {"taxable_value": ZERO, "cgst": ZERO, "sgst": ZERO, "igst": ZERO}
    expense_count = 0
    for expense in expenses:
        expense_count += 1
        purchases["taxable_value"] += expense.amount_before_gst
        purchases["cgst"] += expense.cgst_input_credit
        purchases["sgst"] += expense.sgst_input_credit
        purchases["igst"] += expense.igst_input_credit

    net_payable = {}
    for head in GST_HEADS:
        amount = sales[head] - purchases[head]
        net_payable[head] = {"amount": amount, "status": net_label(amount)}
    total = sum((net_payable[head]["amount"] for head in GST_HEADS), ZERO)
    net_payable["total"] = {"amount": total, "status": net_label(total)}

    return {
        "sales": sales,
        "purchases": purchases,
        "net_payable": net_payable,
        "invoice_count": invoice_count,
        "expense_count": expense_count,
    }


def compute_dashboard(invoices: Iterable[Any], expenses: Iterable[Any]) -> dict:
    invoices = list(invoices)
    expenses = list(expenses)
    sales = [inv for inv in invoices if inv.status in DASHBOARD_SALE_STATUSES]
    status_counts = {status.value: 0 for status in InvoiceStatus}
    for invoice in invoices:
        status_counts[invoice.status] = status_counts.get(invoice.status, 0) + 1

    total_sales = sum((inv.total_invoice_amount for inv in sales), ZERO)
    total_expenses = sum((exp.total_expense_amount for exp in expenses), ZERO)
    return {
        "total_sales": total_sales,
        "total_expenses": total_expenses,
        "net": total_sales - total_expenses,
        "invoice_count": len(invoices),
        "invoice_status_counts": status_counts,
        "expense_count": len(expenses),
    }
