"""Reporting service.

Fetches the rows a report needs, always scoped to one company and one
closed date range, and hands them to the pure reducers in ``computations``.
"""
import logging

from sqlalchemy.orm import Session, selectinload

from accubooks import metrics
from accubooks.models.enums import AccountType, InvoiceStatus
from accubooks.models.models import Account, CompanyProfile, Expense, Invoice

from .computations import compute_dashboard, compute_gst_summary, compute_profit_and_loss
from .period_utils import ReportPeriod

logger = logging.getLogger(__name__)


class ReportingService:
    """Profit & Loss, GST summary and dashboard figures for a company."""

    def __init__(self, db: Session):
        self.db = db

    def _invoices(self, company_id: int, period: ReportPeriod, *, include_drafts: bool = False, with_items: bool = False):
        query = self.db.query(Invoice).filter(
            Invoice.company_id == company_id,
            Invoice.invoice_date >= period.start,
            Invoice.invoice_date <= period.end,
        )
        if not include_drafts:
            query = query.filter(Invoice.status != InvoiceStatus.DRAFT.value)
        if with_items:
            query = query.options(selectinload(Invoice.items))
        return query.order_by(Invoice.invoice_date, Invoice.id).all()

    def _expenses(self, company_id: int, period: ReportPeriod):
        return (
            self.db.query(Expense)
            .filter(
                Expense.company_id == company_id,
                Expense.expense_date >= period.start,
                Expense.expense_date <= period.end,
            )
            .order_by(Expense.expense_date, Expense.id)
            .all()
        )

    def _expense_accounts(self, company_id: int):
        return (
            self.db.query(Account)
            .filter(Account.company_id == company_id, Account.account_type == AccountType.EXPENSE.value)
            .order_by(Account.account_name, Account.id)
            .all()
        )

    def profit_and_loss(self, company: CompanyProfile, period: ReportPeriod) -> dict:
        report = compute_profit_and_loss(
            invoices=self._invoices(company.id, period),
            expenses=self._expenses(company.id, period),
            expense_accounts=self._expense_accounts(company.id),
        )
        metrics.report_generated("profit_loss")
        logger.info(
            "Profit & loss for company %s (%s..%s): sales=%s expenses=%s net=%s",
            company.id,
            period.start,
            period.end,
            report["total_sales"],
            report["total_expenses"],
            report["net_profit"],
        )
        return report

    def gst_summary(self, company: CompanyProfile, period: ReportPeriod) -> dict:
        report = compute_gst_summary(
            invoices=self._invoices(company.id, period, with_items=True),
            expenses=self._expenses(company.id, period),
        )
        metrics.report_generated("gst_summary")
        logger.info(
            "GST summary for company %s (%s..%s): net payable=%s",
            company.id,
            period.start,
            period.end,
            report["net_payable"]["total"]["amount"],
        )
        return report

    def dashboard(self, company: CompanyProfile, period: ReportPeriod) -> dict:
        report = compute_dashboard(
            invoices=self._invoices(company.id, period, include_drafts=True),
            expenses=self._expenses(company.id, period),
        )
        metrics.report_generated("dashboard")
        return report
