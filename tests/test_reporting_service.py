"""ReportingService against the database: scoping and period boundaries."""
from datetime import date
from decimal import Decimal

import pytest

from accubooks.models.enums import AccountType
from accubooks.services.account_service import AccountService
from accubooks.services.company_service import CompanyService
from accubooks.services.expense_service import ExpenseService
from accubooks.services.invoice_service import build_invoice_service
from accubooks.services.tax_reporting import ReportingService, month_period


def _invoice(db, company_id, number, day, rate="100", sent=True):
    svc = build_invoice_service(db)
    invoice = svc.create_invoice(
        company_id,
        {
            "customer_name": "Customer",
            "invoice_number": number,
            "invoice_date": day,
            "place_of_supply_type": "Inter-State",
            "items": [{"item_description": "Service", "quantity": Decimal("1"), "rate": Decimal(rate), "gst_rate_percentage": Decimal("18")}],
        },
    )
    if sent:
        svc.update_status(company_id, invoice.id, "Sent")
    return invoice


def _expense(db, company_id, account_id, day, amount="100"):
    return ExpenseService(db).create_expense(
        company_id,
        {
            "expense_date": day,
            "expense_description": "Supplies",
            "expense_account_id": account_id,
            "amount_before_gst": Decimal(amount),
            "gst_rate_applied_on_purchase": Decimal("12"),
            "place_of_supply_type_for_purchase": "Inter-State",
        },
    )


@pytest.fixture
def companies(db_session):
    companies = CompanyService(db_session)
    first = companies.create_profile("owner-1", {"company_name": "First"})
    second = companies.create_profile("owner-2", {"company_name": "Second"})
    return first, second


def _purchases_account(db, company_id):
    accounts = AccountService(db).list_accounts(company_id, AccountType.EXPENSE)
    return next(a for a in accounts if a.account_name == "Purchases/Direct Expenses")


def test_period_bounds_are_inclusive(db_session, companies):
    first, _ = companies
    account = _purchases_account(db_session, first.id)
    _invoice(db_session, first.id, "A-1", date(2024, 5, 1))
    _invoice(db_session, first.id, "A-2", date(2024, 5, 31))
    _invoice(db_session, first.id, "A-3", date(2024, 6, 1))
    _expense(db_session, first.id, account.id, date(2024, 5, 31))
    _expense(db_session, first.id, account.id, date(2024, 4, 30))

    report = ReportingService(db_session).gst_summary(first, month_period(2024, 5))
    assert report["invoice_count"] == 2
    assert report["expense_count"] == 1
    assert report["sales"]["igst"] == Decimal("36")
    assert report["purchases"]["igst"] == Decimal("12")
    assert report["net_payable"]["igst"]["amount"] == Decimal("24")
    assert report["net_payable"]["total"]["status"] == "payable"


def test_reports_never_mix_companies(db_session, companies):
    first, second = companies
    _invoice(db_session, first.id, "A-1", date(2024, 5, 10), rate="1000")
    _expense(db_session, second.id, _purchases_account(db_session, second.id).id, date(2024, 5, 10), amount="300")

    reporting = ReportingService(db_session)
    period = month_period(2024, 5)

    pnl_first = reporting.profit_and_loss(first, period)
    assert pnl_first["total_sales"] == Decimal("1000")
    assert pnl_first["total_expenses"] == Decimal("0")

    pnl_second = reporting.profit_and_loss(second, period)
    assert pnl_second["total_sales"] == Decimal("0")
    assert pnl_second["total_expenses"] == Decimal("300")
    assert pnl_second["result"] == "loss"

    gst_second = reporting.gst_summary(second, period)
    assert gst_second["net_payable"]["igst"] == {"amount": Decimal("-36"), "status": "credit"}


def test_dashboard_counts_drafts_but_not_their_sales(db_session, companies):
    first, _ = companies
    _invoice(db_session, first.id, "A-1", date(2024, 5, 10))
    _invoice(db_session, first.id, "A-2", date(2024, 5, 11), sent=False)

    dashboard = ReportingService(db_session).dashboard(first, month_period(2024, 5))
    assert dashboard["invoice_count"] == 2
    assert dashboard["invoice_status_counts"]["Draft"] == 1
    assert dashboard["total_sales"] == Decimal("118")
