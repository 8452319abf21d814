"""Expense recording.

GST on a purchase is recomputed from the entered amount, rate and supply type
on every save and stored as input credit.
"""
from __future__ import annotations

import datetime as dt
import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from accubooks import metrics
from accubooks.core.exceptions import ExpenseNotFoundError
from accubooks.models.enums import SupplyType
from accubooks.models.models import Account, Expense
from accubooks.services.account_service import AccountService
from accubooks.services.gst import compute_expense

logger = logging.getLogger(__name__)

DESCRIPTIVE_FIELDS = ("vendor_name", "vendor_gstin", "expense_date", "expense_description")
NULLABLE_FIELDS = {"vendor_name", "vendor_gstin"}


class ExpenseService:
    def __init__(self, db: Session):
        self.db = db
        self.accounts = AccountService(db)

    def _apply_gst(self, expense: Expense) -> None:
        computed = compute_expense(
            expense.amount_before_gst,
            expense.gst_rate_applied_on_purchase,
            expense.place_of_supply_type_for_purchase,
        )
        expense.gst_paid_amount = computed.gst_paid_amount
        expense.cgst_input_credit = computed.cgst_input_credit
        expense.sgst_input_credit = computed.sgst_input_credit
        expense.igst_input_credit = computed.igst_input_credit
        expense.total_expense_amount = computed.total_expense_amount

    def list_expenses(
        self,
        company_id: int,
        search: str | None = None,
        start_date: dt.date | None = None,
        end_date: dt.date | None = None,
    ) -> list[Expense]:
        query = (
            self.db.query(Expense)
            .join(Account, Expense.expense_account_id == Account.id)
            .options(joinedload(Expense.account))
            .filter(Expense.company_id == company_id)
        )
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(
                    Expense.expense_description.ilike(pattern),
                    Expense.vendor_name.ilike(pattern),
                    Account.account_name.ilike(pattern),
                )
            )
        if start_date is not None:
            query = query.filter(Expense.expense_date >= start_date)
        if end_date is not None:
            query = query.filter(Expense.expense_date <= end_date)
        return query.order_by(Expense.expense_date.desc(), Expense.id.desc()).all()

    def get_expense(self, company_id: int, expense_id: int) -> Expense:
        expense = (
            self.db.query(Expense)
            .options(joinedload(Expense.account))
            .filter(Expense.id == expense_id, Expense.company_id == company_id)
            .one_or_none()
        )
        if expense is None:
            raise ExpenseNotFoundError(expense_id)
        return expense

    def create_expense(self, company_id: int, data: dict[str, object]) -> Expense:
        account = self.accounts.get_expense_account(company_id, data["expense_account_id"])
        expense = Expense(
            company_id=company_id,
            account=account,
            amount_before_gst=data["amount_before_gst"],
            gst_rate_applied_on_purchase=data.get("gst_rate_applied_on_purchase") or 0,
            place_of_supply_type_for_purchase=SupplyType(
                data.get("place_of_supply_type_for_purchase") or SupplyType.NOT_APPLICABLE
            ).value,
            **{field: data.get(field) for field in DESCRIPTIVE_FIELDS},
        )
        self._apply_gst(expense)
        self.db.add(expense)
        self.db.commit()
        self.db.refresh(expense)
        metrics.expense_recorded("create")
        logger.info(
            "Recorded expense %s for company %s: amount=%s gst=%s",
            expense.id,
            company_id,
            expense.amount_before_gst,
            expense.gst_paid_amount,
        )
        return expense

    def update_expense(self, company_id: int, expense_id: int, data: dict[str, object]) -> Expense:
        expense = self.get_expense(company_id, expense_id)
        if data.get("expense_account_id") is not None:
            expense.account = self.accounts.get_expense_account(company_id, data["expense_account_id"])
        for field in DESCRIPTIVE_FIELDS:
            if field in data and (data[field] is not None or field in NULLABLE_FIELDS):
                setattr(expense, field, data[field])
        if data.get("amount_before_gst") is not None:
            expense.amount_before_gst = data["amount_before_gst"]
        if data.get("gst_rate_applied_on_purchase") is not None:
            expense.gst_rate_applied_on_purchase = data["gst_rate_applied_on_purchase"]
        if data.get("place_of_supply_type_for_purchase") is not None:
            expense.place_of_supply_type_for_purchase = SupplyType(data["place_of_supply_type_for_purchase"]).value

        try:
            self._apply_gst(expense)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(expense)
        metrics.expense_recorded("update")
        logger.info("Updated expense %s for company %s", expense.id, company_id)
        return expense

    def delete_expense(self, company_id: int, expense_id: int) -> None:
        expense = self.get_expense(company_id, expense_id)
        self.db.delete(expense)
        self.db.commit()
        logger.info("Deleted expense %s for company %s", expense_id, company_id)
