"""Chart of accounts, scoped by company."""
from __future__ import annotations

import logging

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from accubooks.core.exceptions import (
    AccountInUseError,
    AccountNotFoundError,
    DefaultAccountProtectedError,
    InvalidExpenseAccountError,
)
from accubooks.models.enums import AccountType
from accubooks.models.models import Account, Expense

logger = logging.getLogger(__name__)

# Listing order: Income, Expense, Asset, Liability
_TYPE_ORDER = case(
    {account_type.value: position for position, account_type in enumerate(AccountType)},
    value=Account.account_type,
    else_=len(AccountType),
)


class AccountService:
    def __init__(self, db: Session):
        self.db = db

    def list_accounts(self, company_id: int, account_type: AccountType | None = None) -> list[Account]:
        query = self.db.query(Account).filter(Account.company_id == company_id)
        if account_type is not None:
            query = query.filter(Account.account_type == AccountType(account_type).value)
        return query.order_by(_TYPE_ORDER, Account.account_name, Account.id).all()

    def get_account(self, company_id: int, account_id: int) -> Account:
        account = (
            self.db.query(Account)
            .filter(Account.id == account_id, Account.company_id == company_id)
            .one_or_none()
        )
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def get_expense_account(self, company_id: int, account_id: int) -> Account:
        """Account an expense may be booked against."""
        account = self.get_account(company_id, account_id)
        if account.account_type != AccountType.EXPENSE.value:
            raise InvalidExpenseAccountError(account.account_name, account.account_type)
        return account

    def _expense_count(self, account_id: int) -> int:
        return self.db.query(func.count(Expense.id)).filter(Expense.expense_account_id == account_id).scalar() or 0

    def create_account(self, company_id: int, data: dict[str, object]) -> Account:
        account = Account(
            company_id=company_id,
            account_name=data["account_name"],
            account_type=AccountType(data["account_type"]).value,
            is_default=False,
        )
        self.db.add(account)
        self.db.commit()
        self.db.refresh(account)
        logger.info("Created %s account %s (%s) for company %s", account.account_type, account.id, account.account_name, company_id)
        return account

    def update_account(self, company_id: int, account_id: int, data: dict[str, object]) -> Account:
        account = self.get_account(company_id, account_id)
        if account.is_default:
            raise DefaultAccountProtectedError(account.account_name, "edited")

        new_type = data.get("account_type")
        if new_type is not None:
            new_type = AccountType(new_type).value
            # Expenses must stay booked against Expense accounts
            if account.account_type == AccountType.EXPENSE.value and new_type != account.account_type:
                in_use = self._expense_count(account.id)
                if in_use:
                    raise AccountInUseError(account.account_name, in_use)
            account.account_type = new_type
        if data.get("account_name") is not None:
            account.account_name = data["account_name"]

        self.db.commit()
        self.db.refresh(account)
        logger.info("Updated account %s for company %s", account.id, company_id)
        return account

    def delete_account(self, company_id: int, account_id: int) -> None:
        account = self.get_account(company_id, account_id)
        if account.is_default:
            raise DefaultAccountProtectedError(account.account_name, "deleted")
        in_use = self._expense_count(account.id)
        if in_use:
            raise AccountInUseError(account.account_name, in_use)
        self.db.delete(account)
        self.db.commit()
        logger.info("Deleted account %s for company %s", account_id, company_id)
