"""
Expense API endpoints.

GST paid and input credit are computed from the amount, rate and supply type
on every create and update.
"""
from datetime import date

from fastapi import APIRouter, Query, Response

from accubooks.api.dependencies import CompanyDep, DbDep
from accubooks.core.exceptions import InvalidReportPeriodError
from accubooks.models import schemas
from accubooks.services.expense_service import ExpenseService

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.post("", response_model=schemas.ExpenseOut, status_code=201)
def create_expense(data: schemas.ExpenseCreate, company: CompanyDep, db: DbDep):
    return ExpenseService(db).create_expense(company.id, data.model_dump())


@router.get("", response_model=list[schemas.ExpenseOut])
def list_expenses(
    company: CompanyDep,
    db: DbDep,
    search: str | None = Query(None, max_length=100, description="Description, vendor or account name"),
    start_date: date | None = None,
    end_date: date | None = None,
):
    if start_date and end_date and start_date > end_date:
        raise InvalidReportPeriodError("start_date must not be after end_date")
    return ExpenseService(db).list_expenses(company.id, search=search, start_date=start_date, end_date=end_date)


@router.get("/{expense_id}", response_model=schemas.ExpenseOut)
def get_expense(expense_id: int, company: CompanyDep, db: DbDep):
    return ExpenseService(db).get_expense(company.id, expense_id)


@router.put("/{expense_id}", response_model=schemas.ExpenseOut)
def update_expense(expense_id: int, data: schemas.ExpenseUpdate, company: CompanyDep, db: DbDep):
    return ExpenseService(db).update_expense(company.id, expense_id, data.model_dump(exclude_unset=True))


@router.delete("/{expense_id}", status_code=204)
def delete_expense(expense_id: int, company: CompanyDep, db: DbDep):
    ExpenseService(db).delete_expense(company.id, expense_id)
    return Response(status_code=204)
