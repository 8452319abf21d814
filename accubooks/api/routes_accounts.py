from fastapi import APIRouter, Response

from accubooks.api.dependencies import CompanyDep, DbDep
from accubooks.models import schemas
from accubooks.models.enums import AccountType
from accubooks.services.account_service import AccountService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("", response_model=list[schemas.AccountOut])
def list_accounts(company: CompanyDep, db: DbDep, account_type: AccountType | None = None):
    """Chart of accounts ordered by type, then name."""
    return AccountService(db).list_accounts(company.id, account_type)


@router.post("", response_model=schemas.AccountOut, status_code=201)
def create_account(data: schemas.AccountCreate, company: CompanyDep, db: DbDep):
    return AccountService(db).create_account(company.id, data.model_dump())


@router.patch("/{account_id}", response_model=schemas.AccountOut)
def update_account(account_id: int, data: schemas.AccountUpdate, company: CompanyDep, db: DbDep):
    return AccountService(db).update_account(company.id, account_id, data.model_dump(exclude_unset=True))


@router.delete("/{account_id}", status_code=204)
def delete_account(account_id: int, company: CompanyDep, db: DbDep):
    AccountService(db).delete_account(company.id, account_id)
    return Response(status_code=204)
