from fastapi import APIRouter

from accubooks.api.dependencies import CurrentUserDep, DbDep
from accubooks.models import schemas
from accubooks.services.company_service import CompanyService

router = APIRouter(prefix="/company", tags=["company"])


@router.post("", response_model=schemas.CompanyProfileOut, status_code=201)
def create_company_profile(data: schemas.CompanyProfileCreate, current_user_id: CurrentUserDep, db: DbDep):
    """Create the caller's company profile and seed the default accounts."""
    return CompanyService(db).create_profile(current_user_id, data.model_dump())


@router.get("", response_model=schemas.CompanyProfileOut)
def get_company_profile(current_user_id: CurrentUserDep, db: DbDep):
    return CompanyService(db).get_profile(current_user_id)


@router.patch("", response_model=schemas.CompanyProfileOut)
def update_company_profile(data: schemas.CompanyProfileUpdate, current_user_id: CurrentUserDep, db: DbDep):
    return CompanyService(db).update_profile(current_user_id, data.model_dump(exclude_unset=True))
