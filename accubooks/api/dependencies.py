"""Common dependencies for tenant resolution."""
from typing import Annotated, TypeAlias

from fastapi import Depends
from sqlalchemy.orm import Session

from accubooks.api.auth import get_current_user_id
from accubooks.db.session import get_db
from accubooks.models.models import CompanyProfile
from accubooks.services.company_service import CompanyService

CurrentUserDep: TypeAlias = Annotated[str, Depends(get_current_user_id)]
DbDep: TypeAlias = Annotated[Session, Depends(get_db)]


def get_current_company(current_user_id: CurrentUserDep, db: DbDep) -> CompanyProfile:
    """
    Company profile of the caller; every company-scoped query filters by its id.

    Raises CompanyProfileRequiredError (404) until the profile is set up.
    """
    return CompanyService(db).get_profile(current_user_id)


CompanyDep: TypeAlias = Annotated[CompanyProfile, Depends(get_current_company)]
