"""Company profile management.

A profile is the tenant root: one per identity-provider subject. Creating it
also seeds the default chart of accounts in the same transaction.
"""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from accubooks.core.config import settings
from accubooks.core.exceptions import CompanyProfileExistsError, CompanyProfileRequiredError
from accubooks.models.enums import DEFAULT_ACCOUNTS
from accubooks.models.models import Account, CompanyProfile

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("company_name", "company_address", "gstin", "logo_url", "fiscal_year_start_month")
NULLABLE_FIELDS = {"company_address", "gstin", "logo_url"}


class CompanyService:
    def __init__(self, db: Session):
        self.db = db

    def find_profile(self, user_id: str) -> CompanyProfile | None:
        return self.db.query(CompanyProfile).filter(CompanyProfile.user_id == user_id).one_or_none()

    def get_profile(self, user_id: str) -> CompanyProfile:
        profile = self.find_profile(user_id)
        if profile is None:
            raise CompanyProfileRequiredError()
        return profile

    def create_profile(self, user_id: str, data: dict[str, object]) -> CompanyProfile:
        if self.find_profile(user_id) is not None:
            raise CompanyProfileExistsError()

        profile = CompanyProfile(
            user_id=user_id,
            company_name=data["company_name"],
            company_address=data.get("company_address"),
            gstin=data.get("gstin"),
            logo_url=data.get("logo_url"),
            fiscal_year_start_month=data.get("fiscal_year_start_month") or settings.DEFAULT_FISCAL_YEAR_START_MONTH,
        )
        for name, account_type in DEFAULT_ACCOUNTS:
            profile.accounts.append(Account(account_name=name, account_type=account_type.value, is_default=True))

        self.db.add(profile)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # Concurrent create for the same subject
            self.db.rollback()
            raise CompanyProfileExistsError() from exc
        self.db.refresh(profile)
        logger.info(
            "Created company profile %s for user %s with %d default accounts",
            profile.id,
            user_id,
            len(DEFAULT_ACCOUNTS),
        )
        return profile

    def update_profile(self, user_id: str, data: dict[str, object]) -> CompanyProfile:
        profile = self.get_profile(user_id)
        changed = []
        for field in UPDATABLE_FIELDS:
            if field not in data:
                continue
            if data[field] is None and field not in NULLABLE_FIELDS:
                continue
            setattr(profile, field, data[field])
            changed.append(field)
        self.db.commit()
        self.db.refresh(profile)
        logger.info("Updated company profile %s fields=%s", profile.id, changed)
        return profile
