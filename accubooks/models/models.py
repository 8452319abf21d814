from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from accubooks.db.base_class import Base
from accubooks.models.enums import InvoiceStatus, SupplyType

# Entered amounts keep two fraction digits; computed amounts are stored unrounded
MONEY = Numeric(15, 2)
RATE = Numeric(5, 2)
COMPUTED = Numeric(28, 10)


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class CompanyProfile(Base):
    """Tenant root. Every other row hangs off a company profile."""
    __tablename__ = "company_profiles"

    id: Mapped[int] = mapped_column(primary_key=True)
    # Subject claim issued by the identity provider
    user_id: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    company_name: Mapped[str] = mapped_column(String(200), nullable=False)
    company_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    gstin: Mapped[str | None] = mapped_column(String(15), nullable=True)
    logo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    fiscal_year_start_month: Mapped[int] = mapped_column(Integer, default=4, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
    )

    accounts: Mapped[list[Account]] = relationship(
        "Account", back_populates="company", cascade="all, delete-orphan"
    )


class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True)
    company_id: Mapped[int] = mapped_column(ForeignKey("company_profiles.id"), index=True)
    account_name: Mapped[str] = mapped_column(String(200), nullable=False)
    account_type: Mapped[str] = mapped_column(String(20), nullable=False)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
    )

    company: Mapped[CompanyProfile] = relationship("CompanyProfile", back_populates="accounts")

    def __repr__(self):
        return f"<Account(id={self.id}, name={self.account_name!r}, type={self.account_type})>"


class ProductService(Base):
    __tablename__ = "products_services"

    id: Mapped[int] = mapped_column(primary_key=True)
    company_id: Mapped[int] = mapped_column(ForeignKey("company_profiles.id"), index=True)
    item_name: Mapped[str] = mapped_column(String(200), nullable=False)
    hsn_sac_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    default_sale_price: Mapped[Decimal] = mapped_column(MONEY, default=Decimal("0"), nullable=False)
    default_gst_rate: Mapped[Decimal] = mapped_column(RATE, default=Decimal("0"), nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
    )


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (UniqueConstraint("company_id", "invoice_number", name="uq_invoice_company_number"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    company_id: Mapped[int] = mapped_column(ForeignKey("company_profiles.id"), index=True)
    customer_name: Mapped[str] = mapped_column(String(200), nullable=False)
    customer_gstin: Mapped[str | None] = mapped_column(String(15), nullable=True)
    invoice_number: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    invoice_date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    due_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    place_of_supply_type: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default=InvoiceStatus.DRAFT.value, index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Recomputed from the items on every save
    sub_total_amount: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))
    total_gst_amount: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))
    total_invoice_amount: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
    )
    status_updated_at: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    items: Mapped[list[InvoiceItem]] = relationship(
        "InvoiceItem",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="InvoiceItem.position",
    )


class InvoiceItem(Base):
    __tablename__ = "invoice_items"

    id: Mapped[int] = mapped_column(primary_key=True)
    invoice_id: Mapped[int] = mapped_column(ForeignKey("invoices.id", ondelete="CASCADE"), index=True)
    # Keeps the order the items were entered in
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    product_service_id: Mapped[int | None] = mapped_column(
        ForeignKey("products_services.id", ondelete="SET NULL"), nullable=True, index=True
    )
    item_description: Mapped[str] = mapped_column(Text, nullable=False)
    quantity: Mapped[Decimal] = mapped_column(MONEY, default=Decimal("1"))
    rate: Mapped[Decimal] = mapped_column(MONEY, default=Decimal("0"))
    gst_rate_percentage: Mapped[Decimal] = mapped_column(RATE, default=Decimal("0"))

    item_total_amount: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))
    cgst_amount: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))
    sgst_amount: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))
    igst_amount: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))
    item_gst_total: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))

    invoice: Mapped[Invoice] = relationship("Invoice", back_populates="items")
    product_service: Mapped[ProductService | None] = relationship("ProductService")


class Expense(Base):
    __tablename__ = "expenses"

    id: Mapped[int] = mapped_column(primary_key=True)
    company_id: Mapped[int] = mapped_column(ForeignKey("company_profiles.id"), index=True)
    vendor_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    vendor_gstin: Mapped[str | None] = mapped_column(String(15), nullable=True)
    expense_date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    expense_description: Mapped[str] = mapped_column(Text, nullable=False)
    expense_account_id: Mapped[int] = mapped_column(ForeignKey("accounts.id"), index=True)

    amount_before_gst: Mapped[Decimal] = mapped_column(MONEY, default=Decimal("0"))
    gst_rate_applied_on_purchase: Mapped[Decimal] = mapped_column(RATE, default=Decimal("0"))
    place_of_supply_type_for_purchase: Mapped[str] = mapped_column(
        String(20), default=SupplyType.NOT_APPLICABLE.value, nullable=False
    )

    gst_paid_amount: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))
    cgst_input_credit: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))
    sgst_input_credit: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))
    igst_input_credit: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))
    total_expense_amount: Mapped[Decimal] = mapped_column(COMPUTED, default=Decimal("0"))

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), onupdate=utcnow, nullable=True)

    account: Mapped[Account] = relationship("Account")

    def __repr__(self):
        return f"<Expense(id={self.id}, company_id={self.company_id}, amount={self.amount_before_gst}, date={self.expense_date})>"
