from __future__ import annotations

import sqlalchemy as sa

from alembic import op

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

MONEY = sa.Numeric(15, 2)
RATE = sa.Numeric(5, 2)
COMPUTED = sa.Numeric(28, 10)


def upgrade() -> None:
    op.create_table(
        "company_profiles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("company_name", sa.String(length=200), nullable=False),
        sa.Column("company_address", sa.Text(), nullable=True),
        sa.Column("gstin", sa.String(length=15), nullable=True),
        sa.Column("logo_url", sa.String(length=500), nullable=True),
        sa.Column("fiscal_year_start_month", sa.Integer(), nullable=False, server_default="4"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    )
    op.create_index("ix_company_profiles_user_id", "company_profiles", ["user_id"], unique=True)

    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("company_profiles.id"), nullable=False),
        sa.Column("account_name", sa.String(length=200), nullable=False),
        sa.Column("account_type", sa.String(length=20), nullable=False),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    )
    op.create_index("ix_accounts_company_id", "accounts", ["company_id"])

    op.create_table(
        "products_services",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("company_profiles.id"), nullable=False),
        sa.Column("item_name", sa.String(length=200), nullable=False),
        sa.Column("hsn_sac_code", sa.String(length=20), nullable=True),
        sa.Column("default_sale_price", MONEY, nullable=False, server_default="0"),
        sa.Column("default_gst_rate", RATE, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    )
    op.create_index("ix_products_services_company_id", "products_services", ["company_id"])

    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("company_profiles.id"), nullable=False),
        sa.Column("customer_name", sa.String(length=200), nullable=False),
        sa.Column("customer_gstin", sa.String(length=15), nullable=True),
        sa.Column("invoice_number", sa.String(length=40), nullable=False),
        sa.Column("invoice_date", sa.Date(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("place_of_supply_type", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=True, server_default="Draft"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("sub_total_amount", COMPUTED, nullable=True),
        sa.Column("total_gst_amount", COMPUTED, nullable=True),
        sa.Column("total_invoice_amount", COMPUTED, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("status_updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("company_id", "invoice_number", name="uq_invoice_company_number"),
    )
    op.create_index("ix_invoices_company_id", "invoices", ["company_id"])
    op.create_index("ix_invoices_invoice_number", "invoices", ["invoice_number"])
    op.create_index("ix_invoices_invoice_date", "invoices", ["invoice_date"])
    op.create_index("ix_invoices_status", "invoices", ["status"])

    op.create_table(
        "invoice_items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("invoice_id", sa.Integer(), sa.ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "product_service_id",
            sa.Integer(),
            sa.ForeignKey("products_services.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("item_description", sa.Text(), nullable=False),
        sa.Column("quantity", MONEY, nullable=True),
        sa.Column("rate", MONEY, nullable=True),
        sa.Column("gst_rate_percentage", RATE, nullable=True),
        sa.Column("item_total_amount", COMPUTED, nullable=True),
        sa.Column("cgst_amount", COMPUTED, nullable=True),
        sa.Column("sgst_amount", COMPUTED, nullable=True),
        sa.Column("igst_amount", COMPUTED, nullable=True),
        sa.Column("item_gst_total", COMPUTED, nullable=True),
    )
    op.create_index("ix_invoice_items_invoice_id", "invoice_items", ["invoice_id"])
    op.create_index("ix_invoice_items_product_service_id", "invoice_items", ["product_service_id"])

    op.create_table(
        "expenses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("company_profiles.id"), nullable=False),
        sa.Column("vendor_name", sa.String(length=200), nullable=True),
        sa.Column("vendor_gstin", sa.String(length=15), nullable=True),
        sa.Column("expense_date", sa.Date(), nullable=False),
        sa.Column("expense_description", sa.Text(), nullable=False),
        sa.Column("expense_account_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("amount_before_gst", MONEY, nullable=True),
        sa.Column("gst_rate_applied_on_purchase", RATE, nullable=True),
        sa.Column(
            "place_of_supply_type_for_purchase",
            sa.String(length=20),
            nullable=False,
            server_default="Not Applicable",
        ),
        sa.Column("gst_paid_amount", COMPUTED, nullable=True),
        sa.Column("cgst_input_credit", COMPUTED, nullable=True),
        sa.Column("sgst_input_credit", COMPUTED, nullable=True),
        sa.Column("igst_input_credit", COMPUTED, nullable=True),
        sa.Column("total_expense_amount", COMPUTED, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_expenses_company_id", "expenses", ["company_id"])
    op.create_index("ix_expenses_expense_date", "expenses", ["expense_date"])
    op.create_index("ix_expenses_expense_account_id", "expenses", ["expense_account_id"])


def downgrade() -> None:
    op.drop_table("expenses")
    op.drop_table("invoice_items")
    op.drop_table("invoices")
    op.drop_table("products_services")
    op.drop_table("accounts")
    op.drop_table("company_profiles")
