"""Pydantic schemas for API requests and responses.

Sub-modules:
- company: Company profile schemas
- account: Chart of accounts schemas
- product: Products/services catalog schemas
- invoice: Invoice and line item schemas
- expense: Expense schemas
- report: Profit & Loss, GST summary and dashboard schemas
- utils: Money, GST rate and GSTIN field types
"""
from .account import AccountCreate, AccountOut, AccountUpdate
from .company import CompanyProfileCreate, CompanyProfileOut, CompanyProfileUpdate
from .expense import ExpenseCreate, ExpenseOut, ExpenseUpdate
from .invoice import (
    InvoiceCreate,
    InvoiceItemIn,
    InvoiceItemOut,
    InvoiceOut,
    InvoiceOutDetailed,
    InvoiceStatusUpdate,
    InvoiceUpdate,
)
from .product import ProductCreate, ProductOut, ProductUpdate
from .report import (
    AccountAmountOut,
    DashboardOut,
    GSTHeadsOut,
    GSTSummaryOut,
    NetAmountOut,
    NetPayableOut,
    PeriodOut,
    ProfitLossOut,
    ReportPeriodOut,
)

__all__ = [
    # Company
    "CompanyProfileCreate",
    "CompanyProfileUpdate",
    "CompanyProfileOut",
    # Accounts
    "AccountCreate",
    "AccountUpdate",
    "AccountOut",
    # Products
    "ProductCreate",
    "ProductUpdate",
    "ProductOut",
    # Invoices
    "InvoiceItemIn",
    "InvoiceCreate",
    "InvoiceUpdate",
    "InvoiceItemOut",
    "InvoiceOut",
    "InvoiceOutDetailed",
    "InvoiceStatusUpdate",
    # Expenses
    "ExpenseCreate",
    "ExpenseUpdate",
    "ExpenseOut",
    # Reports
    "PeriodOut",
    "ReportPeriodOut",
    "AccountAmountOut",
    "ProfitLossOut",
    "GSTHeadsOut",
    "NetAmountOut",
    "NetPayableOut",
    "GSTSummaryOut",
    "DashboardOut",
]
