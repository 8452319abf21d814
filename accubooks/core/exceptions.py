"""Custom exception hierarchy for AccuBooks.

Every application error derives from AccuBooksException so the API layer can
translate it to a response in one place. The GST calculator raises only the
validation errors; everything else belongs to the data-access services.

Error codes follow pattern: [CATEGORY][NUMBER]
- GST: Tax computation / validation errors (001-099)
- CMP: Company profile errors (100-199)
- ACC: Chart of accounts errors (200-299)
- INV: Invoice errors (300-399)
- EXP: Expense errors (400-499)
- PRD: Product/service catalog errors (500-599)
- RPT: Report errors (600-699)
"""

from __future__ import annotations

from typing import Any


class AccuBooksException(Exception):
    """Base exception for all AccuBooks application errors."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception with user-facing message and metadata.

        Args:
            message: User-facing error message
            code: Unique error code (e.g., "INV301")
            status_code: HTTP status code (default: 400 Bad Request)
            details: Optional additional context
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response format."""
        return {
            "error": {
                "message": self.message,
                "code": self.code,
                "details": self.details,
            }
        }


# ============================================================================
# GST / VALIDATION ERRORS (GST001-099)
# ============================================================================

class InvalidInputError(AccuBooksException):
    """Input rejected before any tax computation ran."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message=message, code="GST001", status_code=400, details=details)


class InconsistentSupplyTypeError(InvalidInputError):
    """Sales invoices only support Intra-State and Inter-State supply."""

    def __init__(self, supply_type: str):
        super().__init__(
            message=f"Supply type '{supply_type}' is not allowed on a sales invoice",
            field="place_of_supply_type",
            value=supply_type,
        )
        self.code = "GST002"


# ============================================================================
# COMPANY ERRORS (CMP100-199)
# ============================================================================

class CompanyError(AccuBooksException):
    """Base class for company profile errors."""
    pass


class CompanyProfileRequiredError(CompanyError):
    """Caller has not set up a company profile yet."""

    def __init__(self):
        super().__init__(
            message="Please set up your company profile first",
            code="CMP101",
            status_code=404,
        )


class CompanyProfileExistsError(CompanyError):
    def __init__(self):
        super().__init__(
            message="A company profile already exists for this user",
            code="CMP102",
            status_code=409,
        )


# ============================================================================
# ACCOUNT ERRORS (ACC200-299)
# ============================================================================

class AccountError(AccuBooksException):
    """Base class for chart of accounts errors."""
    pass


class AccountNotFoundError(AccountError):
    def __init__(self, account_id: int | None = None):
        message = "Account not found" if account_id is None else f"Account {account_id} not found"
        super().__init__(
            message=message,
            code="ACC201",
            status_code=404,
            details={"account_id": account_id} if account_id is not None else {},
        )


class DefaultAccountProtectedError(AccountError):
    """Seeded default accounts are read-only."""

    def __init__(self, account_name: str, action: str):
        super().__init__(
            message=f"Default account '{account_name}' cannot be {action}",
            code="ACC202",
            status_code=403,
            details={"account_name": account_name, "action": action},
        )


class AccountInUseError(AccountError):
    def __init__(self, account_name: str, expense_count: int):
        super().__init__(
            message=f"Cannot delete account '{account_name}' because it is being used by transactions",
            code="ACC203",
            status_code=409,
            details={"account_name": account_name, "expense_count": expense_count},
        )


class InvalidExpenseAccountError(AccountError):
    """Expenses may only be booked against Expense-type accounts."""

    def __init__(self, account_name: str, account_type: str):
        super().__init__(
            message=f"Account '{account_name}' is a {account_type} account, not an Expense account",
            code="ACC204",
            status_code=400,
            details={"account_name": account_name, "account_type": account_type},
        )


# ============================================================================
# INVOICE ERRORS (INV300-399)
# ============================================================================

class InvoiceError(AccuBooksException):
    """Base class for invoice-related errors."""
    pass


class InvoiceNotFoundError(InvoiceError):
    """Invoice does not exist or belongs to another company."""

    def __init__(self, invoice_id: int | None = None):
        message = "Invoice not found" if invoice_id is None else f"Invoice {invoice_id} not found"
        super().__init__(
            message=message,
            code="INV301",
            status_code=404,
            details={"invoice_id": invoice_id} if invoice_id is not None else {},
        )


class DuplicateInvoiceNumberError(InvoiceError):
    def __init__(self, invoice_number: str):
        super().__init__(
            message=f"Invoice number {invoice_number} is already in use",
            code="INV302",
            status_code=409,
            details={"invoice_number": invoice_number},
        )


class InvalidInvoiceStatusError(InvoiceError):
    """Invalid status transition or unsupported status value."""

    def __init__(self, current_status: str | None = None, new_status: str | None = None):
        if current_status and new_status:
            message = f"Cannot change invoice status from '{current_status}' to '{new_status}'"
        elif new_status:
            message = f"Invalid invoice status: '{new_status}'"
        else:
            message = "Invalid invoice status"

        super().__init__(
            message=message,
            code="INV303",
            status_code=400,
            details={"current_status": current_status, "new_status": new_status},
        )


# ============================================================================
# EXPENSE ERRORS (EXP400-499)
# ============================================================================

class ExpenseNotFoundError(AccuBooksException):
    def __init__(self, expense_id: int | None = None):
        message = "Expense not found" if expense_id is None else f"Expense {expense_id} not found"
        super().__init__(
            message=message,
            code="EXP401",
            status_code=404,
            details={"expense_id": expense_id} if expense_id is not None else {},
        )


# ============================================================================
# PRODUCT ERRORS (PRD500-599)
# ============================================================================

class ProductNotFoundError(AccuBooksException):
    def __init__(self, product_id: int | None = None):
        message = "Product/service not found" if product_id is None else f"Product/service {product_id} not found"
        super().__init__(
            message=message,
            code="PRD501",
            status_code=404,
            details={"product_id": product_id} if product_id is not None else {},
        )


# ============================================================================
# REPORT ERRORS (RPT600-699)
# ============================================================================

class InvalidReportPeriodError(AccuBooksException):
    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid report period: {reason}",
            code="RPT601",
            status_code=400,
            details={"reason": reason},
        )
