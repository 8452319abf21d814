"""Enumerations shared by the ORM models, schemas and the GST calculator."""
import enum


class SupplyType(str, enum.Enum):
    """Place of supply relative to the supplier's state."""
    INTRA_STATE = "Intra-State"
    INTER_STATE = "Inter-State"
    NOT_APPLICABLE = "Not Applicable"  # Unregistered purchases; expenses only


class InvoiceStatus(str, enum.Enum):
    DRAFT = "Draft"
    SENT = "Sent"
    PAID = "Paid"
    OVERDUE = "Overdue"

    @property
    def allowed_transitions(self) -> frozenset["InvoiceStatus"]:
        """Statuses this one may move to. Paid is terminal."""
        transitions = {
            InvoiceStatus.DRAFT: frozenset({InvoiceStatus.SENT}),
            InvoiceStatus.SENT: frozenset({InvoiceStatus.PAID, InvoiceStatus.OVERDUE}),
            InvoiceStatus.OVERDUE: frozenset({InvoiceStatus.PAID}),
            InvoiceStatus.PAID: frozenset(),
        }
        return transitions[self]

    @property
    def counts_as_sale(self) -> bool:
        """Drafts are excluded from every report."""
        return self != InvoiceStatus.DRAFT


class AccountType(str, enum.Enum):
    INCOME = "Income"
    EXPENSE = "Expense"
    ASSET = "Asset"
    LIABILITY = "Liability"


# Seeded for every new company; read-only afterwards
DEFAULT_ACCOUNTS: tuple[tuple[str, AccountType], ...] = (
    ("Sales", AccountType.INCOME),
    ("Purchases/Direct Expenses", AccountType.EXPENSE),
    ("Bank Account", AccountType.ASSET),
    ("Cash in Hand", AccountType.ASSET),
    ("GST Payable", AccountType.LIABILITY),
    ("GST Input Credit", AccountType.ASSET),
)
