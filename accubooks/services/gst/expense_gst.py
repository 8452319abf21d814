"""Expense GST computer: GST paid on a purchase, read as input credit."""
from dataclasses import dataclass
from decimal import Decimal

from accubooks.core.exceptions import InvalidInputError
from accubooks.models.enums import SupplyType

from .gst_split import split_gst
from .rules import check_gst_rate, check_non_negative, to_decimal


@dataclass(frozen=True)
class ExpenseGST:
    amount_before_gst: Decimal
    gst_rate_percent: Decimal
    gst_paid_amount: Decimal
    cgst_input_credit: Decimal
    sgst_input_credit: Decimal
    igst_input_credit: Decimal
    total_expense_amount: Decimal


def compute_expense(
    amount_before_gst,
    rate_percent,
    supply_type: SupplyType | str = SupplyType.NOT_APPLICABLE,
) -> ExpenseGST:
    amount = check_non_negative(to_decimal(amount_before_gst, "amount_before_gst"), "amount_before_gst")
    rate = check_gst_rate(to_decimal(rate_percent, "gst_rate_applied_on_purchase"), "gst_rate_applied_on_purchase")
    try:
        resolved = SupplyType(supply_type)
    except ValueError as exc:
        raise InvalidInputError(
            "Unknown supply type", field="place_of_supply_type_for_purchase", value=supply_type
        ) from exc

    breakdown = split_gst(amount, rate, resolved)
    return ExpenseGST(
        amount_before_gst=amount,
        gst_rate_percent=rate,
        gst_paid_amount=breakdown.gst_total,
        cgst_input_credit=breakdown.cgst,
        sgst_input_credit=breakdown.sgst,
        igst_input_credit=breakdown.igst,
        total_expense_amount=amount + breakdown.gst_total,
    )
