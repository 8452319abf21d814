"""Invoice aggregator: per-item GST and invoice totals."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable

from accubooks.core.exceptions import InconsistentSupplyTypeError, InvalidInputError
from accubooks.models.enums import SupplyType

from .gst_split import ZERO, split_gst
from .rules import check_gst_rate, check_non_negative, to_decimal

SALES_SUPPLY_TYPES = (SupplyType.INTRA_STATE, SupplyType.INTER_STATE)


@dataclass(frozen=True)
class LineItemInput:
    quantity: Decimal
    rate: Decimal
    gst_rate_percent: Decimal


@dataclass(frozen=True)
class ComputedLineItem:
    quantity: Decimal
    rate: Decimal
    gst_rate_percent: Decimal
    item_total: Decimal
    gst_amount: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal


@dataclass(frozen=True)
class InvoiceTotals:
    items: tuple[ComputedLineItem, ...]
    sub_total: Decimal
    total_gst: Decimal
    grand_total: Decimal


def _sales_supply_type(supply_type: SupplyType | str) -> SupplyType:
    try:
        resolved = SupplyType(supply_type)
    except ValueError as exc:
        raise InvalidInputError("Unknown supply type", field="place_of_supply_type", value=supply_type) from exc
    if resolved not in SALES_SUPPLY_TYPES:
        raise InconsistentSupplyTypeError(resolved.value)
    return resolved


def _validated(item: Any, index: int) -> LineItemInput:
    quantity = to_decimal(item.quantity, f"items[{index}].quantity")
    if quantity <= 0:
        raise InvalidInputError("Quantity must be greater than zero", field=f"items[{index}].quantity", value=quantity)
    rate = check_non_negative(to_decimal(item.rate, f"items[{index}].rate"), f"items[{index}].rate")
    gst_rate = check_gst_rate(
        to_decimal(item.gst_rate_percent, f"items[{index}].gst_rate_percent"),
        f"items[{index}].gst_rate_percent",
    )
    return LineItemInput(quantity=quantity, rate=rate, gst_rate_percent=gst_rate)


def aggregate_invoice(items: Iterable[Any], supply_type: SupplyType | str) -> InvoiceTotals:
    """Compute every line item and the invoice totals.

    ``items`` are any objects exposing ``quantity``, ``rate`` and
    ``gst_rate_percent``. Everything is validated before anything is
    computed, so a bad item never yields a partial result.
    """
    resolved = _sales_supply_type(supply_type)
    validated = [_validated(item, index) for index, item in enumerate(items)]
    if not validated:
        raise InvalidInputError("An invoice needs at least one line item", field="items")

    computed = []
    sub_total = ZERO
    total_gst = ZERO
    for item in validated:
        item_total = item.quantity * item.rate
        breakdown = split_gst(item_total, item.gst_rate_percent, resolved)
        computed.append(
            ComputedLineItem(
                quantity=item.quantity,
                rate=item.rate,
                gst_rate_percent=item.gst_rate_percent,
                item_total=item_total,
                gst_amount=breakdown.gst_total,
                cgst=breakdown.cgst,
                sgst=breakdown.sgst,
                igst=breakdown.igst,
            )
        )
        sub_total += item_total
        total_gst += breakdown.gst_total

    return InvoiceTotals(
        items=tuple(computed),
        sub_total=sub_total,
        total_gst=total_gst,
        grand_total=sub_total + total_gst,
    )
