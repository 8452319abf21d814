"""Line-item GST splitter.

Intra-State supply is taxed in two equal halves (CGST + SGST); Inter-State
supply is taxed in full as IGST. Purchases from unregistered vendors carry no
creditable GST at all.
"""
from dataclasses import dataclass
from decimal import Decimal

from accubooks.models.enums import SupplyType

ZERO = Decimal("0")
HUNDRED = Decimal("100")
TWO = Decimal("2")


@dataclass(frozen=True)
class GSTBreakdown:
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    gst_total: Decimal


def split_gst(base_amount: Decimal, rate_percent: Decimal, supply_type: SupplyType | str) -> GSTBreakdown:
    """Split the GST on ``base_amount`` into its heads.

    Inputs are trusted; callers validate ranges before calling. The heads
    always sum to ``gst_total`` exactly.
    """
    supply_type = SupplyType(supply_type)
    if supply_type == SupplyType.NOT_APPLICABLE:
        return GSTBreakdown(cgst=ZERO, sgst=ZERO, igst=ZERO, gst_total=ZERO)

    gst_total = base_amount * rate_percent / HUNDRED
    if supply_type == SupplyType.INTRA_STATE:
        half = gst_total / TWO
        return GSTBreakdown(cgst=half, sgst=half, igst=ZERO, gst_total=gst_total)
    return GSTBreakdown(cgst=ZERO, sgst=ZERO, igst=gst_total, gst_total=gst_total)
