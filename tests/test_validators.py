from decimal import Decimal

import pytest

from accubooks.utils.currency import format_money, quantize_money
from accubooks.utils.validators import normalize_gstin, validate_gstin


@pytest.mark.parametrize("gstin", ["27AAPFU0939F1ZV", "29ABCDE1234F1Z5", "07AAACB2894G1ZP"])
def test_valid_gstins(gstin):
    assert validate_gstin(gstin)


@pytest.mark.parametrize("gstin", ["", "27AAPFU0939F1Z", "27aapfu0939f1zv", "27AAPFU0939F1XV", "AA27PFU0939F1ZV"])
def test_invalid_gstins(gstin):
    assert not validate_gstin(gstin)


def test_normalize_gstin():
    assert normalize_gstin(None) is None
    assert normalize_gstin("   ") is None
    assert normalize_gstin(" 27aapfu0939f1zv ") == "27AAPFU0939F1ZV"
    with pytest.raises(ValueError):
        normalize_gstin("12345")


def test_money_rounds_half_up():
    assert quantize_money(Decimal("0.005")) == Decimal("0.01")
    assert quantize_money(Decimal("-0.005")) == Decimal("-0.01")
    assert format_money(Decimal("2.675")) == "2.68"
    assert format_money(Decimal("-4")) == "-4.00"
    assert format_money(Decimal("1E+2")) == "100.00"
    assert format_money(None) is None
