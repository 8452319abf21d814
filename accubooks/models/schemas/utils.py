"""Common types and helpers for schemas."""
from decimal import Decimal
from typing import Annotated

from pydantic import BeforeValidator, Field, PlainSerializer

from accubooks.utils.currency import format_money
from accubooks.utils.validators import normalize_gstin

# Leaves the API as a string with exactly two fraction digits
Fixed2 = Annotated[Decimal, PlainSerializer(format_money, return_type=str)]
Money = Fixed2

# Entered amounts and rates keep two fraction digits, like their columns
AmountIn = Annotated[Decimal, Field(ge=0, max_digits=15, decimal_places=2)]
GSTRateIn = Annotated[Decimal, Field(ge=0, le=28, decimal_places=2)]
QuantityIn = Annotated[Decimal, Field(ge=Decimal("0.01"), max_digits=15, decimal_places=2)]

GSTIN = Annotated[str | None, BeforeValidator(normalize_gstin)]
