from __future__ import annotations

import re

# State code, PAN, entity number, then the fixed 'Z' and a check character
GSTIN_PATTERN = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z]{1}[1-9A-Z]{1}Z[0-9A-Z]{1}$")


def validate_gstin(gstin: str) -> bool:
    return bool(GSTIN_PATTERN.match(gstin))


def normalize_gstin(value: str | None) -> str | None:
    """Blank GSTINs become None; others are upper-cased and must match the format."""
    if value is None:
        return None
    value = value.strip().upper()
    if not value:
        return None
    if not validate_gstin(value):
        raise ValueError("Invalid GSTIN format")
    return value
