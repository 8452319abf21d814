from __future__ import annotations

import secrets
import time


def generate_id(prefix: str) -> str:
    """Human-readable unique reference, e.g. ``INV-1718000000000-A1B2C3``."""
    ts = int(time.time() * 1000)
    rand = secrets.token_hex(3)
    return f"{prefix}-{ts}-{rand}".upper()
