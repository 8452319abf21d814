"""Shared invoice service components."""
from .creation import InvoiceCreationMixin
from .query import InvoiceQueryMixin
from .status import InvoiceStatusMixin

__all__ = [
    "InvoiceCreationMixin",
    "InvoiceQueryMixin",
    "InvoiceStatusMixin",
]
