"""Core domain logic for the invoice engine.

This package contains zero external dependencies and represents
the pure business logic of the application. Rendering and other
integrations are handled by the adapters package.
"""

from .errors import InvalidAmountError, InvalidOperationError, InvoiceError
from .invoice import Invoice
from .models import InvoiceSnapshot, InvoiceStatus, InvoiceSummary
from .visitor import InvoiceVisitor, summarize

__all__ = [
    "InvalidAmountError",
    "InvalidOperationError",
    "Invoice",
    "InvoiceError",
    "InvoiceSnapshot",
    "InvoiceStatus",
    "InvoiceSummary",
    "InvoiceVisitor",
    "summarize",
]
