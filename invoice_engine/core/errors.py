"""Errors raised by the invoice state machine.

Both kinds are ordinary, expected outcomes of misuse and are raised
synchronously from the call that triggered them. The invoice is left
exactly as it was before the rejected call.
"""

from .models import InvoiceStatus


class InvoiceError(ValueError):
    """Base class for all invoice errors."""


class InvalidAmountError(InvoiceError):
    """An amount is non-positive, non-finite, or larger than the invoice can absorb."""


class InvalidOperationError(InvoiceError):
    """The invoice's current status forbids the requested operation."""

    def __init__(self, message: str, status: InvoiceStatus):
        super().__init__(message)
        self.status = status
