"""Fake InvoiceVisitor implementation for testing."""

from invoice_engine.core.invoice import Invoice
from invoice_engine.core.models import InvoiceSnapshot
from invoice_engine.core.visitor import InvoiceVisitor


class RecordingVisitor(InvoiceVisitor):
    """Visitor that records every callback for test assertions.

    Each entry is a (callback name, invoice, snapshot) triple in the
    order the callbacks fired.
    """

    def __init__(self) -> None:
        """Initialize with empty call history."""
        self.calls: list[tuple[str, Invoice, InvoiceSnapshot]] = []

    def pre_visit(self, invoice: Invoice, snapshot: InvoiceSnapshot) -> None:
        self.calls.append(("pre_visit", invoice, snapshot))

    def visit(self, invoice: Invoice, snapshot: InvoiceSnapshot) -> None:
        self.calls.append(("visit", invoice, snapshot))

    def post_visit(self, invoice: Invoice, snapshot: InvoiceSnapshot) -> None:
        self.calls.append(("post_visit", invoice, snapshot))

    def events(self) -> list[tuple[str, float]]:
        """Get (callback name, amount owed) pairs in call order."""
        return [(name, snapshot.amount_owed) for name, _, snapshot in self.calls]

    def invoices_for(self, name: str) -> list[Invoice]:
        """Get the invoices passed to one callback, in call order."""
        return [invoice for call, invoice, _ in self.calls if call == name]

    def reset(self) -> None:
        """Clear the recorded calls."""
        self.calls.clear()
