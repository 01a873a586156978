"""Visitor port for walking an invoice tree.

An invoice may be a single leaf or a composite that has split into
children. The walk is pre-order:

- a leaf fires ``visit`` once;
- a split invoice fires ``pre_visit`` on itself, walks each child in
  order, then fires ``post_visit`` on itself.

``visit`` never fires on a split invoice. Visitors keep whatever state
they need themselves; the walk never inspects them.
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import TYPE_CHECKING

from .models import InvoiceSnapshot, InvoiceStatus, InvoiceSummary

if TYPE_CHECKING:
    from .invoice import Invoice


class InvoiceVisitor(ABC):
    """Port for observing the shape of an invoice tree.

    Implementations receive the node itself and a snapshot of its
    observable fields for each callback.
    """

    @abstractmethod
    def pre_visit(self, invoice: "Invoice", snapshot: InvoiceSnapshot) -> None:
        """Called on a split invoice before any of its children."""

    @abstractmethod
    def visit(self, invoice: "Invoice", snapshot: InvoiceSnapshot) -> None:
        """Called once on every leaf invoice."""

    @abstractmethod
    def post_visit(self, invoice: "Invoice", snapshot: InvoiceSnapshot) -> None:
        """Called on a split invoice after all of its children."""


class _SummaryVisitor(InvoiceVisitor):
    """Accumulates leaf totals for summarize()."""

    def __init__(self) -> None:
        self.leaf_count = 0
        self.split_count = 0
        self.total_owed = 0.0
        self.total_paid = 0.0
        self.by_status: Counter[str] = Counter()

    def pre_visit(self, invoice: "Invoice", snapshot: InvoiceSnapshot) -> None:
        self.split_count += 1

    def visit(self, invoice: "Invoice", snapshot: InvoiceSnapshot) -> None:
        self.leaf_count += 1
        self.total_owed += snapshot.amount_owed
        self.total_paid += snapshot.amount_paid
        self.by_status[snapshot.status.value] += 1

    def post_visit(self, invoice: "Invoice", snapshot: InvoiceSnapshot) -> None:
        pass


def summarize(invoice: "Invoice") -> InvoiceSummary:
    """Aggregate leaf counts and amounts over an invoice tree.

    Args:
        invoice: Root of the tree to summarize.

    Returns:
        InvoiceSummary with one entry in by_status for every leaf status
        present in the tree.
    """
    visitor = _SummaryVisitor()
    invoice.accept(visitor)
    return InvoiceSummary(
        leaf_count=visitor.leaf_count,
        split_count=visitor.split_count,
        total_owed=visitor.total_owed,
        total_paid=visitor.total_paid,
        by_status={
            status.value: visitor.by_status[status.value]
            for status in InvoiceStatus
            if visitor.by_status[status.value]
        },
    )
