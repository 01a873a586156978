"""Plain-text statement adapter.

Renders an invoice tree as an indented statement, one line per node,
followed by totals over the leaves.
"""

import logging

from invoice_engine.core.invoice import Invoice
from invoice_engine.core.models import InvoiceSnapshot, InvoiceStatus
from invoice_engine.core.visitor import InvoiceVisitor, summarize

logger = logging.getLogger(__name__)


class _StatementVisitor(InvoiceVisitor):
    """Collects one line per node, indenting the children of split invoices."""

    def __init__(self, renderer: "TextStatementRenderer"):
        self.renderer = renderer
        self.lines: list[str] = []
        self.depth = 0

    def pre_visit(self, invoice: Invoice, snapshot: InvoiceSnapshot) -> None:
        self.lines.append(self._indent() + self.renderer.format_split(snapshot))
        self.depth += 1

    def visit(self, invoice: Invoice, snapshot: InvoiceSnapshot) -> None:
        self.lines.append(self._indent() + self.renderer.format_leaf(snapshot))

    def post_visit(self, invoice: Invoice, snapshot: InvoiceSnapshot) -> None:
        self.depth -= 1

    def _indent(self) -> str:
        return " " * (self.renderer.indent * self.depth)


class TextStatementRenderer:
    """Renders invoice trees as human-readable text."""

    def __init__(self, indent: int = 2, precision: int = 2, currency: str = ""):
        """Initialize text statement renderer.

        Args:
            indent: Spaces of indentation per split level.
            precision: Decimal places shown for amounts.
            currency: Prefix printed before every amount.
        """
        self.indent = indent
        self.precision = precision
        self.currency = currency

    def render(self, invoice: Invoice) -> str:
        """Render the whole tree rooted at invoice."""
        visitor = _StatementVisitor(self)
        invoice.accept(visitor)
        return "\n".join(
            [self._format_header(), *visitor.lines, self._format_totals(invoice)]
        )

    def report(self, invoice: Invoice) -> None:
        """Print the statement for invoice to stdout."""
        logger.debug(f"Rendering statement for {invoice!r}")
        print(self.render(invoice))

    def format_amount(self, amount: float) -> str:
        return f"{self.currency}{amount:.{self.precision}f}"

    def format_split(self, snapshot: InvoiceSnapshot) -> str:
        """Format the line for a split invoice."""
        return (
            f"{snapshot.service}: owed {self.format_amount(snapshot.amount_owed)} "
            f"[{snapshot.status.value.upper()}]"
        )

    def format_leaf(self, snapshot: InvoiceSnapshot) -> str:
        """Format the line for a leaf invoice."""
        parts = [f"{snapshot.service}: owed {self.format_amount(snapshot.amount_owed)}"]
        if snapshot.invoice_party is not None:
            parts.append(f"billed to {snapshot.invoice_party}")
        if snapshot.status == InvoiceStatus.PAID:
            parts.append(
                f"paid {self.format_amount(snapshot.amount_paid)} by {snapshot.payer}"
            )
        return ", ".join(parts) + f" [{snapshot.status.value.upper()}]"

    @staticmethod
    def _format_header() -> str:
        return "\n".join(["=" * 80, "INVOICE STATEMENT", "=" * 80])

    def _format_totals(self, invoice: Invoice) -> str:
        summary = summarize(invoice)
        lines = [
            "-" * 80,
            f"Leaves: {summary.leaf_count}",
            f"Total Owed: {self.format_amount(summary.total_owed)}",
            f"Total Paid: {self.format_amount(summary.total_paid)}",
            f"Outstanding: {self.format_amount(summary.outstanding)}",
            "=" * 80,
        ]
        return "\n".join(lines)
