"""Unit tests for TextStatementRenderer."""

import pytest

from invoice_engine.adapters.report.text import TextStatementRenderer
from invoice_engine.core.invoice import Invoice


@pytest.fixture
def renderer() -> TextStatementRenderer:
    """Create a renderer with default formatting."""
    return TextStatementRenderer()


@pytest.fixture
def nested_invoice() -> Invoice:
    """Create a tree with a paid, an invoiced and an initial leaf."""
    invoice = Invoice("hosting", 100)
    invoice.pay("alice", 25)
    invoice.children[1].bill("acme", 30)
    return invoice


def test_render_single_leaf(renderer: TextStatementRenderer) -> None:
    """A single invoice renders one line plus totals."""
    output = renderer.render(Invoice("hosting", 100))

    assert "INVOICE STATEMENT" in output
    assert "hosting: owed 100.00 [INITIAL]" in output
    assert "Leaves: 1" in output
    assert "Outstanding: 100.00" in output


def test_render_nested_tree_indents_children(
    renderer: TextStatementRenderer, nested_invoice: Invoice
) -> None:
    """Children of split invoices are indented one level per split."""
    lines = renderer.render(nested_invoice).splitlines()

    assert "hosting: owed 100.00 [SPLIT]" in lines
    assert "  hosting: owed 25.00, paid 25.00 by alice [PAID]" in lines
    assert "  hosting: owed 75.00 [SPLIT]" in lines
    assert "    hosting: owed 30.00, billed to acme [INVOICED]" in lines
    assert "    hosting: owed 45.00 [INITIAL]" in lines


def test_render_lines_follow_walk_order(
    renderer: TextStatementRenderer, nested_invoice: Invoice
) -> None:
    """Node lines appear in pre-order."""
    lines = [line for line in renderer.render(nested_invoice).splitlines() if "owed" in line]
    amounts = [line.split("owed ")[1].split()[0].rstrip(",") for line in lines]
    assert amounts == ["100.00", "25.00", "75.00", "30.00", "45.00"]


def test_render_totals(renderer: TextStatementRenderer, nested_invoice: Invoice) -> None:
    """Totals are computed over the leaves."""
    output = renderer.render(nested_invoice)

    assert "Leaves: 3" in output
    assert "Total Owed: 100.00" in output
    assert "Total Paid: 25.00" in output
    assert "Outstanding: 75.00" in output


def test_render_with_custom_formatting(nested_invoice: Invoice) -> None:
    """Indent, precision and currency are configurable."""
    renderer = TextStatementRenderer(indent=4, precision=0, currency="$")
    lines = renderer.render(nested_invoice).splitlines()

    assert "hosting: owed $100 [SPLIT]" in lines
    assert "    hosting: owed $25, paid $25 by alice [PAID]" in lines
    assert "        hosting: owed $45 [INITIAL]" in lines


def test_render_is_repeatable(
    renderer: TextStatementRenderer, nested_invoice: Invoice
) -> None:
    """Rendering twice produces the same statement."""
    assert renderer.render(nested_invoice) == renderer.render(nested_invoice)


def test_report_prints_statement(
    renderer: TextStatementRenderer,
    nested_invoice: Invoice,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """report() writes the rendered statement to stdout."""
    renderer.report(nested_invoice)

    captured = capsys.readouterr()
    assert captured.out == renderer.render(nested_invoice) + "\n"
