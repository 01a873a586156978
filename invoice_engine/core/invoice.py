"""Invoice entity and its payment/billing state machine.

An invoice tracks a single obligation. Paying or billing the whole
amount moves it to a terminal or invoiced state; paying or billing only
part of it splits the invoice into two child invoices whose amounts sum
to the original. Children are ordinary invoices and may split again, so
the tree grows one level per partial operation.

State is a tagged variant held in a single slot on the invoice. A split
replaces that slot with ``Split(children)``, so every holder of a
reference to the invoice observes the split on its next access.
"""

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TypeAlias, assert_never

from .errors import InvalidAmountError, InvalidOperationError
from .models import InvoiceSnapshot, InvoiceStatus
from .visitor import InvoiceVisitor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Initial:
    """Neither paid nor billed."""


@dataclass(frozen=True)
class Invoiced:
    """Billed in full to an invoice party; accepts exactly one payment."""


@dataclass(frozen=True)
class Paid:
    """Paid in full. Terminal."""


@dataclass(frozen=True)
class Split:
    """Replaced by two child invoices. Terminal for mutation."""

    children: tuple["Invoice", "Invoice"]


InvoiceState: TypeAlias = Initial | Invoiced | Paid | Split

_INITIAL = Initial()
_INVOICED = Invoiced()
_PAID = Paid()


def _require_positive(amount: float, what: str) -> None:
    if not math.isfinite(amount) or amount <= 0.0:
        raise InvalidAmountError(f"{what} must be greater than zero, got {amount}")


class Invoice:
    """A financial obligation that can be paid or billed in full or in part.

    Args:
        service: Opaque token for what is owed.
        amount_owed: Positive amount owed; fixed for the life of the invoice.
        invoice_party: If given, the invoice starts already billed to this
            party (INVOICED) instead of INITIAL.

    Raises:
        InvalidAmountError: If amount_owed is not a positive finite number.
    """

    def __init__(
        self,
        service: Any,
        amount_owed: float,
        invoice_party: Any | None = None,
    ):
        _require_positive(amount_owed, "Amount owed")
        self._service = service
        self._amount_owed = amount_owed
        self._amount_paid = 0.0
        self._payer: Any | None = None
        self._invoice_party = invoice_party
        self._state: InvoiceState = _INITIAL if invoice_party is None else _INVOICED

    @property
    def service(self) -> Any:
        return self._service

    @property
    def amount_owed(self) -> float:
        return self._amount_owed

    @property
    def amount_paid(self) -> float:
        return self._amount_paid

    @property
    def payer(self) -> Any | None:
        return self._payer

    @property
    def invoice_party(self) -> Any | None:
        return self._invoice_party

    @property
    def status(self) -> InvoiceStatus:
        """Current lifecycle status."""
        state = self._state
        match state:
            case Initial():
                return InvoiceStatus.INITIAL
            case Invoiced():
                return InvoiceStatus.INVOICED
            case Paid():
                return InvoiceStatus.PAID
            case Split():
                return InvoiceStatus.SPLIT
            case _:
                assert_never(state)

    @property
    def children(self) -> tuple["Invoice", ...]:
        """The two child invoices of a split invoice; empty for a leaf."""
        state = self._state
        if isinstance(state, Split):
            return state.children
        return ()

    @property
    def is_leaf(self) -> bool:
        return not isinstance(self._state, Split)

    def pay(self, payer: Any, amount: float) -> None:
        """Record a payment against this invoice.

        Paying the full amount owed moves the invoice to PAID. Paying less
        splits it into a paid child for ``amount`` and an unpaid child for
        the remainder.

        Args:
            payer: Opaque token identifying who paid.
            amount: Amount paid; must be positive and not exceed amount_owed.

        Raises:
            InvalidAmountError: If amount is non-positive or exceeds amount_owed.
            InvalidOperationError: If the invoice is PAID or SPLIT.
        """
        _require_positive(amount, "Amount paid")
        state = self._state
        match state:
            case Initial() | Invoiced():
                self._check_within_owed(amount, "Amount paid")
                if amount == self._amount_owed:
                    new_state: InvoiceState = _PAID
                    logger.debug(f"Invoice for {self._service!r} paid in full: {amount}")
                else:
                    new_state = self._split_on_payment(payer, amount)
                self._amount_paid = amount
                self._payer = payer
                self._state = new_state
            case Paid():
                raise InvalidOperationError(
                    "Invoice has already been paid", InvoiceStatus.PAID
                )
            case Split():
                raise InvalidOperationError(
                    "Invoice has already been split", InvoiceStatus.SPLIT
                )
            case _:
                assert_never(state)

    def bill(self, invoice_party: Any, amount: float) -> None:
        """Bill this invoice to an invoice party.

        Billing the full amount owed moves the invoice to INVOICED. Billing
        less splits it into a child already billed to ``invoice_party`` for
        ``amount`` and an unbilled child for the remainder.

        Args:
            invoice_party: Opaque token identifying who is billed.
            amount: Amount billed; must be positive and not exceed amount_owed.

        Raises:
            InvalidAmountError: If amount is non-positive or exceeds amount_owed.
            InvalidOperationError: If the invoice is INVOICED, PAID or SPLIT.
        """
        _require_positive(amount, "Amount billed")
        state = self._state
        match state:
            case Initial():
                self._check_within_owed(amount, "Amount billed")
                if amount == self._amount_owed:
                    new_state: InvoiceState = _INVOICED
                    logger.debug(f"Invoice for {self._service!r} billed in full: {amount}")
                else:
                    new_state = self._split_on_invoice(invoice_party, amount)
                self._invoice_party = invoice_party
                self._state = new_state
            case Invoiced():
                raise InvalidOperationError(
                    "Invoice has already been invoiced", InvoiceStatus.INVOICED
                )
            case Paid():
                raise InvalidOperationError(
                    "Invoice has already been paid", InvoiceStatus.PAID
                )
            case Split():
                raise InvalidOperationError(
                    "Invoice has already been split", InvoiceStatus.SPLIT
                )
            case _:
                assert_never(state)

    def snapshot(self) -> InvoiceSnapshot:
        """Capture the observable fields of this node."""
        return InvoiceSnapshot(
            service=self._service,
            amount_owed=self._amount_owed,
            amount_paid=self._amount_paid,
            payer=self._payer,
            invoice_party=self._invoice_party,
            status=self.status,
        )

    def __iter__(self) -> Iterator["Invoice"]:
        """Yield the leaf invoices of this tree, left to right.

        A leaf yields only itself. Every call starts a fresh walk.
        """
        stack: list[Invoice] = [self]
        while stack:
            node = stack.pop()
            state = node._state
            match state:
                case Split(children=children):
                    stack.extend(reversed(children))
                case Initial() | Invoiced() | Paid():
                    yield node
                case _:
                    assert_never(state)

    def leaves(self) -> list["Invoice"]:
        """Return the leaf invoices of this tree, left to right."""
        return list(self)

    def accept(self, visitor: InvoiceVisitor) -> None:
        """Walk this tree in pre-order, reporting each node to visitor.

        Leaves fire ``visit``. Split invoices fire ``pre_visit`` before
        their children and ``post_visit`` after them.
        """
        # (node, leaving) pairs; leaving marks the post_visit of a split
        stack: list[tuple[Invoice, bool]] = [(self, False)]
        while stack:
            node, leaving = stack.pop()
            state = node._state
            match state:
                case Split(children=children):
                    if leaving:
                        visitor.post_visit(node, node.snapshot())
                        continue
                    visitor.pre_visit(node, node.snapshot())
                    stack.append((node, True))
                    stack.extend((child, False) for child in reversed(children))
                case Initial() | Invoiced() | Paid():
                    visitor.visit(node, node.snapshot())
                case _:
                    assert_never(state)

    def _check_within_owed(self, amount: float, what: str) -> None:
        if amount > self._amount_owed:
            raise InvalidAmountError(
                f"{what} cannot be greater than amount owed "
                f"({amount} > {self._amount_owed})"
            )

    def _split_on_payment(self, payer: Any, amount: float) -> Split:
        paid = Invoice(self._service, amount)
        paid.pay(payer, amount)
        remainder = Invoice(self._service, self._amount_owed - amount)
        logger.debug(
            f"Invoice for {self._service!r} split on payment: "
            f"{amount} paid, {remainder.amount_owed} remaining"
        )
        return Split(children=(paid, remainder))

    def _split_on_invoice(self, invoice_party: Any, amount: float) -> Split:
        billed = Invoice(self._service, amount, invoice_party)
        remainder = Invoice(self._service, self._amount_owed - amount)
        logger.debug(
            f"Invoice for {self._service!r} split on billing: "
            f"{amount} invoiced, {remainder.amount_owed} remaining"
        )
        return Split(children=(billed, remainder))

    def __repr__(self) -> str:
        return (
            f"Invoice(service={self._service!r}, amount_owed={self._amount_owed}, "
            f"amount_paid={self._amount_paid}, status={self.status.value})"
        )
