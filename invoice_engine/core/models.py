"""Value objects for the invoice engine.

All models in this module use only Python standard library types,
keeping the core domain free of external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any


class InvoiceStatus(Enum):
    """Lifecycle states for an invoice.

    State transitions:
    - INITIAL → PAID (full payment)
    - INITIAL → INVOICED (full billing)
    - INVOICED → PAID (full payment)
    - INITIAL/INVOICED → SPLIT (partial payment, partial billing from INITIAL)

    PAID and SPLIT accept no further mutation.
    """

    INITIAL = "initial"
    INVOICED = "invoiced"
    PAID = "paid"
    SPLIT = "split"


@dataclass(frozen=True)
class InvoiceSnapshot:
    """Observable fields of a single invoice node at one point in time.

    Handed to visitor callbacks. The service, payer and invoice party are
    opaque tokens supplied by the caller and echoed back untouched.
    """

    service: Any
    amount_owed: float
    amount_paid: float
    payer: Any | None
    invoice_party: Any | None
    status: InvoiceStatus


@dataclass(frozen=True)
class InvoiceSummary:
    """Aggregate figures over the leaves of an invoice tree."""

    leaf_count: int
    split_count: int
    total_owed: float
    total_paid: float
    by_status: Mapping[str, int]  # status value -> leaf count (immutable at runtime)

    def __post_init__(self) -> None:
        """Convert mutable dict to an immutable proxy."""
        object.__setattr__(self, "by_status", MappingProxyType(dict(self.by_status)))

    @property
    def outstanding(self) -> float:
        """Amount owed across all leaves that has not been paid."""
        return self.total_owed - self.total_paid
