# src/solid_principles/single_responsibility.py
"""
Single Responsibility Principle (SRP).

A class should have only one reason to change. ``Invoice`` holds the data,
``InvoicePrinter`` knows how to present it; a change to the output format
never touches the invoice.
"""

import logging

logger = logging.getLogger(__name__)


class Invoice:
    """An invoice amount and nothing else."""

    def __init__(self, amount: float):
        self._amount = float(amount)

    @property
    def amount(self) -> float:
        return self._amount

    def get_amount(self) -> float:
        """Return the invoiced amount."""
        return self._amount

    def __repr__(self):
        return f"Invoice(amount={self._amount!r})"


class InvoicePrinter:
    """Renders invoices to the console."""

    def print_invoice(self, invoice: Invoice) -> None:
        """Print the invoice amount."""
        logger.debug(f"Printing {invoice!r}")
        print(f"Invoice amount: {invoice.get_amount()}")
