"""Flat-rate tax calculation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaxResult:
    """Tax withheld from a taxable amount."""

    taxable: float
    tax: float
    net: float


class TaxCalculator:
    """Applies a single flat percentage to the total before tax.

    The percentage is not range-checked; callers expose 0-50 in practice.
    """

    def __init__(self, tax_percentage: float):
        self.tax_percentage = tax_percentage

    def flat_tax(self, taxable: float) -> float:
        return taxable * self.tax_percentage / 100

    def apply(self, taxable: float) -> TaxResult:
        tax = self.flat_tax(taxable)
        return TaxResult(taxable=taxable, tax=tax, net=taxable - tax)
