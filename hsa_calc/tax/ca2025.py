from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Bracket:
    up_to: float | None  # inclusive upper bound; None means unbounded
    rate: float


BracketTable = Sequence[Bracket]

# Federal brackets (2025)
# Source: https://www.canada.ca/en/revenue-agency/services/tax/individuals/frequently-asked-questions-individuals/canadian-income-tax-rates-individuals-current-previous-years.html
FEDERAL_2025 = (
    Bracket(57_375, 0.15),
    Bracket(114_750, 0.205),
    Bracket(177_882, 0.26),
    Bracket(253_414, 0.29),
    Bracket(None, 0.33),
)


def tax_from_brackets(taxable: float, brackets: BracketTable) -> float:
    """Total tax owed on ``taxable`` income, unrounded."""
    tax, prev = 0.0, 0.0
    for b in brackets:
        cap = taxable if b.up_to is None else min(taxable, b.up_to)
        amt = cap - prev
        if amt > 0:
            tax += amt * b.rate
        if b.up_to is None or taxable <= b.up_to:
            break
        prev = b.up_to
    return tax


def effective_rate(income: float, brackets: BracketTable) -> float:
    """Blended rate: total tax divided by total income."""
    if income <= 0:
        return 0.0
    return tax_from_brackets(income, brackets) / income


def marginal_rate(income: float, brackets: BracketTable) -> float:
    """Rate applied to the next dollar earned.

    Thresholds are inclusive, so income sitting exactly on a threshold stays
    in the lower bracket. A table without an unbounded final entry falls back
    to its last rate.
    """
    for b in brackets:
        if b.up_to is None or income <= b.up_to:
            return b.rate
    return brackets[-1].rate


def effective_federal_tax_rate(income: float) -> float:
    return effective_rate(income, FEDERAL_2025)


def marginal_federal_tax_rate(income: float) -> float:
    return marginal_rate(income, FEDERAL_2025)


__all__ = [
    "Bracket",
    "BracketTable",
    "FEDERAL_2025",
    "effective_federal_tax_rate",
    "effective_rate",
    "marginal_federal_tax_rate",
    "marginal_rate",
    "tax_from_brackets",
]
