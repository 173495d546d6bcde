from __future__ import annotations

from dataclasses import dataclass

from hsa_calc.tax.ca2025 import Bracket, effective_rate, marginal_rate


@dataclass(frozen=True)
class Province:
    code: str
    name: str
    brackets: tuple[Bracket, ...]

    def marginal_rate(self, income: float) -> float:
        return marginal_rate(income, self.brackets)

    def effective_rate(self, income: float) -> float:
        return effective_rate(income, self.brackets)
