from __future__ import annotations

from typing import Mapping

from hsa_calc.calculator import CalculatorInput
from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.dispatch import build_registry
from hsa_calc.tax.prov.base import Province

SAMPLE_FEDERAL = (
    Bracket(57_375, 0.15),
    Bracket(114_750, 0.205),
    Bracket(None, 0.33),
)

SAMPLE_REGIONAL = (
    Bracket(52_886, 0.0505),
    Bracket(105_775, 0.0915),
    Bracket(None, 0.1316),
)


def make_input(
    income: float = 100_000.0,
    expenses: float = 3_000.0,
    province: str = "ON",
    admin_fee_rate: float = 0.08,
    annual_plan_fee: float = 120.0,
) -> CalculatorInput:
    return CalculatorInput(
        annual_income=income,
        annual_medical_expenses=expenses,
        province=province,
        admin_fee_rate=admin_fee_rate,
        annual_plan_fee=annual_plan_fee,
    )


def make_registry(
    brackets: tuple[Bracket, ...] = SAMPLE_REGIONAL,
    code: str = "XX",
    name: str = "Synthetic",
) -> Mapping[str, Province]:
    return build_registry((Province(code=code, name=name, brackets=brackets),))
