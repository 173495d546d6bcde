"""Personal vs. HSA cost comparison.

Paying a medical expense personally requires enough pre-tax income that,
after tax at the combined federal + provincial marginal rate, the expense is
left over. Paying it through a Health Spending Account costs the expense plus
the admin fee on it plus the flat annual plan fee. The difference between the
two is the saving.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Mapping

from hsa_calc.errors import (
    DegenerateRateError,
    InvalidExpenseError,
    InvalidIncomeError,
)
from hsa_calc.tax.ca2025 import FEDERAL_2025, BracketTable, marginal_rate
from hsa_calc.tax.dispatch import PROVINCES, get_province
from hsa_calc.tax.prov.base import Province

logger = logging.getLogger("hsa_calc.calculator")


@dataclass(frozen=True)
class CalculatorInput:
    annual_income: float
    annual_medical_expenses: float
    province: str
    admin_fee_rate: float
    annual_plan_fee: float


@dataclass(frozen=True)
class CalculatorResult:
    admin_fee: float
    total_business_cost: float
    required_personal_income: float
    savings: float
    marginal_tax_rate: float
    federal_tax_rate: float
    provincial_tax_rate: float
    annual_plan_fee: float
    break_even: float


def _validate(payload: CalculatorInput) -> None:
    income = payload.annual_income
    if not math.isfinite(income) or income <= 0:
        raise InvalidIncomeError("annual_income must be greater than 0")
    expenses = payload.annual_medical_expenses
    if not math.isfinite(expenses) or expenses < 0:
        raise InvalidExpenseError("annual_medical_expenses must be >= 0")


def break_even_expenses(annual_plan_fee: float, marginal_tax_rate: float) -> float:
    """Expense level at which the tax shield pays for the plan fee."""
    if marginal_tax_rate <= 0:
        return math.inf
    return annual_plan_fee * (1 - marginal_tax_rate) / marginal_tax_rate


def calculate(
    payload: CalculatorInput,
    *,
    federal_brackets: BracketTable = FEDERAL_2025,
    provinces: Mapping[str, Province] = PROVINCES,
) -> CalculatorResult:
    """Compare covering ``payload``'s expenses personally vs. through an HSA.

    Raises :class:`InvalidIncomeError`, :class:`InvalidExpenseError` or
    :class:`UnknownProvinceError` for bad input, checked in that order, and
    :class:`DegenerateRateError` when the combined marginal rate reaches 100%.
    """
    _validate(payload)
    province = get_province(payload.province, provinces)

    income = payload.annual_income
    expenses = payload.annual_medical_expenses

    federal_tax_rate = marginal_rate(income, federal_brackets)
    provincial_tax_rate = province.marginal_rate(income)
    marginal_tax_rate = federal_tax_rate + provincial_tax_rate
    if marginal_tax_rate >= 1:
        raise DegenerateRateError(
            f"Combined marginal rate {marginal_tax_rate:.4f} leaves no after-tax income"
        )

    admin_fee = expenses * payload.admin_fee_rate
    total_business_cost = expenses + admin_fee + payload.annual_plan_fee
    required_personal_income = expenses / (1 - marginal_tax_rate)
    savings = required_personal_income - total_business_cost

    logger.debug(
        "HSA comparison province=%s marginal=%.4f savings=%.2f",
        province.code,
        marginal_tax_rate,
        savings,
    )

    return CalculatorResult(
        admin_fee=admin_fee,
        total_business_cost=total_business_cost,
        required_personal_income=required_personal_income,
        savings=savings,
        marginal_tax_rate=marginal_tax_rate,
        federal_tax_rate=federal_tax_rate,
        provincial_tax_rate=provincial_tax_rate,
        annual_plan_fee=payload.annual_plan_fee,
        break_even=break_even_expenses(payload.annual_plan_fee, marginal_tax_rate),
    )


__all__ = [
    "CalculatorInput",
    "CalculatorResult",
    "break_even_expenses",
    "calculate",
]
