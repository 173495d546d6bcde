import dataclasses
import math

import pytest

from hsa_calc.calculator import break_even_expenses, calculate
from hsa_calc.errors import (
    CalculatorError,
    DegenerateRateError,
    InvalidExpenseError,
    InvalidIncomeError,
    UnknownProvinceError,
)
from hsa_calc.tax.ca2025 import Bracket
from tests.fixtures.inputs import SAMPLE_FEDERAL, make_input, make_registry


def test_synthetic_tables_scenario():
    result = calculate(
        make_input(province="XX"),
        federal_brackets=SAMPLE_FEDERAL,
        provinces=make_registry(),
    )
    assert result.federal_tax_rate == 0.205
    assert result.provincial_tax_rate == 0.0915
    assert result.marginal_tax_rate == pytest.approx(0.2965)
    assert result.admin_fee == pytest.approx(240)
    assert result.total_business_cost == pytest.approx(3_360)
    assert result.required_personal_income == pytest.approx(4_264.39, abs=0.01)
    assert result.savings == pytest.approx(904.39, abs=0.01)


def test_ontario_individual():
    result = calculate(make_input())
    assert result.marginal_tax_rate == pytest.approx(0.2965)
    assert result.admin_fee == 240
    assert result.total_business_cost == 3_360
    assert result.required_personal_income == pytest.approx(4_264.39, abs=0.01)
    assert result.savings > 0
    assert result.annual_plan_fee == 120


def test_alberta_business():
    result = calculate(
        make_input(
            income=120_000,
            expenses=5_000,
            province="AB",
            admin_fee_rate=0.05,
            annual_plan_fee=450,
        )
    )
    # federal 0.26 (third bracket) + AB 0.10
    assert result.marginal_tax_rate == pytest.approx(0.36)
    assert result.admin_fee == 250
    assert result.total_business_cost == 5_700
    assert result.required_personal_income == pytest.approx(7_812.5)
    assert result.savings == pytest.approx(2_112.5)


def test_zero_expenses_cost_only_the_plan_fee():
    result = calculate(make_input(expenses=0))
    assert result.admin_fee == 0
    assert result.total_business_cost == 120
    assert result.required_personal_income == 0
    assert result.savings == -120


def test_province_code_is_case_insensitive():
    assert calculate(make_input(province="on")) == calculate(make_input(province="ON"))


def test_break_even():
    result = calculate(make_input())
    rate = result.marginal_tax_rate
    assert result.break_even == pytest.approx(120 * (1 - rate) / rate)


def test_break_even_is_independent_of_expenses():
    low = calculate(make_input(expenses=10))
    high = calculate(make_input(expenses=90_000))
    assert low.break_even == high.break_even


def test_savings_vanish_at_break_even_without_admin_fee():
    first = calculate(make_input(admin_fee_rate=0))
    at_break_even = calculate(make_input(expenses=first.break_even, admin_fee_rate=0))
    assert at_break_even.savings == pytest.approx(0, abs=1e-9)


@pytest.mark.parametrize("income", [0, -1, -100_000, math.nan, math.inf])
def test_invalid_income(income):
    with pytest.raises(InvalidIncomeError, match="annual_income must be greater than 0"):
        calculate(make_input(income=income))


@pytest.mark.parametrize(
    "overrides",
    [{"expenses": -1}, {"province": "ZZ"}, {"expenses": -1, "province": "ZZ"}],
)
def test_invalid_income_reported_before_other_problems(overrides):
    with pytest.raises(InvalidIncomeError):
        calculate(make_input(income=0, **overrides))


@pytest.mark.parametrize("expenses", [-0.01, -3_000, math.nan])
def test_invalid_expenses(expenses):
    with pytest.raises(InvalidExpenseError, match="annual_medical_expenses must be >= 0"):
        calculate(make_input(expenses=expenses))


def test_unknown_province():
    with pytest.raises(UnknownProvinceError, match="ZZ") as excinfo:
        calculate(make_input(province="ZZ"))
    assert isinstance(excinfo.value, KeyError)
    assert isinstance(excinfo.value, CalculatorError)
    assert str(excinfo.value) == "Invalid province code: ZZ"


def test_injected_registry_replaces_builtin_provinces():
    with pytest.raises(UnknownProvinceError):
        calculate(make_input(province="ON"), provinces=make_registry())


@pytest.mark.parametrize("regional_rate", [0.5, 0.9])
def test_combined_rate_of_100_percent_or_more_is_rejected(regional_rate):
    federal = (Bracket(None, 0.5),)
    registry = make_registry((Bracket(None, regional_rate),))
    with pytest.raises(DegenerateRateError):
        calculate(make_input(province="XX"), federal_brackets=federal, provinces=registry)


def test_zero_combined_rate():
    federal = (Bracket(None, 0.0),)
    registry = make_registry((Bracket(None, 0.0),))
    result = calculate(make_input(province="XX"), federal_brackets=federal, provinces=registry)
    assert result.required_personal_income == 3_000
    assert result.break_even == math.inf
    assert break_even_expenses(120, 0.0) == math.inf


def test_repeated_calls_are_identical():
    payload = make_input(income=87_654.32, expenses=2_345.67, province="NS")
    assert calculate(payload) == calculate(payload)


def test_result_is_frozen():
    result = calculate(make_input())
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.savings = 0  # type: ignore[misc]
