"""Canadian HSA tax savings calculator.

Compares the pre-tax income needed to cover medical expenses personally
against the total cost of running them through a Health Spending Account,
using 2025 federal and provincial marginal tax rates.
"""
from __future__ import annotations

from hsa_calc.calculator import CalculatorInput, CalculatorResult, calculate
from hsa_calc.errors import (
    CalculatorError,
    DegenerateRateError,
    InvalidExpenseError,
    InvalidIncomeError,
    UnknownProvinceError,
)
from hsa_calc.tax.ca2025 import (
    FEDERAL_2025,
    Bracket,
    effective_federal_tax_rate,
    effective_rate,
    marginal_federal_tax_rate,
    marginal_rate,
)
from hsa_calc.tax.dispatch import (
    PROVINCES,
    effective_provincial_tax_rate,
    get_province,
    list_provinces,
    list_supported_provinces,
    marginal_provincial_tax_rate,
)
from hsa_calc.tax.prov.base import Province

__all__ = [
    "Bracket",
    "CalculatorError",
    "CalculatorInput",
    "CalculatorResult",
    "DegenerateRateError",
    "FEDERAL_2025",
    "InvalidExpenseError",
    "InvalidIncomeError",
    "PROVINCES",
    "Province",
    "UnknownProvinceError",
    "calculate",
    "effective_federal_tax_rate",
    "effective_provincial_tax_rate",
    "effective_rate",
    "get_province",
    "list_provinces",
    "list_supported_provinces",
    "marginal_federal_tax_rate",
    "marginal_provincial_tax_rate",
    "marginal_rate",
]
