from __future__ import annotations


class CalculatorError(ValueError):
    """Base class for inputs the calculator refuses to evaluate."""


class InvalidIncomeError(CalculatorError):
    pass


class InvalidExpenseError(CalculatorError):
    pass


class UnknownProvinceError(CalculatorError, KeyError):
    def __str__(self) -> str:
        # KeyError.__str__ repr-quotes the message
        return str(self.args[0]) if self.args else ""


class DegenerateRateError(CalculatorError):
    """Combined marginal rate of 100% or more; no after-tax income remains."""


__all__ = [
    "CalculatorError",
    "DegenerateRateError",
    "InvalidExpenseError",
    "InvalidIncomeError",
    "UnknownProvinceError",
]
