import argparse
import json
import logging
import math
import os
import sys
import textwrap
from dataclasses import asdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Literal, NoReturn

from rich.console import Console
from rich.table import Table

from hsa_calc.calculator import CalculatorInput, CalculatorResult, calculate
from hsa_calc.config import get_settings
from hsa_calc.errors import CalculatorError
from hsa_calc.tax.ca2025 import effective_federal_tax_rate
from hsa_calc.tax.dispatch import TAX_YEAR, get_province, list_provinces, list_supported_provinces
from hsa_calc.tax.prov.base import Province

ColorPreference = Literal["auto", "always", "never"]

_CENT = Decimal("0.01")

_EXAMPLES = textwrap.dedent(
    """
    Examples:
      hsa-calc 100000 3000 ON
      hsa-calc 85000 5000 BC --admin-fee 5 --plan-fee 450
      hsa-calc 120000 2000 AB --json
    """
)


def _resolve_color_preference(pref: ColorPreference) -> ColorPreference:
    if pref == "auto" and os.getenv("NO_COLOR"):
        return "never"
    return pref


def _get_console(pref: ColorPreference) -> Console:
    resolved = _resolve_color_preference(pref)
    if resolved == "never":
        return Console(no_color=True, highlight=False)
    return Console(force_terminal=True if resolved == "always" else None, highlight=False)


def _round_cents(value: float) -> float:
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def _format_currency(value: float) -> str:
    if not math.isfinite(value):
        return "n/a"
    rounded = _round_cents(value)
    if rounded < 0:
        return f"-${abs(rounded):,.2f}"
    return f"${rounded:,.2f}"


def _format_percent(value: float) -> str:
    return f"{value * 100:.2f}%"


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    print("Run 'hsa-calc --help' for usage.", file=sys.stderr)
    raise SystemExit(1)


def _parse_amount(raw: str, label: str, *, allow_zero: bool) -> float:
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value) or value < 0 or (value == 0 and not allow_zero):
        requirement = "a non-negative number" if allow_zero else "a positive number"
        _fail(f"{label} must be {requirement}")
    return value


def _print_provinces(console: Console) -> None:
    table = Table(title=f"Supported provinces ({TAX_YEAR})", expand=False)
    table.add_column("Code")
    table.add_column("Name")
    for province in list_provinces():
        table.add_row(province.code, province.name)
    console.print(table)


def _print_summary(
    payload: CalculatorInput,
    province: Province,
    result: CalculatorResult,
    console: Console,
) -> None:
    income = payload.annual_income
    expenses = payload.annual_medical_expenses

    rates = Table(title="Tax Rates", expand=False)
    rates.add_column("")
    rates.add_column("Marginal", justify="right")
    rates.add_column("Effective", justify="right")
    rates.add_row(
        "Federal",
        _format_percent(result.federal_tax_rate),
        _format_percent(effective_federal_tax_rate(income)),
    )
    rates.add_row(
        province.name,
        _format_percent(result.provincial_tax_rate),
        _format_percent(province.effective_rate(income)),
    )
    rates.add_row("Combined", _format_percent(result.marginal_tax_rate), "")

    comparison = Table(title="Comparison", expand=False)
    comparison.add_column("Metric")
    comparison.add_column("Value", justify="right")
    comparison.add_row("Without HSA (pre-tax income needed)", _format_currency(result.required_personal_income))
    comparison.add_row("With HSA (total business cost)", _format_currency(result.total_business_cost))
    comparison.add_row("  Expenses", _format_currency(expenses))
    comparison.add_row(
        f"  Admin fee ({payload.admin_fee_rate * 100:.0f}%)",
        _format_currency(result.admin_fee),
    )
    comparison.add_row("  Plan fee", f"{_format_currency(result.annual_plan_fee)}/year")
    comparison.add_section()
    comparison.add_row("SAVINGS", f"{_format_currency(result.savings)}/year")
    comparison.add_row("Break-even", f"{_format_currency(result.break_even)} in expenses")

    console.print()
    console.print("Canadian HSA Tax Savings Calculator")
    console.print("===================================")
    console.print(f"Province:          {province.name} ({province.code})")
    console.print(f"Annual income:     {_format_currency(income)}")
    console.print(f"Medical expenses:  {_format_currency(expenses)}")
    console.print()
    console.print(rates)
    console.print(comparison)


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="hsa-calc",
        description="Canadian HSA tax savings calculator.",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("income", nargs="?", help="Annual pre-tax income (e.g. 100000).")
    parser.add_argument("expenses", nargs="?", help="Annual medical expenses (e.g. 3000).")
    parser.add_argument(
        "province",
        nargs="?",
        help=f"Province code: {', '.join(list_supported_provinces())}.",
    )
    parser.add_argument(
        "--admin-fee",
        type=float,
        default=None,
        help=f"Admin fee rate as a percentage (default: {settings.admin_fee_rate * 100:g}).",
    )
    parser.add_argument(
        "--plan-fee",
        type=float,
        default=settings.annual_plan_fee,
        help=f"Annual plan fee in dollars (default: {settings.annual_plan_fee:g}).",
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON.")
    parser.add_argument("--list-provinces", action="store_true", help="List supported province codes.")
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output preference (default: auto).",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_const",
        const="never",
        help="Alias for --color never.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log calculation details.")
    return parser


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s - %(message)s")
    console = _get_console(args.color)

    if args.list_provinces:
        _print_provinces(console)
        return
    if args.income is None:
        parser.print_help()
        return
    if args.expenses is None or args.province is None:
        _fail("requires 3 arguments: <income> <expenses> <province>")

    if args.admin_fee is not None and not math.isfinite(args.admin_fee):
        _fail("admin fee must be a finite number")
    if not math.isfinite(args.plan_fee):
        _fail("plan fee must be a finite number")

    income = _parse_amount(args.income, "income", allow_zero=False)
    expenses = _parse_amount(args.expenses, "expenses", allow_zero=True)
    try:
        province = get_province(args.province)
    except CalculatorError:
        _fail(
            f"invalid province '{args.province}'. Must be one of: {', '.join(list_supported_provinces())}"
        )

    payload = CalculatorInput(
        annual_income=income,
        annual_medical_expenses=expenses,
        province=province.code,
        admin_fee_rate=settings.admin_fee_rate if args.admin_fee is None else args.admin_fee / 100,
        annual_plan_fee=args.plan_fee,
    )
    try:
        result = calculate(payload)
    except CalculatorError as exc:
        _fail(str(exc))

    if args.json:
        print(json.dumps(asdict(result), indent=2))
        return
    _print_summary(payload, province, result, console)


if __name__ == "__main__":
    main()
