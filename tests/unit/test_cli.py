import json

import pytest

from hsa_calc import main
from hsa_calc.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in ("HSA_ADMIN_FEE_RATE", "HSA_PLAN_FEE", "HSA_DEFAULT_PROVINCE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_json_output(capsys):
    main.main(["100000", "3000", "ON", "--json"])
    body = json.loads(capsys.readouterr().out)
    assert body["marginal_tax_rate"] == pytest.approx(0.2965)
    assert body["admin_fee"] == pytest.approx(240)
    assert body["total_business_cost"] == pytest.approx(3_360)
    assert body["savings"] == pytest.approx(904.39, abs=0.01)
    assert body["annual_plan_fee"] == 120


def test_fee_options_are_percent_and_dollars(capsys):
    main.main(["85000", "5000", "bc", "--admin-fee", "5", "--plan-fee", "450", "--json"])
    body = json.loads(capsys.readouterr().out)
    assert body["admin_fee"] == pytest.approx(250)
    assert body["annual_plan_fee"] == 450
    assert body["provincial_tax_rate"] == 0.077


def test_fee_defaults_follow_settings(monkeypatch, capsys):
    monkeypatch.setenv("HSA_PLAN_FEE", "450")
    monkeypatch.setenv("HSA_ADMIN_FEE_RATE", "0.05")
    get_settings.cache_clear()
    main.main(["100000", "1000", "ON", "--json"])
    body = json.loads(capsys.readouterr().out)
    assert body["annual_plan_fee"] == 450
    assert body["admin_fee"] == pytest.approx(50)


def test_summary_output(capsys):
    main.main(["100000", "3000", "ON", "--no-color"])
    out = capsys.readouterr().out
    assert "Ontario (ON)" in out
    assert "29.65%" in out
    assert "$4,264.39" in out
    assert "$904.39/year" in out
    assert "$284.72 in expenses" in out


def test_negative_savings_formatting(capsys):
    main.main(["100000", "0", "ON", "--no-color"])
    out = capsys.readouterr().out
    assert "-$120.00/year" in out


@pytest.mark.parametrize(
    "argv, message",
    [
        (["0", "3000", "ON"], "income must be a positive number"),
        (["abc", "3000", "ON"], "income must be a positive number"),
        (["100000", "-5", "ON"], "expenses must be a non-negative number"),
        (["100000", "3000", "ZZ"], "invalid province 'ZZ'"),
        (["100000", "3000"], "requires 3 arguments"),
        (["100000", "3000", "ON", "--admin-fee", "nan", "--json"], "admin fee must be a finite number"),
        (["100000", "3000", "ON", "--plan-fee", "inf", "--json"], "plan fee must be a finite number"),
    ],
)
def test_input_errors_exit_with_status_1(argv, message, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main(argv)
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: ")
    assert message in err


def test_no_arguments_prints_help(capsys):
    main.main([])
    out = capsys.readouterr().out
    assert "usage: hsa-calc" in out
    assert "--admin-fee" in out


def test_list_provinces(capsys):
    main.main(["--list-provinces", "--no-color"])
    out = capsys.readouterr().out
    assert "Ontario" in out
    assert "NU" in out


@pytest.mark.parametrize(
    "value, expected",
    [(4264.392, "$4,264.39"), (0.005, "$0.01"), (-120, "-$120.00"), (float("inf"), "n/a")],
)
def test_format_currency(value, expected):
    assert main._format_currency(value) == expected
