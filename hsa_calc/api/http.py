import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from hsa_calc.calculator import CalculatorInput, calculate
from hsa_calc.config import get_settings
from hsa_calc.errors import CalculatorError
from hsa_calc.lifespan import build_application_lifespan
from hsa_calc.tax.ca2025 import effective_federal_tax_rate, marginal_federal_tax_rate
from hsa_calc.tax.dispatch import TAX_YEAR, get_province, list_provinces

logger = logging.getLogger("hsa_calc")


async def _announce_defaults(_: FastAPI) -> None:
    settings = get_settings()
    logger.info(
        "HSA calculator API ready; tax_year=%s admin_fee_rate=%s annual_plan_fee=%s",
        TAX_YEAR,
        settings.admin_fee_rate,
        settings.annual_plan_fee,
    )


app = FastAPI(
    title="HSA Calculator",
    description="Compares paying medical expenses personally against running them through a Health Spending Account.",
    lifespan=build_application_lifespan("api", startup_hook=_announce_defaults),
)


class CalculateRequest(BaseModel):
    annual_income: float
    annual_medical_expenses: float
    province: str
    admin_fee_rate: float | None = Field(default=None, description="Admin fee as a fraction, e.g. 0.08")
    annual_plan_fee: float | None = None

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)


def _settings():
    return getattr(app.state, "settings", get_settings())


@app.get("/health")
def health():
    settings = _settings()
    return {
        "status": "ok",
        "tax_year": TAX_YEAR,
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
        },
    }


@app.get("/provinces")
def provinces():
    return [{"code": p.code, "name": p.name} for p in list_provinces()]


@app.get("/rates")
def rates(income: float = Query(..., allow_inf_nan=False), province: str | None = None):
    code = province or _settings().default_province
    try:
        prov = get_province(code)
    except CalculatorError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {
        "income": income,
        "province": prov.code,
        "federal": {
            "marginal": marginal_federal_tax_rate(income),
            "effective": effective_federal_tax_rate(income),
        },
        "provincial": {
            "marginal": prov.marginal_rate(income),
            "effective": prov.effective_rate(income),
        },
    }


@app.post("/calculate")
def calculate_endpoint(req: CalculateRequest):
    settings = _settings()
    payload = CalculatorInput(
        annual_income=req.annual_income,
        annual_medical_expenses=req.annual_medical_expenses,
        province=req.province,
        admin_fee_rate=req.admin_fee_rate if req.admin_fee_rate is not None else settings.admin_fee_rate,
        annual_plan_fee=req.annual_plan_fee if req.annual_plan_fee is not None else settings.annual_plan_fee,
    )
    try:
        result = calculate(payload)
    except CalculatorError as exc:
        logger.info("Rejected calculation: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"province": payload.province.strip().upper(), **asdict(result)}
