from __future__ import annotations

import os
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from hsa_calc.tax.dispatch import PROVINCES

_ENV_NAMES = {
    "admin_fee_rate": "HSA_ADMIN_FEE_RATE",
    "annual_plan_fee": "HSA_PLAN_FEE",
}


class Settings(BaseModel):
    default_province: str = Field(default_factory=lambda: os.getenv("HSA_DEFAULT_PROVINCE", "ON"))
    admin_fee_rate: float = Field(default_factory=lambda: os.getenv("HSA_ADMIN_FEE_RATE") or 0.08)
    annual_plan_fee: float = Field(default_factory=lambda: os.getenv("HSA_PLAN_FEE") or 120.0)
    log_dir: str | None = Field(default_factory=lambda: os.getenv("HSA_LOG_DIR") or None)
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))

    # defaults come from the environment and must pass the validators
    model_config = ConfigDict(frozen=True, validate_default=True, allow_inf_nan=False)

    @field_validator("default_province", mode="before")
    @classmethod
    def _normalize_province(cls, value: str) -> str:
        upper = (value or "ON").strip().upper()
        if upper not in PROVINCES:
            raise ValueError(f"HSA_DEFAULT_PROVINCE must be one of {', '.join(sorted(PROVINCES))}, got {upper}")
        return upper

    @field_validator("admin_fee_rate", "annual_plan_fee", mode="before")
    @classmethod
    def _parse_number(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError as exc:
                raise ValueError(f"{_ENV_NAMES[info.field_name]} must be a number, got {value!r}") from exc
        return value

    @field_validator("admin_fee_rate")
    @classmethod
    def _validate_fee_rate(cls, value: float) -> float:
        if value < 0:
            raise ValueError("HSA_ADMIN_FEE_RATE must not be negative")
        return value

    @field_validator("annual_plan_fee")
    @classmethod
    def _validate_plan_fee(cls, value: float) -> float:
        if value < 0:
            raise ValueError("HSA_PLAN_FEE must not be negative")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
