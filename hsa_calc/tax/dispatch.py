from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping

from hsa_calc.errors import UnknownProvinceError
from hsa_calc.tax.prov.ab2025 import province as ab_2025
from hsa_calc.tax.prov.base import Province
from hsa_calc.tax.prov.bc2025 import province as bc_2025
from hsa_calc.tax.prov.mb2025 import province as mb_2025
from hsa_calc.tax.prov.nb2025 import province as nb_2025
from hsa_calc.tax.prov.nl2025 import province as nl_2025
from hsa_calc.tax.prov.ns2025 import province as ns_2025
from hsa_calc.tax.prov.nt2025 import province as nt_2025
from hsa_calc.tax.prov.nu2025 import province as nu_2025
from hsa_calc.tax.prov.on2025 import province as on_2025
from hsa_calc.tax.prov.pe2025 import province as pe_2025
from hsa_calc.tax.prov.sk2025 import province as sk_2025
from hsa_calc.tax.prov.yt2025 import province as yt_2025

TAX_YEAR = 2025


def build_registry(provinces: Iterable[Province]) -> Mapping[str, Province]:
    registry: dict[str, Province] = {}
    for province in provinces:
        code = province.code.upper()
        if code in registry:
            raise ValueError(f"Province {code} registered twice")
        registry[code] = province
    return MappingProxyType(registry)


PROVINCES: Mapping[str, Province] = build_registry(
    (
        ab_2025,
        bc_2025,
        mb_2025,
        nb_2025,
        nl_2025,
        ns_2025,
        nt_2025,
        nu_2025,
        on_2025,
        pe_2025,
        sk_2025,
        yt_2025,
    )
)


def get_province(
    code: str, provinces: Mapping[str, Province] = PROVINCES
) -> Province:
    key = (code or "").strip().upper()
    try:
        return provinces[key]
    except KeyError as exc:
        raise UnknownProvinceError(f"Invalid province code: {code}") from exc


def _resolve(province: Province | str) -> Province:
    if isinstance(province, Province):
        return province
    return get_province(province)


def marginal_provincial_tax_rate(income: float, province: Province | str) -> float:
    return _resolve(province).marginal_rate(income)


def effective_provincial_tax_rate(income: float, province: Province | str) -> float:
    return _resolve(province).effective_rate(income)


def list_provinces(provinces: Mapping[str, Province] = PROVINCES) -> List[Province]:
    return [provinces[code] for code in sorted(provinces)]


def list_supported_provinces(provinces: Mapping[str, Province] = PROVINCES) -> list[str]:
    return sorted(provinces)


__all__ = [
    "PROVINCES",
    "TAX_YEAR",
    "UnknownProvinceError",
    "build_registry",
    "effective_provincial_tax_rate",
    "get_province",
    "list_provinces",
    "list_supported_provinces",
    "marginal_provincial_tax_rate",
]
