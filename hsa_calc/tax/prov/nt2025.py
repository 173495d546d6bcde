from __future__ import annotations

from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.prov.base import Province

NT_2025 = (
    Bracket(50_597, 0.0590),
    Bracket(101_198, 0.0860),
    Bracket(164_525, 0.1220),
    Bracket(None, 0.1405),
)

province = Province(
    code="NT",
    name="Northwest Territories",
    brackets=NT_2025,
)
