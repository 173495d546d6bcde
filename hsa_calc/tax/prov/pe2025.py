from __future__ import annotations

from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.prov.base import Province

PE_2025 = (
    Bracket(33_328, 0.095),
    Bracket(64_656, 0.1347),
    Bracket(105_000, 0.166),
    Bracket(140_000, 0.1762),
    Bracket(None, 0.19),
)

province = Province(
    code="PE",
    name="Prince Edward Island",
    brackets=PE_2025,
)
