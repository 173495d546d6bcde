from __future__ import annotations

from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.prov.base import Province

MB_2025 = (
    Bracket(47_564, 0.108),
    Bracket(101_200, 0.1275),
    Bracket(None, 0.174),
)

province = Province(
    code="MB",
    name="Manitoba",
    brackets=MB_2025,
)
