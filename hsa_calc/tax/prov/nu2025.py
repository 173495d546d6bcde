from __future__ import annotations

from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.prov.base import Province

NU_2025 = (
    Bracket(53_268, 0.0400),
    Bracket(106_537, 0.0700),
    Bracket(172_155, 0.0900),
    Bracket(None, 0.1150),
)

province = Province(
    code="NU",
    name="Nunavut",
    brackets=NU_2025,
)
