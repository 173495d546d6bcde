from __future__ import annotations

from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.prov.base import Province

ON_2025 = (
    Bracket(52_886, 0.0505),
    Bracket(105_775, 0.0915),
    Bracket(150_000, 0.1116),
    Bracket(220_000, 0.1216),
    Bracket(None, 0.1316),
)

province = Province(
    code="ON",
    name="Ontario",
    brackets=ON_2025,
)
