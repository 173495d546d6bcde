from __future__ import annotations

from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.prov.base import Province

YT_2025 = (
    Bracket(57_375, 0.064),
    Bracket(114_750, 0.09),
    Bracket(177_882, 0.109),
    Bracket(500_000, 0.128),
    Bracket(None, 0.15),
)

province = Province(
    code="YT",
    name="Yukon",
    brackets=YT_2025,
)
