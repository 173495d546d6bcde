from __future__ import annotations

from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.prov.base import Province

NB_2025 = (
    Bracket(51_306, 0.094),
    Bracket(102_614, 0.14),
    Bracket(190_060, 0.16),
    Bracket(None, 0.195),
)

province = Province(
    code="NB",
    name="New Brunswick",
    brackets=NB_2025,
)
