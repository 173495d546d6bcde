from __future__ import annotations

from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.prov.base import Province

NS_2025 = (
    Bracket(30_507, 0.0879),
    Bracket(61_015, 0.1495),
    Bracket(95_883, 0.1667),
    Bracket(154_650, 0.175),
    Bracket(None, 0.21),
)

province = Province(
    code="NS",
    name="Nova Scotia",
    brackets=NS_2025,
)
