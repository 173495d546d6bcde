from __future__ import annotations

from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.prov.base import Province

SK_2025 = (
    Bracket(53_463, 0.105),
    Bracket(152_750, 0.125),
    Bracket(None, 0.145),
)

province = Province(
    code="SK",
    name="Saskatchewan",
    brackets=SK_2025,
)
