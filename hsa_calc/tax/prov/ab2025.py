from __future__ import annotations

from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.prov.base import Province

AB_2025 = (
    Bracket(151_234, 0.10),
    Bracket(181_481, 0.12),
    Bracket(241_974, 0.13),
    Bracket(362_961, 0.14),
    Bracket(None, 0.15),
)

province = Province(
    code="AB",
    name="Alberta",
    brackets=AB_2025,
)
