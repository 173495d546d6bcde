from __future__ import annotations

from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.prov.base import Province

BC_2025 = (
    Bracket(49_279, 0.0506),
    Bracket(98_560, 0.077),
    Bracket(113_158, 0.105),
    Bracket(137_407, 0.1229),
    Bracket(186_306, 0.147),
    Bracket(259_829, 0.168),
    Bracket(None, 0.205),
)

province = Province(
    code="BC",
    name="British Columbia",
    brackets=BC_2025,
)
