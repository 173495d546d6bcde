from __future__ import annotations

from hsa_calc.tax.ca2025 import Bracket
from hsa_calc.tax.prov.base import Province

NL_2025 = (
    Bracket(44_192, 0.087),
    Bracket(88_382, 0.145),
    Bracket(157_792, 0.158),
    Bracket(220_910, 0.178),
    Bracket(282_214, 0.198),
    Bracket(564_429, 0.208),
    Bracket(1_128_858, 0.213),
    Bracket(None, 0.218),
)

province = Province(
    code="NL",
    name="Newfoundland and Labrador",
    brackets=NL_2025,
)
