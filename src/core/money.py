from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP

_CENT = Decimal("0.01")

def round2(value: float) -> float:
  # half-up on the shortest repr: 34.765 -> 34.77
  return float(Decimal(repr(float(value))).quantize(_CENT, rounding=ROUND_HALF_UP))

def format_gbp(value: float) -> str:
  return f"£{value:,.2f}"
