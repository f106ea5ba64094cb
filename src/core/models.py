from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, Optional, Tuple

WEEKDAYS: Tuple[str, ...] = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")

class FundingTier(str, Enum):
  FIFTEEN = "15"
  THIRTY = "30"

class FundingPattern(str, Enum):
  STRETCHED = "stretched"    # 51 weeks
  TERM_TIME = "termTime"     # 38 weeks

class SessionType(str, Enum):
  FULL = "full"
  MORNING = "morning"
  AFTERNOON = "afternoon"

  @property
  def label(self) -> str:
    return _SESSION_LABELS[self]

_SESSION_LABELS = {
  SessionType.FULL: "Full Day (7:30am - 5:30pm)",
  SessionType.MORNING: "Morning Session (7:30am - 12:30pm)",
  SessionType.AFTERNOON: "Afternoon Session (12:30pm - 5:30pm)",
}

WeekdaySelection = Tuple[Optional[SessionType], ...]   # Monday..Friday

def _default_funding_hours() -> Dict[str, Dict[str, float]]:
  return {
    "15": {"stretched": 11.18, "termTime": 15.0},
    "30": {"stretched": 22.35, "termTime": 30.0},
  }

@dataclass
class FeeScheduleCfg:
  hourly_rate: float = 9.10
  enrichment_fully_funded: float = 22.50
  enrichment_part_funded: float = 10.00
  # tier -> pattern -> weekly funded hours
  funding_hours: Dict[str, Dict[str, float]] = field(default_factory=_default_funding_hours)
  session_hours: Dict[str, float] = field(
    default_factory=lambda: {"full": 10.0, "morning": 5.0, "afternoon": 5.0}
  )
  annual_hours: Dict[str, int] = field(default_factory=lambda: {"15": 570, "30": 1140})
  weeks_per_year: Dict[str, int] = field(default_factory=lambda: {"stretched": 51, "termTime": 38})
  effective_from: date = date(2025, 9, 1)

@dataclass(frozen=True)
class DailyBreakdown:
  day: str
  session_type: SessionType
  session_label: str
  session_hours: float
  funded_hours: float
  unfunded_hours: float
  unfunded_cost: float
  enrichment_fee: float      # a.k.a. resource fee
  total_daily_cost: float

@dataclass(frozen=True)
class WeeklySummary:
  total_weekly_cost: float
  total_unfunded_cost: float
  total_enrichment_fees: float
  weekly_funding_hours: float

@dataclass(frozen=True)
class FeeResult:
  funding_tier: FundingTier
  funding_pattern: FundingPattern
  daily_breakdown: Tuple[DailyBreakdown, ...]
  summary: WeeklySummary

  @property
  def total_weekly_cost(self) -> float:
    return self.summary.total_weekly_cost

@dataclass
class FundingOption:
  funding_tier: FundingTier
  funding_pattern: FundingPattern
  weekly_hours: float
  annual_hours: int
  weeks_per_year: int
  title: str
  description: str
