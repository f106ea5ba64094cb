from __future__ import annotations
from typing import List

from core.models import FeeScheduleCfg, FundingOption, FundingPattern, FundingTier

def coerce_tier(value) -> FundingTier:
    if isinstance(value, FundingTier):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    return FundingTier(value)

def coerce_pattern(value) -> FundingPattern:
    if isinstance(value, FundingPattern):
        return value
    return FundingPattern(value)

def weekly_funding_hours(tier, pattern, schedule: FeeScheduleCfg) -> float:
    """Weekly funded-hour pool for a tier/pattern pair."""
    t = coerce_tier(tier)
    p = coerce_pattern(pattern)
    return float(schedule.funding_hours[t.value][p.value])

def describe_funding_option(tier, pattern, schedule: FeeScheduleCfg) -> FundingOption:
    t = coerce_tier(tier)
    p = coerce_pattern(pattern)
    weekly = weekly_funding_hours(t, p, schedule)
    weeks = int(schedule.weeks_per_year[p.value])

    if p is FundingPattern.STRETCHED:
        title = f"Stretched Over {weeks} Weeks"
        description = f"{weekly:g} hours per week throughout the year"
    else:
        title = "Term Time Only"
        description = f"{weekly:g} hours per week for {weeks} weeks (term time only)"

    return FundingOption(
        funding_tier=t,
        funding_pattern=p,
        weekly_hours=weekly,
        annual_hours=int(schedule.annual_hours[t.value]),
        weeks_per_year=weeks,
        title=title,
        description=description,
    )

def funding_options(schedule: FeeScheduleCfg) -> List[FundingOption]:
    return [describe_funding_option(t, p, schedule) for t in FundingTier for p in FundingPattern]
