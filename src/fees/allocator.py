from __future__ import annotations
import logging
from typing import List, Mapping, Optional, Tuple

from core.models import (
    WEEKDAYS,
    DailyBreakdown,
    FeeResult,
    FeeScheduleCfg,
    SessionType,
    WeekdaySelection,
    WeeklySummary,
)
from core.money import round2
from fees.funding import coerce_pattern, coerce_tier, weekly_funding_hours

logger = logging.getLogger(__name__)

_DEFAULT_SCHEDULE = FeeScheduleCfg()

def _coerce_session(value) -> Optional[SessionType]:
    if value is None or value == "":
        return None
    if isinstance(value, SessionType):
        return value
    return SessionType(value)

def normalize_selection(selection) -> WeekdaySelection:
    """
    Turn a weekday selection into a 5-tuple of Optional[SessionType], Monday first.

    Accepts a sequence of up to 5 slots (shorter ones are padded with None) or a
    mapping of weekday name -> session. Unknown weekdays/sessions raise ValueError.
    """
    if isinstance(selection, Mapping):
        by_name = {d.lower(): i for i, d in enumerate(WEEKDAYS)}
        slots: List[Optional[SessionType]] = [None] * len(WEEKDAYS)
        for day, session in selection.items():
            idx = by_name.get(str(day).strip().lower())
            if idx is None:
                raise ValueError(f"Unknown weekday {day!r}; expected one of {', '.join(WEEKDAYS)}")
            slots[idx] = _coerce_session(session)
        return tuple(slots)

    raw = list(selection)
    if len(raw) > len(WEEKDAYS):
        raise ValueError(f"Weekday selection has {len(raw)} slots; at most {len(WEEKDAYS)} allowed")
    raw += [None] * (len(WEEKDAYS) - len(raw))
    return tuple(_coerce_session(s) for s in raw)

def resource_fee_for(funded_hours: float, session_hours: float, schedule: FeeScheduleCfg) -> float:
    if funded_hours == session_hours:
        return schedule.enrichment_fully_funded
    if funded_hours > 0:
        return schedule.enrichment_part_funded
    return 0.0

def allocate_day(
    day: str,
    session: SessionType,
    remaining_pool: float,
    schedule: FeeScheduleCfg,
) -> Tuple[DailyBreakdown, float]:
    """Draw one session from the pool. Returns (breakdown, pool left afterwards)."""
    session_hours = float(schedule.session_hours[session.value])

    funded = min(remaining_pool, session_hours)
    remaining = max(0.0, remaining_pool - funded)

    unfunded = session_hours - funded
    unfunded_cost = unfunded * schedule.hourly_rate
    fee = resource_fee_for(funded, session_hours, schedule)
    total = unfunded_cost + fee

    logger.debug(
        "%s %s: funded=%.4f unfunded=%.4f fee=%.2f pool %.4f -> %.4f",
        day, session.value, funded, unfunded, fee, remaining_pool, remaining,
    )

    breakdown = DailyBreakdown(
        day=day,
        session_type=session,
        session_label=session.label,
        session_hours=session_hours,
        funded_hours=round2(funded),
        unfunded_hours=round2(unfunded),
        unfunded_cost=round2(unfunded_cost),
        enrichment_fee=round2(fee),
        total_daily_cost=round2(total),
    )
    return breakdown, remaining

def compute_fees(
    funding_tier,
    funding_pattern,
    weekday_selection,
    schedule: Optional[FeeScheduleCfg] = None,
) -> Optional[FeeResult]:
    """
    Weekly fee breakdown for one child.

    The weekly funded-hour pool is consumed Monday -> Friday; each attended day
    takes min(pool, session hours). Uncovered hours are billed at the hourly
    rate and a resource fee is added per day (full / part / no funding).
    Every stored field is rounded to 2dp as it is computed, and the totals are
    sums of those rounded daily values.

    Returns None when no day is selected.
    """
    schedule = schedule or _DEFAULT_SCHEDULE
    tier = coerce_tier(funding_tier)
    pattern = coerce_pattern(funding_pattern)
    slots = normalize_selection(weekday_selection)

    if not any(slots):
        return None

    pool = weekly_funding_hours(tier, pattern, schedule)
    remaining = pool

    days: List[DailyBreakdown] = []
    for day, session in zip(WEEKDAYS, slots):
        if session is None:
            continue
        breakdown, remaining = allocate_day(day, session, remaining, schedule)
        days.append(breakdown)

    summary = WeeklySummary(
        total_weekly_cost=round2(sum(d.total_daily_cost for d in days)),
        total_unfunded_cost=round2(sum(d.unfunded_cost for d in days)),
        total_enrichment_fees=round2(sum(d.enrichment_fee for d in days)),
        weekly_funding_hours=round2(pool),
    )
    logger.debug("%s/%s: %d day(s), weekly total %.2f",
                 tier.value, pattern.value, len(days), summary.total_weekly_cost)

    return FeeResult(
        funding_tier=tier,
        funding_pattern=pattern,
        daily_breakdown=tuple(days),
        summary=summary,
    )
