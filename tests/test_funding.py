import pytest

from core.models import FundingPattern, FundingTier
from fees.funding import describe_funding_option, funding_options, weekly_funding_hours


@pytest.mark.parametrize("tier,pattern,hours", [
    ("15", "stretched", 11.18),
    ("15", "termTime", 15),
    ("30", "stretched", 22.35),
    ("30", "termTime", 30),
    (15, FundingPattern.TERM_TIME, 15),
])
def test_weekly_funding_hours(schedule, tier, pattern, hours):
    assert weekly_funding_hours(tier, pattern, schedule) == hours


def test_stretched_description(schedule):
    opt = describe_funding_option("15", "stretched", schedule)
    assert opt.title == "Stretched Over 51 Weeks"
    assert opt.description == "11.18 hours per week throughout the year"
    assert opt.annual_hours == 570


def test_term_time_description(schedule):
    opt = describe_funding_option("30", "termTime", schedule)
    assert opt.title == "Term Time Only"
    assert opt.description == "30 hours per week for 38 weeks (term time only)"
    assert opt.annual_hours == 1140
    assert opt.weeks_per_year == 38


def test_funding_options_cover_every_pair(schedule):
    opts = funding_options(schedule)
    assert [(o.funding_tier, o.funding_pattern) for o in opts] == [
        (FundingTier.FIFTEEN, FundingPattern.STRETCHED),
        (FundingTier.FIFTEEN, FundingPattern.TERM_TIME),
        (FundingTier.THIRTY, FundingPattern.STRETCHED),
        (FundingTier.THIRTY, FundingPattern.TERM_TIME),
    ]


def test_bool_is_not_a_tier(schedule):
    with pytest.raises(ValueError):
        weekly_funding_hours(True, "stretched", schedule)
