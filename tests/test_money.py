import pytest

from core.money import format_gbp, round2


@pytest.mark.parametrize("value,expected", [
    (34.762, 34.76),
    (0.125, 0.13),
    (2.675, 2.68),
    (1.1799999999999997, 1.18),
    (3.8200000000000003, 3.82),
    (45.5, 45.5),
    (0, 0.0),
])
def test_round2_half_up(value, expected):
    assert round2(value) == expected


def test_format_gbp():
    assert format_gbp(249.5) == "£249.50"
    assert format_gbp(1234.5) == "£1,234.50"
    assert format_gbp(0) == "£0.00"
