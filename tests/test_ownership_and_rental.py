import math

import pytest

from ownvsrent.analysis.ownership import home_equity_series, home_value_series, monthly_housing_cost
from ownvsrent.analysis.rental import rental_cost_series


def test_home_equity_starts_at_down_payment_and_grows():
    equity = home_equity_series(500_000, 3, 100_000, 400_000, 6.5, 30, 120)
    assert len(equity) == 121
    assert equity[0] == pytest.approx(100_000, abs=0.01)
    assert equity[120] > 100_000
    assert all(math.isfinite(v) for v in equity)


def test_home_equity_never_exceeds_home_value():
    equity = home_equity_series(300_000, 5, 60_000, 240_000, 4, 15, 180)
    values = home_value_series(300_000, 5, 180)
    for month, (e, v) in enumerate(zip(equity, values)):
        assert e <= v
        assert v == pytest.approx(300_000 * 1.05 ** (month / 12))


def test_home_equity_zero_down_payment():
    equity = home_equity_series(400_000, 3, 0, 400_000, 6.5, 30, 60)
    assert equity[0] == 0
    assert equity[60] > 0


def test_home_equity_zero_price():
    equity = home_equity_series(0, 3, 0, 0, 6.5, 30, 60)
    assert all(v == 0 for v in equity)


def test_home_equity_non_negative_when_value_falls():
    # falling prices with a big loan: equity floors at 0 instead of going negative
    equity = home_equity_series(200_000, -10, 0, 200_000, 8, 30, 360)
    assert all(v >= 0 for v in equity)


def test_home_equity_equals_value_after_payoff():
    equity = home_equity_series(300_000, 2, 60_000, 240_000, 5, 10, 150)
    values = home_value_series(300_000, 2, 150)
    assert equity[120] == pytest.approx(values[120])
    assert equity[150] == pytest.approx(values[150])


def test_monthly_housing_cost_sums_components():
    # 2000 + 6000/12 + 1200/12 + 3000/12 + 150
    assert monthly_housing_cost(2_000, 6_000, 1_200, 3_000, 150) == pytest.approx(3_000)
    assert monthly_housing_cost(0, 0, 0, 0, 0) == 0
    assert monthly_housing_cost(2_000, 0, 0, 0, 0) == 2_000


def test_rental_costs_escalate_annually():
    costs = rental_cost_series(2_000, 3, 24)
    assert len(costs) == 25
    assert costs[0] == 2_000
    assert costs[12] == pytest.approx(2_060)
    assert costs[24] == pytest.approx(2_000 * 1.03 ** 2)
    assert costs[24] > costs[12]


def test_rental_costs_flat_and_zero():
    assert all(v == 1_500 for v in rental_cost_series(1_500, 0, 12))
    assert all(v == 0 for v in rental_cost_series(0, 5, 12))


def test_rental_costs_negative_months_is_month_zero_only():
    assert rental_cost_series(1_800, 3, -3) == (1_800,)
