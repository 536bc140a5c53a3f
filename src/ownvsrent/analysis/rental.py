from ownvsrent.domain.finance import compound_factor, saturate
from ownvsrent.domain.parameters import to_number


def rental_cost_series(initial_rent: float, increase_rate_percent: float, months: int) -> tuple[float, ...]:
    """
    Monthly rent for months 0..months.

    Uses the same fractional-year compounding as home appreciation, so a 3%
    increase puts month 12 at rent * 1.03.
    """
    rent = to_number(initial_rent)
    rate = to_number(increase_rate_percent)
    n_months = max(0, int(to_number(months)))
    return tuple(saturate(rent * compound_factor(rate, m / 12)) for m in range(n_months + 1))
