import math
import sys
from collections.abc import Sequence
from typing import Any

from ownvsrent.domain.parameters import to_number


def saturate(value: float) -> float:
    """
    Keep a result inside the finite float range: +/-inf clamp to the largest
    float, NaN becomes 0.0.
    """
    if math.isnan(value):
        return 0.0
    if math.isinf(value):
        return math.copysign(sys.float_info.max, value)
    return value


def term_months(term_years: Any) -> int:
    return int(round(saturate(to_number(term_years) * 12)))


def compound_factor(annual_rate_percent: float, years: float) -> float:
    """
    (1 + rate)^years for an annual percent rate.

    A rate at or below -100% floors the base at 0; overflow saturates at the
    largest float instead of raising.
    """
    base = max(0.0, 1 + annual_rate_percent / 100)
    try:
        return base ** years
    except OverflowError:
        return sys.float_info.max


def annuity_payment(rate_monthly: float, n_months: int, principal: float) -> float:
    r = rate_monthly
    # rates too small to move 1 + r behave as 0%
    if 1 + r == 1:
        return principal / n_months
    # discount form: (1 + r)^-n underflows to 0 instead of overflowing
    return saturate(principal * r / (1 - (1 + r) ** (-n_months)))


def monthly_payment(principal: float, annual_rate_percent: float, term_years: float) -> float:
    """
    Fixed-rate principal + interest payment.

    M = P * [ r(1+r)^n / ((1+r)^n - 1) ]
    P = loan principal
    r = monthly rate (annual percent / 12 / 100)
    n = number of payments (months)

    Degenerate inputs never raise: no loan or no term give 0.0, a 0% (or
    negative) rate gives straight-line principal / n, matching the linear
    paydown in remaining_balance.
    """
    principal = to_number(principal)
    annual_rate_percent = to_number(annual_rate_percent)
    n_months = term_months(term_years)

    if principal <= 0 or n_months <= 0:
        return 0.0
    return annuity_payment(max(0.0, annual_rate_percent) / 12 / 100, n_months, principal)


def remaining_balance(
    principal: float,
    annual_rate_percent: float,
    term_years: float,
    months_paid: float,
) -> float:
    """
    Outstanding principal after `months_paid` scheduled payments.

    B_k = P * ((1+r)^n - (1+r)^k) / ((1+r)^n - 1)

    Clamped to [0, principal]; 0 once the loan term is reached. A 0% (or
    negative) rate pays down linearly.
    """
    principal = to_number(principal)
    annual_rate_percent = to_number(annual_rate_percent)
    n_months = term_months(term_years)
    k = to_number(months_paid)

    if principal <= 0 or n_months <= 0:
        return 0.0
    if k >= n_months:
        return 0.0
    if k < 0:
        return principal

    r = annual_rate_percent / 12 / 100
    if r <= 0 or 1 + r == 1:
        return max(0.0, principal - principal / n_months * k)

    # same ratio divided through by (1+r)^n, all exponents <= 0
    balance = principal * (1 - (1 + r) ** (k - n_months)) / (1 - (1 + r) ** (-n_months))
    return min(principal, max(0.0, balance))


def investment_growth(
    principal: float,
    monthly_contribution: float,
    annual_return_percent: float,
    months: int,
) -> tuple[float, ...]:
    """
    Month-by-month balance with a fixed contribution.

    Each month the contribution lands first, then the whole balance grows by
    annual_return_percent / 12 / 100. Index 0 is the starting principal.
    """
    contribution = to_number(monthly_contribution)
    return investment_growth_variable(
        principal,
        [contribution] * max(0, int(to_number(months))),
        annual_return_percent,
        months,
    )


def investment_growth_variable(
    principal: float,
    contributions: Sequence[Any],
    annual_return_percent: float,
    months: int,
) -> tuple[float, ...]:
    """
    Same recurrence as investment_growth, but month m (1-indexed) contributes
    contributions[m - 1]; missing or non-numeric entries contribute 0.

    A monthly loss of 100% or more wipes the balance rather than flipping its
    sign, and runaway growth saturates at the largest float.
    """
    balance = to_number(principal)
    growth = max(0.0, 1 + to_number(annual_return_percent) / 12 / 100)
    n_months = int(to_number(months))
    contributions = list(contributions or [])

    values = [balance]
    for month in range(1, n_months + 1):
        contribution = to_number(contributions[month - 1]) if month <= len(contributions) else 0.0
        balance = saturate(saturate(balance + contribution) * growth)
        values.append(balance)
    return tuple(values)
