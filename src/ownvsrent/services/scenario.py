# src/ownvsrent/services/scenario.py
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ownvsrent.adapters.config import config
from ownvsrent.adapters.logging_utils import get_logger
from ownvsrent.analysis.ownership import (
    home_equity_series,
    home_value_series,
    monthly_housing_cost,
)
from ownvsrent.analysis.rental import rental_cost_series
from ownvsrent.domain.finance import (
    investment_growth,
    investment_growth_variable,
    monthly_payment,
    saturate,
)
from ownvsrent.domain.parameters import ScenarioParameters
from ownvsrent.domain.results import (
    ChartPoint,
    OwnScenario,
    RentScenario,
    ScenarioResult,
    ScenarioSummary,
)

logger = get_logger(__name__)

ParamsLike = Mapping[str, Any] | ScenarioParameters


def _cumulative(monthly_amounts: Sequence[float]) -> tuple[float, ...]:
    """
    Running total with month 0 = 0.0; monthly_amounts[m - 1] is spent in month m.
    """
    total = 0.0
    out = [total]
    for amount in monthly_amounts:
        total = saturate(total + amount)
        out.append(total)
    return tuple(out)


def find_break_even(own_net_worth: Sequence[float], rent_net_worth: Sequence[float]) -> float | None:
    """
    First month (as fractional years) where owning is strictly ahead.

    Equal values do not count; the scan stops at the first crossing.
    """
    for month, (own, rent) in enumerate(zip(own_net_worth, rent_net_worth)):
        if own > rent:
            return month / 12
    return None


def calculate_scenario(params: ParamsLike) -> ScenarioResult:
    """
    Project owning vs renting month by month.

    Never raises for numeric input problems: every field is coerced (see
    ScenarioParameters) and each formula degrades to zeros / flat lines.
    Use services.validation for per-field errors.
    """
    p = ScenarioParameters.from_raw(params)
    months = p.horizon_months(config.MAX_HORIZON_YEARS)

    # --- Purchase & financing ---
    down_payment_amount = saturate((p.down_payment / 100) * p.home_price)
    loan_amount = saturate(p.home_price - down_payment_amount)

    mortgage_payment = monthly_payment(loan_amount, p.mortgage_rate, p.loan_term)
    housing_cost = monthly_housing_cost(
        mortgage_payment,
        saturate((p.property_tax_rate / 100) * p.home_price),
        p.home_insurance,
        p.maintenance_cost,
        p.hoa_fees,
    )
    # rental income offsets what owning costs, never below zero
    effective_housing_cost = max(0.0, saturate(housing_cost - p.rental_income))

    # --- Own: equity + whatever is left of the budget ---
    # Gross cost is subtracted and the full rental income added back, so this
    # is not simply budget - effective_housing_cost when income exceeds cost.
    own_monthly_investment = max(0.0, saturate(p.monthly_budget - housing_cost + p.rental_income))
    own_starting_balance = max(0.0, saturate(p.investment_start_balance - down_payment_amount))

    home_value = home_value_series(p.home_price, p.home_appreciation_rate, months)
    home_equity = home_equity_series(
        p.home_price,
        p.home_appreciation_rate,
        down_payment_amount,
        loan_amount,
        p.mortgage_rate,
        p.loan_term,
        months,
    )
    own_investments = investment_growth(
        own_starting_balance, own_monthly_investment, p.investment_return, months
    )
    own_net_worth = tuple(saturate(e + i) for e, i in zip(home_equity, own_investments))

    # --- Rent: invest budget - rent, which shrinks as rent rises ---
    rent_costs = rental_cost_series(p.monthly_rent, p.rent_increase_rate, months)
    rent_contributions = tuple(max(0.0, saturate(p.monthly_budget - rent)) for rent in rent_costs[:months])
    rent_investments = investment_growth_variable(
        p.investment_start_balance, rent_contributions, p.investment_return, months
    )

    # --- Cumulative costs (display only) ---
    own_total_costs = _cumulative([effective_housing_cost] * months)
    rent_total_costs = _cumulative(rent_costs[:months])

    break_even = find_break_even(own_net_worth, rent_investments)

    logger.debug(
        "scenario computed",
        extra={
            "context": {
                "months": months,
                "monthly_housing_cost": housing_cost,
                "break_even_point": break_even,
            }
        },
    )

    return ScenarioResult(
        own=OwnScenario(
            net_worth=own_net_worth,
            home_value=home_value,
            home_equity=home_equity,
            investments=own_investments,
            total_costs=own_total_costs,
            monthly_payments=(effective_housing_cost,) * (months + 1),
        ),
        rent=RentScenario(
            net_worth=rent_investments,
            investments=rent_investments,
            total_costs=rent_total_costs,
            monthly_payments=rent_costs,
            monthly_investments=rent_contributions,
        ),
        months=months,
        down_payment_amount=down_payment_amount,
        loan_amount=loan_amount,
        monthly_mortgage_payment=mortgage_payment,
        monthly_housing_cost=housing_cost,
        effective_monthly_housing_cost=effective_housing_cost,
        own_monthly_investment=own_monthly_investment,
        own_starting_investment_balance=own_starting_balance,
        rent_starting_investment_balance=p.investment_start_balance,
        break_even_point=break_even,
    )


def summarize(result: ScenarioResult, params: ParamsLike) -> ScenarioSummary:
    """
    Headline numbers at the end of the horizon.
    """
    p = ScenarioParameters.from_raw(params)
    final = result.months

    own_final = result.own.net_worth[final]
    rent_final = result.rent.net_worth[final]
    # every series value is finite, but their difference and ratio can still overflow
    difference = saturate(own_final - rent_final)
    difference_pct = saturate((difference / rent_final) * 100) if rent_final != 0 else 0.0

    own_costs = result.own.total_costs[final]
    rent_costs = result.rent.total_costs[final]

    return ScenarioSummary(
        own_final_net_worth=own_final,
        rent_final_net_worth=rent_final,
        net_worth_difference=difference,
        net_worth_difference_percent=difference_pct,
        own_total_costs=own_costs,
        rent_total_costs=rent_costs,
        cost_difference=saturate(own_costs - rent_costs),
        time_horizon=final / 12,
        break_even_point=result.break_even_point,
        recommendation="own" if difference > 0 else "rent",
        rental_income=p.rental_income,
        down_payment_amount=result.down_payment_amount,
        own_starting_investments=result.own_starting_investment_balance,
        rent_starting_investments=result.rent_starting_investment_balance,
    )


def chart_data(result: ScenarioResult) -> list[ChartPoint]:
    """
    One point per whole year (month 0, 12, 24, ...) for the charts.
    """
    points: list[ChartPoint] = []
    for year in range(result.months // 12 + 1):
        m = year * 12
        points.append(
            ChartPoint(
                year=year,
                own_net_worth=result.own.net_worth[m],
                rent_net_worth=result.rent.net_worth[m],
                home_equity=result.own.home_equity[m],
                own_investments=result.own.investments[m],
                rent_investments=result.rent.investments[m],
                own_costs=result.own.total_costs[m],
                rent_costs=result.rent.total_costs[m],
                own_monthly_payment=result.own.monthly_payments[m],
                rent_monthly_payment=result.rent.monthly_payments[m],
            )
        )
    return points
