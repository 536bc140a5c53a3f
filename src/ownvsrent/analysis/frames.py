from dataclasses import asdict

import pandas as pd

from ownvsrent.domain.results import ScenarioResult
from ownvsrent.services.scenario import chart_data


def monthly_frame(result: ScenarioResult) -> pd.DataFrame:
    """
    Every month of both trajectories side by side, month 0 first.
    """
    months = range(result.months + 1)
    # contributions start in month 1
    rent_invested = (0.0,) + tuple(result.rent.monthly_investments)

    return pd.DataFrame(
        {
            "month": list(months),
            "year": [m / 12 for m in months],
            "own_net_worth": result.own.net_worth,
            "rent_net_worth": result.rent.net_worth,
            "home_value": result.own.home_value,
            "home_equity": result.own.home_equity,
            "own_investments": result.own.investments,
            "rent_investments": result.rent.investments,
            "own_total_costs": result.own.total_costs,
            "rent_total_costs": result.rent.total_costs,
            "own_monthly_payment": result.own.monthly_payments,
            "rent_monthly_payment": result.rent.monthly_payments,
            "rent_monthly_investment": rent_invested,
        }
    )


def yearly_frame(result: ScenarioResult) -> pd.DataFrame:
    return pd.DataFrame([asdict(p) for p in chart_data(result)])
