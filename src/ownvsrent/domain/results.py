from dataclasses import asdict, dataclass
from typing import Any, Literal, Optional, Tuple

Recommendation = Literal["own", "rent"]

MonthlySeries = Tuple[float, ...]

@dataclass(frozen=True)
class OwnScenario:
    net_worth: MonthlySeries         # home equity + investments
    home_value: MonthlySeries
    home_equity: MonthlySeries
    investments: MonthlySeries
    total_costs: MonthlySeries       # cumulative effective housing cost
    monthly_payments: MonthlySeries  # effective monthly housing cost, per month

@dataclass(frozen=True)
class RentScenario:
    net_worth: MonthlySeries         # investments only
    investments: MonthlySeries
    total_costs: MonthlySeries       # cumulative rent paid
    monthly_payments: MonthlySeries  # rent curve
    monthly_investments: MonthlySeries  # amount invested in months 1..N

@dataclass(frozen=True)
class ScenarioResult:
    own: OwnScenario
    rent: RentScenario

    months: int
    down_payment_amount: float
    loan_amount: float
    monthly_mortgage_payment: float
    monthly_housing_cost: float            # gross
    effective_monthly_housing_cost: float  # net of rental income, floored at 0
    own_monthly_investment: float
    own_starting_investment_balance: float
    rent_starting_investment_balance: float

    # year fraction of the first month own net worth beats rent, None if never
    break_even_point: Optional[float]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

@dataclass(frozen=True)
class ScenarioSummary:
    own_final_net_worth: float
    rent_final_net_worth: float
    net_worth_difference: float
    net_worth_difference_percent: float
    own_total_costs: float
    rent_total_costs: float
    cost_difference: float
    time_horizon: float
    break_even_point: Optional[float]
    recommendation: Recommendation
    rental_income: float
    down_payment_amount: float
    own_starting_investments: float
    rent_starting_investments: float

@dataclass(frozen=True)
class ChartPoint:
    year: int
    own_net_worth: float
    rent_net_worth: float
    home_equity: float
    own_investments: float
    rent_investments: float
    own_costs: float
    rent_costs: float
    own_monthly_payment: float
    rent_monthly_payment: float
