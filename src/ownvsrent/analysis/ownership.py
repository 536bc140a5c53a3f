from ownvsrent.domain.finance import compound_factor, remaining_balance, saturate
from ownvsrent.domain.parameters import to_number


def home_value_series(initial_price: float, appreciation_rate_percent: float, months: int) -> tuple[float, ...]:
    price = to_number(initial_price)
    rate = to_number(appreciation_rate_percent)
    n_months = max(0, int(to_number(months)))
    # annual compounding evaluated at fractional years
    return tuple(saturate(price * compound_factor(rate, m / 12)) for m in range(n_months + 1))


def home_equity_series(
    initial_price: float,
    appreciation_rate_percent: float,
    down_payment_amount: float,
    loan_principal: float,
    mortgage_rate_percent: float,
    term_years: float,
    months: int,
) -> tuple[float, ...]:
    """
    Equity = current home value - outstanding mortgage, floored at 0.

    down_payment_amount is not used in the arithmetic: with
    loan_principal = price - down payment, equity[0] already equals it.
    """
    values = home_value_series(initial_price, appreciation_rate_percent, months)
    equity = []
    for month, value in enumerate(values):
        balance = remaining_balance(loan_principal, mortgage_rate_percent, term_years, month)
        equity.append(max(0.0, value - balance))
    return tuple(equity)


def monthly_housing_cost(
    monthly_mortgage_payment: float,
    annual_property_tax: float,
    annual_insurance: float,
    annual_maintenance: float,
    monthly_hoa: float,
) -> float:
    """
    Total monthly cost of owning:
    - Mortgage (principal + interest)
    - Taxes, insurance and maintenance (annual -> monthly)
    - HOA
    """
    taxes_monthly = to_number(annual_property_tax) / 12.0
    ins_monthly = to_number(annual_insurance) / 12.0
    maint_monthly = to_number(annual_maintenance) / 12.0
    hoa_monthly = to_number(monthly_hoa)

    return saturate(
        to_number(monthly_mortgage_payment) + taxes_monthly + ins_monthly + maint_monthly + hoa_monthly
    )
