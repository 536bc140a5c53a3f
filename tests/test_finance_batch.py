import math

import numpy as np
import pandas as pd
import pytest

from ownvsrent.analysis.finance_batch import (
    compare_scenarios_df,
    compute_monthly_costs_df,
    monthly_costs_df,
    normalize_parameter_frame,
    sensitivity_df,
)
from ownvsrent.services.scenario import calculate_scenario, summarize


def test_normalize_renames_fills_and_keeps_extras():
    df = pd.DataFrame(
        [
            {"label": "a", "homePrice": "400000", "loanTerm": np.nan},
            {"label": "b", "homePrice": 250000, "loanTerm": 15},
        ]
    )
    out = normalize_parameter_frame(df)
    assert list(out["label"]) == ["a", "b"]
    assert list(out["home_price"]) == [400_000.0, 250_000.0]
    assert list(out["loan_term"]) == [30.0, 15.0]
    assert (out["time_horizon"] == 30).all()


def _mixed_rows(base_params):
    return [
        base_params,
        {**base_params, "mortgage_rate": 0},
        {**base_params, "mortgage_rate": -1},
        {**base_params, "mortgage_rate": 1e-300},
        {**base_params, "home_price": 0},
        {**base_params, "loan_term": 0},
        {**base_params, "loan_term": 12.5},
        {**base_params, "down_payment": 100},
        {**base_params, "rental_income": 10_000},
        {**base_params, "mortgage_rate": "7.25%", "home_price": "650000"},
        {**base_params, "home_price": 1e308, "property_tax_rate": 1e10, "mortgage_rate": 1e300},
    ]


def test_vectorized_costs_match_scalar(base_params):
    rows = _mixed_rows(base_params)
    costs = compute_monthly_costs_df(normalize_parameter_frame(pd.DataFrame(rows)))

    for i, row in enumerate(rows):
        expected = calculate_scenario(row)
        assert costs.down_payment_amount[i] == pytest.approx(expected.down_payment_amount)
        assert costs.loan_amount[i] == pytest.approx(expected.loan_amount)
        assert costs.monthly_mortgage_payment[i] == pytest.approx(expected.monthly_mortgage_payment)
        assert costs.monthly_housing_cost[i] == pytest.approx(expected.monthly_housing_cost)
        assert costs.effective_monthly_housing_cost[i] == pytest.approx(
            expected.effective_monthly_housing_cost
        )
        assert np.isfinite(costs.monthly_housing_cost[i])


def test_compare_cost_columns_agree_with_cost_only_pass(base_params):
    frame = pd.DataFrame(_mixed_rows(base_params))
    compared = compare_scenarios_df(frame)
    costs = monthly_costs_df(frame)

    for column in ("monthly_mortgage_payment", "monthly_housing_cost", "effective_monthly_housing_cost"):
        assert np.allclose(compared[column].to_numpy(), costs[column].to_numpy(), rtol=1e-9)
    assert "own_final_net_worth" not in costs.columns
    assert costs["loan_amount"].iloc[0] == pytest.approx(400_000)



def test_compare_matches_single_runs(base_params):
    rows = [base_params, {**base_params, "home_appreciation_rate": 6, "time_horizon": 10}]
    out = compare_scenarios_df(pd.DataFrame(rows))

    for i, row in enumerate(rows):
        summary = summarize(calculate_scenario(row), row)
        assert out["own_final_net_worth"].iloc[i] == pytest.approx(summary.own_final_net_worth)
        assert out["rent_final_net_worth"].iloc[i] == pytest.approx(summary.rent_final_net_worth)
        assert out["recommendation"].iloc[i] == summary.recommendation
    assert (out["validation_errors"] == "").all()


def test_compare_flags_invalid_rows(base_params):
    out = compare_scenarios_df(pd.DataFrame([{**base_params, "home_price": 0}]))
    assert out["validation_errors"].iloc[0] == "Home price must be greater than 0"
    assert math.isfinite(out["rent_final_net_worth"].iloc[0])


def test_sensitivity(base_params):
    df = sensitivity_df(base_params, "mortgageRate", [4.0, 6.5, 9.0])
    assert list(df.columns) == [
        "parameter_value",
        "own_final_net_worth",
        "rent_final_net_worth",
        "net_worth_difference",
        "break_even_years",
        "recommendation",
    ]
    assert list(df["parameter_value"]) == [4.0, 6.5, 9.0]
    # a cheaper mortgage leaves more to invest
    assert df["own_final_net_worth"].is_monotonic_decreasing
    assert df["rent_final_net_worth"].nunique() == 1


def test_sensitivity_unknown_field(base_params):
    with pytest.raises(ValueError, match="Unknown parameter"):
        sensitivity_df(base_params, "price", [1])
