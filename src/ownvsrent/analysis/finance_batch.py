# src/ownvsrent/analysis/finance_batch.py

from __future__ import annotations
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from ownvsrent.domain.parameters import FIELD_NAMES, ScenarioParameters, canonical_field
from ownvsrent.services.scenario import calculate_scenario, summarize
from ownvsrent.services.validation import validate_parameters


@dataclass
class BatchCostResult:
    down_payment_amount: np.ndarray
    loan_amount: np.ndarray
    monthly_mortgage_payment: np.ndarray
    monthly_housing_cost: np.ndarray
    effective_monthly_housing_cost: np.ndarray


def normalize_parameter_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Rename camelCase columns to field names, fill absent fields with their
    defaults and coerce every value the same way ScenarioParameters does.
    Non-parameter columns (e.g. a label) are kept as-is.
    """
    renamed = df.rename(columns={c: canonical_field(str(c)) or c for c in df.columns})
    records = [
        ScenarioParameters.from_raw(
            {k: (None if _is_missing(v) else v) for k, v in row.items() if k in FIELD_NAMES}
        ).model_dump()
        for row in renamed.to_dict(orient="records")
    ]
    params = pd.DataFrame.from_records(records, columns=list(FIELD_NAMES), index=renamed.index)
    extra = renamed[[c for c in renamed.columns if c not in FIELD_NAMES]]
    return pd.concat([extra, params], axis=1)


def _is_missing(v: Any) -> bool:
    try:
        return bool(pd.isna(v))
    except (TypeError, ValueError):
        return False


_FLOAT_MAX = np.finfo(float).max


def _finite(a: np.ndarray) -> np.ndarray:
    # same clamp as domain.finance.saturate
    return np.nan_to_num(a, nan=0.0, posinf=_FLOAT_MAX, neginf=-_FLOAT_MAX)


def compute_monthly_costs_df(df: pd.DataFrame) -> BatchCostResult:
    """
    Vectorized monthly ownership cost over a normalized parameter frame.

    Same rules as monthly_payment / monthly_housing_cost:
      - no loan or no term -> payment 0
      - 0% (or negative) rate -> principal / n
      - overflow saturates at the largest float
    """
    price = df["home_price"].to_numpy(dtype=float)
    dp_pct = df["down_payment"].to_numpy(dtype=float)
    rate_pct = df["mortgage_rate"].to_numpy(dtype=float)
    rental_income = df["rental_income"].to_numpy(dtype=float)

    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        term_months = np.rint(_finite(df["loan_term"].to_numpy(dtype=float) * 12))

        down_payment = _finite(dp_pct / 100.0 * price)
        loan_amount = _finite(price - down_payment)

        mortgage_monthly = np.zeros_like(price, dtype=float)
        r_monthly = np.maximum(rate_pct, 0.0) / 12.0 / 100.0
        ok = (loan_amount > 0) & (term_months > 0)

        # Standard mortgage payment formula, vectorized
        mask_rate = ok & (1.0 + r_monthly != 1.0)
        if mask_rate.any():
            la = loan_amount[mask_rate]
            r = r_monthly[mask_rate]
            mortgage_monthly[mask_rate] = _finite(
                la * r / (1.0 - (1.0 + r) ** (-term_months[mask_rate]))
            )

        mask_flat = ok & (1.0 + r_monthly == 1.0)
        mortgage_monthly[mask_flat] = loan_amount[mask_flat] / term_months[mask_flat]

        # --- Recurring ownership costs ---
        taxes_monthly = _finite(df["property_tax_rate"].to_numpy(dtype=float) / 100.0 * price) / 12.0
        insurance_monthly = df["home_insurance"].to_numpy(dtype=float) / 12.0
        maintenance_monthly = df["maintenance_cost"].to_numpy(dtype=float) / 12.0
        hoa_monthly = df["hoa_fees"].to_numpy(dtype=float)

        housing = _finite(
            mortgage_monthly + taxes_monthly + insurance_monthly + maintenance_monthly + hoa_monthly
        )
        effective = np.maximum(0.0, _finite(housing - rental_income))

    return BatchCostResult(
        down_payment_amount=down_payment,
        loan_amount=loan_amount,
        monthly_mortgage_payment=mortgage_monthly,
        monthly_housing_cost=housing,
        effective_monthly_housing_cost=effective,
    )


def monthly_costs_df(df: pd.DataFrame) -> pd.DataFrame:
    """
    Cost-only pass over a parameter frame: normalized inputs plus the
    down payment, loan and monthly cost columns, without projecting.
    """
    params_df = normalize_parameter_frame(df)
    costs = compute_monthly_costs_df(params_df)

    out = params_df.copy()
    out["down_payment_amount"] = costs.down_payment_amount
    out["loan_amount"] = costs.loan_amount
    out["monthly_mortgage_payment"] = costs.monthly_mortgage_payment
    out["monthly_housing_cost"] = costs.monthly_housing_cost
    out["effective_monthly_housing_cost"] = costs.effective_monthly_housing_cost
    return out


def compare_scenarios_df(df: pd.DataFrame) -> pd.DataFrame:
    """
    One full projection per row. Returns the normalized inputs plus cost
    columns, end-of-horizon net worths, break-even and recommendation.

    Cost columns come from each row's ScenarioResult. Rows that fail
    validation are still computed; `validation_errors` lists the messages so
    the caller can filter.
    """
    params_df = normalize_parameter_frame(df)

    rows: list[dict[str, Any]] = []
    for rec in params_df[list(FIELD_NAMES)].to_dict(orient="records"):
        result = calculate_scenario(rec)
        summary = summarize(result, rec)
        errors = validate_parameters(rec).errors
        rows.append(
            {
                "monthly_mortgage_payment": result.monthly_mortgage_payment,
                "monthly_housing_cost": result.monthly_housing_cost,
                "effective_monthly_housing_cost": result.effective_monthly_housing_cost,
                "own_final_net_worth": summary.own_final_net_worth,
                "rent_final_net_worth": summary.rent_final_net_worth,
                "net_worth_difference": summary.net_worth_difference,
                "break_even_years": summary.break_even_point,
                "recommendation": summary.recommendation,
                "validation_errors": "; ".join(errors.values()),
            }
        )
    summaries = pd.DataFrame(rows, index=params_df.index)
    return pd.concat([params_df, summaries], axis=1)


def sensitivity_df(
    base: Mapping[str, Any] | ScenarioParameters,
    field: str,
    values: Iterable[float],
) -> pd.DataFrame:
    """
    Vary one parameter over `values`, everything else fixed at `base`.
    """
    name = canonical_field(field)
    if name is None:
        raise ValueError(f"Unknown parameter: {field}")

    base_params = ScenarioParameters.from_raw(base).model_dump()
    grid = pd.DataFrame([{**base_params, name: v} for v in values])
    result = compare_scenarios_df(grid)
    return result[
        [
            name,
            "own_final_net_worth",
            "rent_final_net_worth",
            "net_worth_difference",
            "break_even_years",
            "recommendation",
        ]
    ].rename(columns={name: "parameter_value"})
