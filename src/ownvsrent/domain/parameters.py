# src/ownvsrent/domain/parameters.py
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


def to_number(val: Any, default: float = 0.0) -> float:
    """
    Lenient numeric coercion used on the compute path.

    Accepts:
      - 250000 / 6.5
      - "250000" / " 6.5 "
      - "6.5%"  (the percent sign is dropped, the number is kept as a percent)

    Anything else (None, blanks, booleans, garbage, NaN, +/-inf) -> default.
    """
    if val is None or isinstance(val, bool):
        return default
    if isinstance(val, str):
        s = val.strip()
        if s.endswith("%"):
            s = s[:-1].strip()
        if not s:
            return default
        val = s
    try:
        f = float(val)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(f):
        return default
    return f


class ScenarioParameters(BaseModel):
    """
    Full input set for one own-vs-rent projection.

    Percent fields hold plain percents (6.5 means 6.5%). Every field is coerced
    to a finite float; absent or unusable values fall back to the field default.
    Both snake_case names and the camelCase names used by the web form work.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    # Purchase & loan
    home_price: float = 0.0
    down_payment: float = 0.0            # percent of home_price
    mortgage_rate: float = 0.0           # annual percent
    loan_term: float = 30.0              # years

    # Ownership costs
    property_tax_rate: float = 0.0       # annual percent of home_price
    home_insurance: float = 0.0          # annual dollars
    maintenance_cost: float = 0.0        # annual dollars
    hoa_fees: float = 0.0                # monthly dollars
    home_appreciation_rate: float = 0.0  # annual percent
    rental_income: float = 0.0           # monthly dollars collected on the owned home

    # Renting
    monthly_rent: float = 0.0
    rent_increase_rate: float = 0.0      # annual percent

    # Investing
    investment_start_balance: float = 0.0
    monthly_budget: float = 0.0          # housing + investing, per month
    investment_return: float = 0.0       # annual percent

    time_horizon: float = 30.0           # years

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_number(cls, v: Any, info: ValidationInfo) -> float:
        default = cls.model_fields[info.field_name].default
        return to_number(v, default)

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any] | ScenarioParameters | None) -> ScenarioParameters:
        if isinstance(raw, cls):
            return raw
        return cls.model_validate(dict(raw or {}))

    def horizon_months(self, max_years: int) -> int:
        years = max(0.0, min(self.time_horizon, float(max_years)))
        return int(round(years * 12))


FIELD_NAMES: tuple[str, ...] = tuple(ScenarioParameters.model_fields)

# field name -> camelCase name the web form / share links use
FIELD_ALIASES: dict[str, str] = {name: to_camel(name) for name in FIELD_NAMES}


def canonical_field(key: str) -> str | None:
    """Map either spelling of a parameter name to its snake_case field name."""
    if key in ScenarioParameters.model_fields:
        return key
    for name, alias in FIELD_ALIASES.items():
        if alias == key:
            return name
    return None
