# src/ownvsrent/services/validation.py

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ownvsrent.domain.parameters import ScenarioParameters, canonical_field, to_number

# Fields a projection is meaningless without
REQUIRED_FIELDS = [
    "home_price",
    "down_payment",
    "mortgage_rate",
    "loan_term",
    "monthly_rent",
    "investment_return",
    "time_horizon",
]

# field -> (low, high, message); bounds inclusive
RANGE_RULES: dict[str, tuple[float, float, str]] = {
    "down_payment": (0, 100, "Down payment must be between 0% and 100%"),
    "mortgage_rate": (0, 50, "Mortgage rate must be between 0% and 50%"),
    "loan_term": (1, 50, "Loan term must be between 1 and 50 years"),
    "property_tax_rate": (0, 10, "Property tax rate must be between 0% and 10%"),
    "rent_increase_rate": (0, 20, "Rent increase rate must be between 0% and 20%"),
    "investment_return": (-50, 50, "Investment return must be between -50% and 50%"),
    "time_horizon": (1, 50, "Time horizon must be between 1 and 50 years"),
    "home_appreciation_rate": (-10, 20, "Home appreciation rate must be between -10% and 20%"),
}

POSITIVE_RULES: dict[str, str] = {
    "home_price": "Home price must be greater than 0",
    "monthly_rent": "Monthly rent must be greater than 0",
}

NON_NEGATIVE_RULES: dict[str, str] = {
    "home_insurance": "Home insurance cannot be negative",
    "maintenance_cost": "Maintenance cost cannot be negative",
    "hoa_fees": "HOA fees cannot be negative",
    "investment_start_balance": "Investment start balance cannot be negative",
    "monthly_budget": "Monthly budget cannot be negative",
    "rental_income": "Rental income cannot be negative",
}


class ScenarioValidationError(ValueError):
    """Raised by require_valid with one aggregated, displayable message."""

    def __init__(
        self,
        message: str,
        *,
        errors: dict[str, str] | None = None,
        missing: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or {}
        self.missing = missing or []


@dataclass(frozen=True)
class ValidationResult:
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _present_values(raw: Mapping[str, Any] | ScenarioParameters | None) -> dict[str, Any]:
    """
    Collect the supplied (non-None) values keyed by snake_case field name.
    """
    if isinstance(raw, ScenarioParameters):
        return raw.model_dump()
    out: dict[str, Any] = {}
    for key, val in (raw or {}).items():
        name = canonical_field(str(key))
        if name is not None and val is not None:
            out[name] = val
    return out


def missing_required(raw: Mapping[str, Any] | ScenarioParameters | None) -> list[str]:
    present = _present_values(raw)
    return [f for f in REQUIRED_FIELDS if f not in present]


def validate_parameters(raw: Mapping[str, Any] | ScenarioParameters | None) -> ValidationResult:
    """
    Strict pre-check of a parameter set.

    Returns a field -> message map and never raises; compute still runs on
    whatever was passed (calculate_scenario is lenient). Callers decide whether
    to hold results back while the map is non-empty.
    """
    present = _present_values(raw)
    values: dict[str, float] = {}
    errors: dict[str, str] = {}

    for name, val in present.items():
        num = to_number(val, default=float("nan"))
        if math.isnan(num):
            errors[name] = f"{name.replace('_', ' ').capitalize()} must be a number"
        else:
            values[name] = num

    for name, message in POSITIVE_RULES.items():
        if name in errors:
            continue
        if values.get(name, 0.0) <= 0:
            errors[name] = message

    for name, (low, high, message) in RANGE_RULES.items():
        if name in values and not (low <= values[name] <= high):
            errors[name] = message

    for name, message in NON_NEGATIVE_RULES.items():
        if name in values and values[name] < 0:
            errors[name] = message

    # The own scenario pays the down payment out of the starting balance.
    price = values.get("home_price", 0.0)
    dp_pct = values.get("down_payment", 0.0)
    if price and dp_pct and "investment_start_balance" in values:
        dp_amount = (dp_pct / 100) * price
        balance = values["investment_start_balance"]
        if dp_amount > balance:
            errors["down_payment"] = (
                f"Down payment (${dp_amount:,.0f}) exceeds available investment balance "
                f"(${balance:,.0f}) for ownership scenario"
            )

    return ValidationResult(errors=errors)


def require_valid(raw: Mapping[str, Any] | ScenarioParameters | None) -> ScenarioParameters:
    """
    Gate used before showing results: missing required fields first, then
    range checks. Raises ScenarioValidationError; returns normalized params.
    """
    missing = missing_required(raw)
    if missing:
        raise ScenarioValidationError(
            f"Missing required parameters: {', '.join(missing)}",
            missing=missing,
        )

    result = validate_parameters(raw)
    if not result.is_valid:
        raise ScenarioValidationError(
            f"Invalid parameters: {', '.join(result.errors.values())}",
            errors=result.errors,
        )

    return ScenarioParameters.from_raw(raw)
