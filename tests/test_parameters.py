import pytest
from pydantic import ValidationError

from ownvsrent.domain.parameters import (
    FIELD_ALIASES,
    FIELD_NAMES,
    ScenarioParameters,
    canonical_field,
    to_number,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        (250000, 250000.0),
        ("250000", 250000.0),
        (" 6.5 ", 6.5),
        ("6.5%", 6.5),
        ("", 0.0),
        ("  %", 0.0),
        (None, 0.0),
        (True, 0.0),
        ("abc", 0.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
        ("-inf", 0.0),
        ([1, 2], 0.0),
    ],
)
def test_to_number(raw, expected):
    assert to_number(raw) == expected


def test_to_number_custom_default():
    assert to_number("junk", default=30.0) == 30.0


def test_defaults():
    p = ScenarioParameters()
    assert p.loan_term == 30
    assert p.time_horizon == 30
    assert p.home_price == 0
    assert p.monthly_budget == 0


def test_from_raw_accepts_both_spellings_and_strings():
    p = ScenarioParameters.from_raw(
        {"homePrice": "450000", "down_payment": "10%", "loanTerm": None, "notAField": 1}
    )
    assert p.home_price == 450_000
    assert p.down_payment == 10
    # None falls back to the field default, not 0
    assert p.loan_term == 30


def test_zero_horizon_is_kept():
    assert ScenarioParameters.from_raw({"time_horizon": 0}).time_horizon == 0
    assert ScenarioParameters.from_raw({"time_horizon": "soon"}).time_horizon == 30


def test_from_raw_passes_instances_through():
    p = ScenarioParameters(home_price=1)
    assert ScenarioParameters.from_raw(p) is p
    assert ScenarioParameters.from_raw(None) == ScenarioParameters()


def test_frozen():
    p = ScenarioParameters()
    with pytest.raises(ValidationError):
        p.home_price = 10


@pytest.mark.parametrize(
    "years,expected",
    [(30, 360), (0, 0), (-3, 0), (2.5, 30), (80, 600)],
)
def test_horizon_months(years, expected):
    assert ScenarioParameters(time_horizon=years).horizon_months(50) == expected


def test_field_names_and_aliases():
    assert len(FIELD_NAMES) == 16
    assert FIELD_ALIASES["hoa_fees"] == "hoaFees"
    assert FIELD_ALIASES["investment_start_balance"] == "investmentStartBalance"


def test_canonical_field():
    assert canonical_field("monthly_rent") == "monthly_rent"
    assert canonical_field("monthlyRent") == "monthly_rent"
    assert canonical_field("monthlyrent") is None
