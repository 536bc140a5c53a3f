# src/ownvsrent/domain/presets.py
"""
Starting points for common own-vs-rent situations.

Starting balances cover each template's down payment, so every preset passes
validation as-is.
"""
from __future__ import annotations

import copy
from typing import Any

DEFAULT_PARAMETERS: dict[str, float] = {
    "home_price": 500_000,
    "down_payment": 20,
    "mortgage_rate": 6.5,
    "loan_term": 30,
    "property_tax_rate": 1.2,
    "home_insurance": 1_500,
    "maintenance_cost": 5_000,
    "hoa_fees": 0,
    "home_appreciation_rate": 3.0,
    "rental_income": 0,
    "monthly_rent": 2_500,
    "rent_increase_rate": 3.0,
    "investment_start_balance": 120_000,
    "monthly_budget": 4_000,
    "investment_return": 7.0,
    "time_horizon": 30,
}

PRESET_TEMPLATES: dict[str, dict[str, Any]] = {
    "first-time-buyer": {
        "name": "First-time Buyer",
        "description": "Conservative assumptions for new homeowners",
        "parameters": {
            "home_price": 400_000,
            "down_payment": 10,
            "mortgage_rate": 7.0,
            "loan_term": 30,
            "property_tax_rate": 1.2,
            "home_insurance": 1_200,
            "maintenance_cost": 4_000,
            "hoa_fees": 0,
            "home_appreciation_rate": 3.0,
            "rental_income": 0,
            "monthly_rent": 2_000,
            "rent_increase_rate": 3.0,
            "investment_start_balance": 50_000,
            "monthly_budget": 3_800,
            "investment_return": 7.0,
            "time_horizon": 30,
        },
    },
    "high-income-urban": {
        "name": "High-income Urban Professional",
        "description": "Higher property values and investment capacity",
        "parameters": {
            "home_price": 800_000,
            "down_payment": 20,
            "mortgage_rate": 6.5,
            "loan_term": 30,
            "property_tax_rate": 1.5,
            "home_insurance": 2_000,
            "maintenance_cost": 8_000,
            "hoa_fees": 300,
            "home_appreciation_rate": 3.5,
            "rental_income": 0,
            "monthly_rent": 4_000,
            "rent_increase_rate": 4.0,
            "investment_start_balance": 200_000,
            "monthly_budget": 7_500,
            "investment_return": 8.0,
            "time_horizon": 25,
        },
    },
    "retirement-planning": {
        "name": "Retirement Planning",
        "description": "Long-term 30+ year projections",
        "parameters": {
            "home_price": 500_000,
            "down_payment": 20,
            "mortgage_rate": 6.0,
            "loan_term": 15,
            "property_tax_rate": 1.0,
            "home_insurance": 1_500,
            "maintenance_cost": 5_000,
            "hoa_fees": 150,
            "home_appreciation_rate": 3.0,
            "rental_income": 0,
            "monthly_rent": 2_500,
            "rent_increase_rate": 2.5,
            "investment_start_balance": 125_000,
            "monthly_budget": 5_500,
            "investment_return": 7.5,
            "time_horizon": 35,
        },
    },
    "young-professional": {
        "name": "Young Professional",
        "description": "Starting career with growth potential",
        "parameters": {
            "home_price": 300_000,
            "down_payment": 5,
            "mortgage_rate": 7.5,
            "loan_term": 30,
            "property_tax_rate": 1.1,
            "home_insurance": 900,
            "maintenance_cost": 3_000,
            "hoa_fees": 0,
            "home_appreciation_rate": 3.0,
            "rental_income": 0,
            "monthly_rent": 1_500,
            "rent_increase_rate": 3.5,
            "investment_start_balance": 20_000,
            "monthly_budget": 3_000,
            "investment_return": 8.5,
            "time_horizon": 20,
        },
    },
    "suburban-family": {
        "name": "Suburban Family",
        "description": "Family-oriented with moderate costs",
        "parameters": {
            "home_price": 600_000,
            "down_payment": 15,
            "mortgage_rate": 6.8,
            "loan_term": 30,
            "property_tax_rate": 1.3,
            "home_insurance": 1_800,
            "maintenance_cost": 6_000,
            "hoa_fees": 100,
            "home_appreciation_rate": 3.0,
            "rental_income": 0,
            "monthly_rent": 3_000,
            "rent_increase_rate": 3.2,
            "investment_start_balance": 110_000,
            "monthly_budget": 5_500,
            "investment_return": 7.2,
            "time_horizon": 30,
        },
    },
}


def preset_options() -> list[dict[str, str]]:
    return [
        {"id": preset_id, "name": t["name"], "description": t["description"]}
        for preset_id, t in PRESET_TEMPLATES.items()
    ]


def get_preset(preset_id: str) -> dict[str, Any] | None:
    template = PRESET_TEMPLATES.get(preset_id)
    if template is None:
        return None
    # callers may edit what they get back
    return {"id": preset_id, **copy.deepcopy(template)}
