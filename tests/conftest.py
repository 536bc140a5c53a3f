# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from ownvsrent.adapters.memory_repo import InMemoryScenarioRepository
from ownvsrent.api.http import app, get_scenario_repo  # run tests from repo root


@pytest.fixture
def base_params():
    # 500k home, 20% down, enough savings to cover the down payment
    return {
        "home_price": 500_000,
        "down_payment": 20,
        "mortgage_rate": 6.5,
        "loan_term": 30,
        "property_tax_rate": 1.2,
        "home_insurance": 1_500,
        "maintenance_cost": 5_000,
        "hoa_fees": 100,
        "home_appreciation_rate": 3,
        "rental_income": 0,
        "monthly_rent": 2_500,
        "rent_increase_rate": 3,
        "investment_start_balance": 120_000,
        "monthly_budget": 4_000,
        "investment_return": 7,
        "time_horizon": 30,
    }


@pytest.fixture
def scenario_repo():
    return InMemoryScenarioRepository()


@pytest.fixture
def client(scenario_repo):
    app.dependency_overrides[get_scenario_repo] = lambda: scenario_repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
