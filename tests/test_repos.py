from datetime import datetime, timedelta, timezone

import pytest

from ownvsrent.adapters.memory_repo import InMemoryScenarioRepository
from ownvsrent.adapters.sql_repo import SqlScenarioRepository


@pytest.fixture(params=["memory", "sql"])
def repo(request, tmp_path):
    if request.param == "memory":
        return InMemoryScenarioRepository()
    return SqlScenarioRepository(f"sqlite:///{tmp_path / 'scenarios.db'}")


def test_save_and_get(repo, base_params):
    rec = repo.save("Baseline", base_params, description="500k starter")
    assert rec["id"]
    assert rec["name"] == "Baseline"
    assert rec["description"] == "500k starter"
    assert rec["created_at"]

    fetched = repo.get(rec["id"])
    assert fetched["parameters"] == base_params
    assert fetched["name"] == "Baseline"


def test_list_and_delete(repo, base_params):
    a = repo.save("A", base_params)
    b = repo.save("B", {**base_params, "home_price": 600_000})

    ids = [r["id"] for r in repo.list_all()]
    assert ids == [a["id"], b["id"]]

    assert repo.delete(a["id"]) is True
    assert repo.delete(a["id"]) is False
    assert repo.get(a["id"]) is None
    assert [r["name"] for r in repo.list_all()] == ["B"]


def test_unknown_id(repo):
    assert repo.get("missing") is None
    assert repo.delete("missing") is False


def test_memory_repo_hands_out_copies(base_params):
    repo = InMemoryScenarioRepository()
    rec = repo.save("A", base_params)
    base_params["home_price"] = 1
    rec["parameters"]["home_price"] = 2
    assert repo.get(rec["id"])["parameters"]["home_price"] == 500_000


def test_created_at_is_utc_iso8601(repo, base_params):
    rec = repo.save("A", base_params)
    for created in (rec["created_at"], repo.get(rec["id"])["created_at"], repo.list_all()[0]["created_at"]):
        stamp = datetime.fromisoformat(created)
        assert stamp.utcoffset() == timedelta(0)
        assert abs(datetime.now(timezone.utc) - stamp) < timedelta(minutes=5)
