# src/ownvsrent/api/http.py
from __future__ import annotations

from dataclasses import asdict
from functools import lru_cache
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Query

from ownvsrent.adapters.config import config
from ownvsrent.adapters.logging_utils import get_logger
from ownvsrent.adapters.sql_repo import SqlScenarioRepository
from ownvsrent.adapters.url_codec import build_share_url, decode_query
from ownvsrent.domain.parameters import ScenarioParameters
from ownvsrent.domain.ports import ScenarioRepository
from ownvsrent.domain.presets import DEFAULT_PARAMETERS, get_preset, preset_options
from ownvsrent.domain.results import ScenarioResult, ScenarioSummary
from ownvsrent.services.calculations import run_calculation
from ownvsrent.services.formatting import format_currency, format_percentage
from ownvsrent.services.scenario import calculate_scenario, chart_data, summarize
from ownvsrent.services.validation import missing_required, validate_parameters
from .schemas import (
    PresetOption,
    PresetTemplate,
    SavedScenarioItem,
    SaveScenarioRequest,
    ScenarioRequest,
    ScenarioResponse,
    ShareUrlRequest,
    ShareUrlResponse,
    ValidationResponse,
)

logger = get_logger(__name__)

app = FastAPI(title="Own vs Rent")


# -------------------------------------------------------------------
# Saved-scenario store (one per process, swappable in tests)
# -------------------------------------------------------------------
@lru_cache(maxsize=1)
def _default_repo() -> SqlScenarioRepository:
    return SqlScenarioRepository(config.DB_URI)


def get_scenario_repo() -> ScenarioRepository:
    return _default_repo()


def _formatted(summary: ScenarioSummary) -> dict[str, str]:
    return {
        "own_final_net_worth": format_currency(summary.own_final_net_worth),
        "rent_final_net_worth": format_currency(summary.rent_final_net_worth),
        "net_worth_difference": format_currency(summary.net_worth_difference),
        "net_worth_difference_percent": format_percentage(summary.net_worth_difference_percent),
        "own_total_costs": format_currency(summary.own_total_costs, compact=True),
        "rent_total_costs": format_currency(summary.rent_total_costs, compact=True),
    }


def _response(result: ScenarioResult, summary: ScenarioSummary) -> ScenarioResponse:
    return ScenarioResponse(
        result=result.to_dict(),
        summary=asdict(summary),
        chart=[asdict(p) for p in chart_data(result)],
        formatted=_formatted(summary),
    )


# -----------------------------
# Compute / validate
# -----------------------------
@app.post("/scenario", response_model=ScenarioResponse)
def scenario_endpoint(
    payload: ScenarioRequest,
    strict: bool = Query(True, description="Reject missing/invalid parameters with 400"),
) -> ScenarioResponse:
    """
    Full own-vs-rent projection.

    strict=true (default) refuses to return numbers for a parameter set that
    fails validation; strict=false computes whatever was sent.
    """
    raw = payload.model_dump()
    if not strict:
        result = calculate_scenario(raw)
        return _response(result, summarize(result, raw))

    outcome = run_calculation(raw)
    if outcome.result is None or outcome.summary is None:
        raise HTTPException(status_code=400, detail=outcome.error)
    return _response(outcome.result, outcome.summary)


@app.post("/scenario/validate", response_model=ValidationResponse)
def validate_endpoint(payload: ScenarioRequest) -> ValidationResponse:
    raw = payload.model_dump()
    result = validate_parameters(raw)
    missing = missing_required(raw)
    return ValidationResponse(
        is_valid=result.is_valid and not missing,
        errors=result.errors,
        missing=missing,
    )


# -----------------------------
# Presets
# -----------------------------
@app.get("/presets", response_model=list[PresetOption])
def list_presets() -> list[PresetOption]:
    return [PresetOption(**o) for o in preset_options()]


@app.get("/presets/{preset_id}", response_model=PresetTemplate)
def preset_detail(preset_id: str) -> PresetTemplate:
    preset = get_preset(preset_id)
    if preset is None:
        raise HTTPException(status_code=404, detail=f"unknown preset: {preset_id}")
    return PresetTemplate(**preset)


# -----------------------------
# Share links
# -----------------------------
@app.post("/share-url", response_model=ShareUrlResponse)
def share_url(body: ShareUrlRequest) -> ShareUrlResponse:
    url = build_share_url(
        body.parameters,
        body.base_url or config.SHARE_BASE_URL,
        defaults=DEFAULT_PARAMETERS if body.only_changes else None,
    )
    return ShareUrlResponse(url=url)


@app.get("/share-url/decode")
def decode_share_url(q: str = Query(..., description="query string or full share URL")) -> dict[str, Any]:
    return {"parameters": decode_query(q)}


# -----------------------------
# Saved scenarios
# -----------------------------
@app.post("/scenarios", response_model=SavedScenarioItem, status_code=201)
def save_scenario(
    body: SaveScenarioRequest,
    repo: ScenarioRepository = Depends(get_scenario_repo),
) -> SavedScenarioItem:
    # store coerced numbers, not whatever strings the form sent
    params = ScenarioParameters.from_raw(body.parameters).model_dump()
    rec = repo.save(body.name, params, description=body.description)
    logger.info("scenario saved", extra={"context": {"scenario_id": rec["id"], "name": rec["name"]}})
    return SavedScenarioItem(**rec)


@app.get("/scenarios", response_model=list[SavedScenarioItem])
def list_scenarios(repo: ScenarioRepository = Depends(get_scenario_repo)) -> list[SavedScenarioItem]:
    return [SavedScenarioItem(**r) for r in repo.list_all()]


@app.get("/scenarios/{scenario_id}", response_model=SavedScenarioItem)
def get_scenario(
    scenario_id: str,
    repo: ScenarioRepository = Depends(get_scenario_repo),
) -> SavedScenarioItem:
    rec = repo.get(scenario_id)
    if rec is None:
        raise HTTPException(status_code=404, detail=f"unknown scenario: {scenario_id}")
    return SavedScenarioItem(**rec)


@app.delete("/scenarios/{scenario_id}")
def delete_scenario(
    scenario_id: str,
    repo: ScenarioRepository = Depends(get_scenario_repo),
) -> dict[str, Any]:
    if not repo.delete(scenario_id):
        raise HTTPException(status_code=404, detail=f"unknown scenario: {scenario_id}")
    return {"deleted": scenario_id}
