# src/ownvsrent/services/calculations.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ownvsrent.adapters.logging_utils import get_logger
from ownvsrent.domain.parameters import ScenarioParameters
from ownvsrent.domain.results import ChartPoint, ScenarioResult, ScenarioSummary
from ownvsrent.services.scenario import calculate_scenario, chart_data, summarize
from ownvsrent.services.validation import ScenarioValidationError, require_valid

logger = get_logger(__name__)


@dataclass(frozen=True)
class CalculationOutcome:
    result: ScenarioResult | None = None
    summary: ScenarioSummary | None = None
    chart: list[ChartPoint] = field(default_factory=list)
    error: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


def run_calculation(raw: Mapping[str, Any] | ScenarioParameters | None) -> CalculationOutcome:
    """
    Validate, then compute, summarize and sample for charts.

    A failed gate yields an outcome with only `error` set, so callers show the
    message instead of partial numbers.
    """
    try:
        params = require_valid(raw)
    except ScenarioValidationError as e:
        logger.warning(
            "scenario rejected",
            extra={"context": {"error": str(e), "fields": sorted(e.errors) or e.missing}},
        )
        return CalculationOutcome(error=str(e))

    result = calculate_scenario(params)
    return CalculationOutcome(
        result=result,
        summary=summarize(result, params),
        chart=chart_data(result),
    )
