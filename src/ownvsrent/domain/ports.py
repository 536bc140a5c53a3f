# src/ownvsrent/domain/ports.py
from __future__ import annotations

from typing import Any, Protocol, TypedDict


# ----------------------------
# Saved scenarios
# ----------------------------

class SavedScenario(TypedDict):
    id: str
    name: str
    description: str | None
    parameters: dict[str, Any]
    created_at: str  # ISO-8601, UTC


class ScenarioRepository(Protocol):
    def save(
        self,
        name: str,
        parameters: dict[str, Any],
        description: str | None = None,
    ) -> SavedScenario:
        ...

    def get(self, scenario_id: str) -> SavedScenario | None:
        ...

    def list_all(self) -> list[SavedScenario]:
        ...

    def delete(self, scenario_id: str) -> bool:
        ...
